"""
Unit tests for RTF byte decoding and encoding detection.
"""

import pytest

from convertfast.core.processor.rtf_helper.rtf_decoder import (
    decode_content,
    detect_bom,
    detect_codepage,
    detect_encoding,
)
from convertfast.core.processor.rtf_helper.rtf_file_converter import (
    RTFConvertedData,
    RTFFileConverter,
)

CYRILLIC = "\u041F\u0440\u0438\u0432\u0435\u0442"


class TestDetectBom:
    """Tests for detect_bom."""

    @pytest.mark.parametrize("data,expected", [
        (b"\xef\xbb\xbf{\\rtf1}", "utf-8-sig"),
        (b"\xff\xfe{\x00", "utf-16"),
        (b"\xfe\xff\x00{", "utf-16"),
        (b"\xff\xfe\x00\x00", "utf-32"),
        (b"\x00\x00\xfe\xff", "utf-32"),
        (b"{\\rtf1}", None),
    ])
    def test_bom(self, data, expected):
        assert detect_bom(data) == expected


class TestDetectEncoding:
    """Tests for detect_codepage and detect_encoding."""

    def test_ansicpg_declaration(self):
        assert detect_codepage(b"{\\rtf1\\ansi\\ansicpg1251 text}") == "cp1251"

    def test_unknown_codepage_falls_back_to_cp1252(self):
        assert detect_codepage(b"{\\rtf1\\ansicpg9999 text}") == "cp1252"

    def test_no_codepage(self):
        assert detect_codepage(b"{\\rtf1\\ansi text}") is None

    def test_ascii_uses_default(self):
        assert detect_encoding(b"{\\rtf1 plain}") == "cp1252"
        assert detect_encoding(b"{\\rtf1 plain}", default_encoding="latin-1") == "latin-1"

    def test_empty_uses_default(self):
        assert detect_encoding(b"", default_encoding="cp949") == "cp949"

    def test_bom_wins_over_codepage(self):
        data = b"\xef\xbb\xbf{\\rtf1\\ansicpg1251 x}"
        assert detect_encoding(data) == "utf-8-sig"

    def test_codepage_wins_over_content(self):
        data = b"{\\rtf1\\ansicpg1251 " + CYRILLIC.encode("cp1251") + b"}"
        assert detect_encoding(data) == "cp1251"


class TestDecodeContent:
    """Tests for decode_content."""

    def test_empty(self):
        assert decode_content(b"") == ""

    def test_declared_encoding(self):
        assert decode_content(CYRILLIC.encode("cp1251"), "cp1251") == CYRILLIC

    def test_falls_back_when_encoding_fails(self):
        assert decode_content(b"caf\xe9", "utf-8") == "caf\u00E9"

    def test_unknown_codec_falls_back(self):
        assert decode_content(b"abc", "no-such-codec") == "abc"

    def test_utf8_bom_stripped(self):
        assert decode_content(b"\xef\xbb\xbf{\\rtf1}") == "{\\rtf1}"

    @pytest.mark.parametrize("codec", ["utf-16-le", "utf-16-be", "utf-32-le"])
    def test_utf16_and_utf32_bom_stripped(self, codec):
        data = "\ufeff{\\rtf1 Hello}".encode(codec)
        assert decode_content(data) == "{\\rtf1 Hello}"

    def test_bom_stripped_with_explicit_codec(self):
        data = "\ufeff{\\rtf1}".encode("utf-16-le")
        assert decode_content(data, "utf-16-le") == "{\\rtf1}"


class TestRTFFileConverter:
    """Tests for RTFFileConverter."""

    @pytest.fixture
    def file_converter(self):
        return RTFFileConverter()

    def test_convert(self, file_converter):
        data = b"{\\rtf1\\ansi\\ansicpg1251 " + CYRILLIC.encode("cp1251") + b"}"
        converted = file_converter.convert(data)

        assert isinstance(converted, RTFConvertedData)
        assert converted.encoding == "cp1251"
        assert converted.original_size == len(data)
        assert CYRILLIC in converted.content

    def test_forced_encoding(self, file_converter):
        converted = file_converter.convert(b"{\\rtf1 caf\xe9}", encoding="latin-1")
        assert converted.encoding == "latin-1"
        assert converted.content == "{\\rtf1 caf\u00E9}"

    def test_default_encoding(self):
        converted = RTFFileConverter(default_encoding="latin-1").convert(b"{\\rtf1 x}")
        assert converted.encoding == "latin-1"

    def test_utf16_document(self, file_converter):
        converted = file_converter.convert("\ufeff{\\rtf1 Hi}".encode("utf-16-be"))
        assert converted.encoding == "utf-16"
        assert converted.content == "{\\rtf1 Hi}"

    @pytest.mark.parametrize("data,expected", [
        (b"{\\rtf1 x}", True),
        (b"\xef\xbb\xbf  {\\rtf1 x}", True),
        (b"\r\n{\\rtf1 x}", True),
        ("\ufeff{\\rtf1 x}".encode("utf-16-le"), True),
        ("\ufeff {\\rtf1 x}".encode("utf-16-be"), True),
        ("\ufeff{\\rtf1 x}".encode("utf-32-le"), True),
        (b"just text", False),
        (b"plain", False),
        (b"", False),
    ])
    def test_validate(self, file_converter, data, expected):
        assert file_converter.validate(data) is expected

    def test_format_name(self, file_converter):
        assert file_converter.get_format_name() == "RTF Document"
