"""
Unit tests for the RTF text extractor.
"""

import pytest

from convertfast.core.processor.rtf_helper import (
    ControlWord,
    RTFTextExtractor,
    extract_rtf_text,
    normalize_output,
    read_control_word,
)
from convertfast.core.processor.rtf_helper.rtf_text_extractor import (
    read_destination_word,
)


class TestBasicExtraction:
    """Core behaviour of extract()."""

    def test_empty_input(self, extractor):
        assert extractor.extract("") == ""

    def test_plain_text_passes_through(self, extractor):
        assert extractor.extract("Hello world") == "Hello world"

    def test_font_table_discarded(self, extractor):
        assert extractor.extract("{\\fonttbl{\\f0 Arial;}}Hello") == "Hello"

    def test_par_becomes_newline(self, extractor):
        assert extractor.extract("A\\parB") == "A\nB"

    def test_line_becomes_newline(self, extractor):
        assert extractor.extract("A\\line B") == "A\nB"

    def test_tab(self, extractor):
        assert extractor.extract("A\\tab B") == "A\tB"

    def test_sample_document(self, extractor, sample_rtf, sample_text):
        assert extractor.extract(sample_rtf) == sample_text

    def test_raw_newlines_dropped(self, extractor):
        assert extractor.extract("Hel\nlo\r\n world") == "Hello world"

    def test_unknown_control_words_ignored(self, extractor):
        assert extractor.extract("\\b Bold\\b0  text") == "Bold text"

    def test_module_level_function(self):
        assert extract_rtf_text("{\\rtf1\\ansi Hello\\par World}") == "Hello\nWorld"


class TestEscapes:
    """Control symbols, hex escapes and \\u."""

    def test_hex_escape(self, extractor):
        assert extractor.extract("\\'41") == "A"

    def test_hex_escape_latin1_range(self, extractor):
        assert extractor.extract("caf\\'e9") == "caf\u00E9"

    def test_invalid_hex_emits_nothing(self, extractor):
        assert extractor.extract("\\'zz") == ""

    def test_partial_hex_is_rejected(self, extractor):
        assert extractor.extract("\\'4Gx") == "x"

    def test_truncated_hex(self, extractor):
        assert extractor.extract("ab\\'4") == "ab"

    def test_unicode_with_fallback(self, extractor):
        assert extractor.extract("\\u65?") == "A"

    def test_unicode_fallback_between_letters(self, extractor):
        assert extractor.extract("\\u233?t\\u233?") == "\u00E9t\u00E9"

    def test_unicode_negative_parameter(self, extractor):
        assert extractor.extract("\\u-4064?") == chr(61472)

    def test_unicode_fallback_not_consumed_before_brace(self, extractor):
        assert extractor.extract("x\\u233}y") == "x\u00E9y"

    def test_unicode_space_delimiter_then_fallback(self, extractor):
        assert extractor.extract("\\u8364 Xok") == "\u20ACok"

    def test_surrogate_pair_joined(self, extractor):
        assert extractor.extract("\\u-10179?\\u-8704?") == "\U0001F600"

    def test_escaped_percent(self, extractor):
        assert extractor.extract("50\\%") == "50%"

    def test_escaped_braces(self, extractor):
        assert extractor.extract("\\{a\\}") == "{a}"

    def test_escaped_backslash(self, extractor):
        assert extractor.extract("a\\\\b") == "a\\b"

    @pytest.mark.parametrize("source,expected", [
        ("A\\~B", "A\u00A0B"),
        ("A\\-B", "A\u00ADB"),
        ("A\\_B", "A\u2011B"),
    ])
    def test_special_symbols(self, extractor, source, expected):
        assert extractor.extract(source) == expected

    @pytest.mark.parametrize("word,expected", [
        ("lquote", "\u2018"),
        ("rquote", "\u2019"),
        ("ldblquote", "\u201C"),
        ("rdblquote", "\u201D"),
        ("bullet", "\u2022"),
        ("endash", "\u2013"),
        ("emdash", "\u2014"),
    ])
    def test_typographic_words(self, extractor, word, expected):
        assert extractor.extract(f"a\\{word} b") == f"a{expected}b"

    def test_trailing_backslash(self, extractor):
        assert extractor.extract("abc\\") == "abc"

    def test_unicode_without_parameter_at_end(self, extractor):
        assert extractor.extract("ab\\u") == "ab"

    def test_unicode_at_end_without_fallback(self, extractor):
        assert extractor.extract("ab\\u65") == "abA"


class TestGroups:
    """Group nesting and discarded destinations."""

    def test_nested_skip_group(self, extractor):
        assert extractor.extract("{\\header {\\b bold} text}visible") == "visible"

    def test_ignorable_destination(self, extractor):
        assert extractor.extract("{\\*\\generator Writer 1.0;}Text") == "Text"

    def test_plain_group_kept(self, extractor):
        assert extractor.extract("{\\b bold} plain") == "bold plain"

    def test_escaped_open_brace_deepens_skip_group(self, extractor):
        assert extractor.extract("{\\fonttbl \\{ not a group}shown") == ""
        assert extractor.extract("{\\fonttbl \\{ x}hidden}shown") == "shown"

    def test_escaped_close_brace_ends_skip_group(self, extractor):
        assert extractor.extract("{\\fonttbl a\\}b}Hello") == "bHello"

    def test_nested_group_with_ignorable_marker(self, extractor):
        assert extractor.extract("{\\info{\\*\\x}}tail") == "tail"

    def test_uppercase_after_asterisk_not_discarded(self, extractor):
        assert extractor.extract("{\\*Xy}z") == "*Xyz"

    def test_info_group_discarded(self, extractor):
        assert extractor.extract("{\\info{\\title Secret}}Body") == "Body"

    def test_unclosed_groups(self, extractor):
        assert extractor.extract("{{{unclosed") == "unclosed"

    def test_unmatched_closing_braces(self, extractor):
        assert extractor.extract("}}abc{") == "abc"

    def test_text_after_skip_group_at_same_depth(self, extractor):
        source = "{\\rtf1{\\colortbl;\\red0;}{\\pict 0a0b0c}Kept}"
        assert extractor.extract(source) == "Kept"


class TestNormalization:
    """Post-processing of the scanned text."""

    def test_blank_lines_collapsed(self, extractor):
        assert extractor.extract("A\\par\\par\\par B") == "A\n\nB"

    def test_single_blank_line_kept(self, extractor):
        assert extractor.extract("A\\par\\par B") == "A\n\nB"

    def test_whitespace_trimmed(self, extractor):
        assert extractor.extract("\\par  Hi \\par") == "Hi"

    def test_normalize_output_direct(self):
        assert normalize_output("\n\na\n\n\n\n\nb  ") == "a\n\nb"

    def test_lone_surrogate_kept(self):
        assert normalize_output("a\ud83db") == "a\ud83db"

    def test_idempotent_on_plain_line(self, extractor):
        once = extractor.extract("{\\rtf1 Plain words here}")
        assert extractor.extract(once) == once


class TestControlWordReader:
    """Tests for read_control_word and read_destination_word."""

    def test_word_without_parameter(self):
        assert read_control_word("par", 0) == (ControlWord("par"), 3)

    def test_negative_parameter_and_delimiter(self):
        assert read_control_word("fi-360 x", 0) == (ControlWord("fi", -360), 7)

    def test_lone_minus_has_no_parameter(self):
        assert read_control_word("b-x", 0) == (ControlWord("b", None), 2)

    def test_uppercase_ends_word(self):
        word, pos = read_control_word("parB", 0)
        assert word.name == "par"
        assert pos == 3

    def test_empty_word(self):
        assert read_control_word("%", 0) == (ControlWord(""), 0)

    def test_destination_word(self):
        assert read_destination_word("{\\fonttbl{", 1) == "fonttbl"
        assert read_destination_word("{\\*\\foo", 1) == "*"
        assert read_destination_word("{abc", 1) == ""
        assert read_destination_word("{\\*X", 1) == "*X"


class TestCustomExtractor:
    """RTFTextExtractor with non-default tables."""

    def test_custom_substitutions(self):
        extractor = RTFTextExtractor(substitutions={"par": " / "})
        assert extractor.extract("a\\par b") == "a / b"

    def test_custom_skip_destinations(self):
        extractor = RTFTextExtractor(skip_destinations={"footnote"})
        assert extractor.extract("Text{\\footnote note}") == "Text"
        assert extractor.extract("{\\fonttbl x}") == "x"

    def test_tables_are_copies(self, extractor):
        extractor.substitutions["par"] = "X"
        assert extractor.extract("a\\par b") == "a\nb"
