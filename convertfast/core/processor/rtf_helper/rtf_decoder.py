# convertfast/core/processor/rtf_helper/rtf_decoder.py
"""
RTF Decoding Utilities

Encoding detection and decoding of raw RTF bytes into a string for the
text extractor.

Detection order:
    1. BOM
    2. \\ansicpgN declaration in the header
    3. chardet guess (only when confident)
    4. default encoding
"""
import logging
import re
from typing import Optional

import chardet

from convertfast.core.processor.rtf_helper.rtf_constants import (
    CHARDET_MIN_CONFIDENCE,
    CODEPAGE_ENCODING_MAP,
    DEFAULT_ENCODINGS,
)

logger = logging.getLogger("convertfast.rtf.decoder")

_ANSICPG_PATTERN = re.compile(r'\\ansicpg(\d+)')


def detect_bom(data: bytes) -> Optional[str]:
    """
    Detect a byte order mark.

    Args:
        data: Raw file data

    Returns:
        Name of a codec that consumes the BOM, or None
    """
    if data.startswith(b'\xef\xbb\xbf'):
        return 'utf-8-sig'
    elif data.startswith((b'\xff\xfe\x00\x00', b'\x00\x00\xfe\xff')):
        return 'utf-32'
    elif data.startswith((b'\xff\xfe', b'\xfe\xff')):
        return 'utf-16'
    return None


def detect_codepage(content: bytes) -> Optional[str]:
    """
    Read the \\ansicpgN declaration from the RTF header.

    Args:
        content: RTF binary data

    Returns:
        Encoding name, or None when no codepage is declared
    """
    header = content[:1000].decode('ascii', errors='ignore')
    match = _ANSICPG_PATTERN.search(header)
    if not match:
        return None

    codepage = int(match.group(1))
    encoding = CODEPAGE_ENCODING_MAP.get(codepage, 'cp1252')
    logger.debug(f"RTF encoding detected: {encoding} (codepage {codepage})")
    return encoding


def detect_encoding(content: bytes, default_encoding: str = "cp1252") -> str:
    """
    Detect encoding of RTF content.

    Args:
        content: RTF binary data
        default_encoding: Fallback encoding

    Returns:
        Detected encoding string
    """
    if not content:
        return default_encoding

    bom_encoding = detect_bom(content)
    if bom_encoding:
        logger.debug(f"BOM detected: {bom_encoding}")
        return bom_encoding

    codepage_encoding = detect_codepage(content)
    if codepage_encoding:
        return codepage_encoding

    # Plain 7-bit RTF decodes the same under any ASCII-compatible encoding
    if content.isascii():
        return default_encoding

    detected = chardet.detect(content[:10000])
    detected_enc = detected.get('encoding')
    confidence = detected.get('confidence') or 0.0
    if detected_enc and confidence >= CHARDET_MIN_CONFIDENCE:
        logger.debug(f"chardet detected: {detected_enc} (confidence: {confidence})")
        return detected_enc.lower()

    return default_encoding


def decode_content(content: bytes, encoding: Optional[str] = None) -> str:
    """
    Decode RTF binary to string.

    Tries the preferred (or detected) encoding first, then DEFAULT_ENCODINGS,
    and finally falls back to cp1252 with replacement characters.
    A leading BOM never reaches the returned text.

    Args:
        content: RTF binary data
        encoding: Preferred encoding (None to detect)

    Returns:
        Decoded string
    """
    if not content:
        return ""

    encoding = encoding or detect_encoding(content)
    encodings = [encoding] + [e for e in DEFAULT_ENCODINGS if e != encoding]

    for enc in encodings:
        try:
            return _strip_bom(content.decode(enc))
        except (UnicodeDecodeError, LookupError):
            continue

    return content.decode('cp1252', errors='replace')


def _strip_bom(text: str) -> str:
    # Codecs such as utf-16-le or utf-8 keep U+FEFF as a character
    return text[1:] if text.startswith('\uFEFF') else text


__all__ = [
    'detect_bom',
    'detect_codepage',
    'detect_encoding',
    'decode_content',
]
