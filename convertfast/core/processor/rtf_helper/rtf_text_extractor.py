# convertfast/core/processor/rtf_helper/rtf_text_extractor.py
"""
RTF Text Extractor

Single-pass extraction of plain text from RTF markup.

The scanner walks the source once, left to right, and never builds a
document tree. Group nesting is tracked with a depth counter and a single
"skipping since depth D" marker, which is enough to discard whole
destination subtrees (font tables, headers, pictures, ...) however deeply
they nest.

Usage:
    from convertfast.core.processor.rtf_helper import extract_rtf_text

    text = extract_rtf_text(r"{\\rtf1\\ansi Hello\\par World}")
    # "Hello\\nWorld"
"""
import logging
import re
import string
from typing import Iterable, List, Mapping, NamedTuple, Optional, Tuple

from convertfast.core.processor.rtf_helper.rtf_constants import (
    CONTROL_SYMBOLS,
    CONTROL_WORD_SUBSTITUTIONS,
    SKIP_DESTINATIONS,
    UNICODE_CONTROL_WORD,
    UNICODE_FALLBACK_STOP_CHARS,
)

logger = logging.getLogger("convertfast.rtf.extractor")

_LETTERS = frozenset(string.ascii_lowercase)
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)
_DESTINATION_CHARS = frozenset(string.ascii_letters) | {'*'}

_BLANK_LINES_PATTERN = re.compile(r'\n{3,}')
_SURROGATE_PATTERN = re.compile('[\ud800-\udfff]')


class ControlWord(NamedTuple):
    """A control keyword token: lowercase letters-only name and optional signed parameter."""
    name: str
    parameter: Optional[int] = None


def read_control_word(source: str, pos: int) -> Tuple[ControlWord, int]:
    """
    Read a control word starting at ``pos`` (just after the backslash).

    Reads a run of lowercase ASCII letters, then an optional parameter
    (``-`` followed by digits), then swallows one space delimiter. RTF
    control words are lowercase, so ``\\parB`` reads as ``par``.

    Args:
        source: RTF text
        pos: Index of the first character after the escape introducer

    Returns:
        Tuple of (ControlWord, index of the first unconsumed character)
    """
    n = len(source)
    start = pos
    while pos < n and source[pos] in _LETTERS:
        pos += 1
    name = source[start:pos]

    parameter = None
    if pos < n and (source[pos] == '-' or source[pos] in _DIGITS):
        param_start = pos
        if source[pos] == '-':
            pos += 1
        digits_start = pos
        while pos < n and source[pos] in _DIGITS:
            pos += 1
        if pos > digits_start:
            parameter = int(source[param_start:pos])

    if pos < n and source[pos] == ' ':
        pos += 1

    return ControlWord(name, parameter), pos


def read_destination_word(source: str, pos: int) -> str:
    """
    Read the keyword opening a group, if any.

    ``pos`` is the index right after ``{``. Returns an empty string when the
    group does not start with a backslash. Letters of either case and
    asterisks are part of the run, so ``{\\*\\foo`` yields ``"*"`` and
    ``{\\*X`` yields ``"*X"``.
    """
    n = len(source)
    if pos >= n or source[pos] != '\\':
        return ""
    start = pos + 1
    end = start
    while end < n and source[end] in _DESTINATION_CHARS:
        end += 1
    return source[start:end]


def normalize_output(text: str) -> str:
    """
    Final cleanup of extracted text.

    Joins UTF-16 surrogate pairs produced by consecutive ``\\u`` escapes,
    collapses three or more newlines to one blank line, and trims.
    """
    if _SURROGATE_PATTERN.search(text):
        text = text.encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'surrogatepass')
    text = _BLANK_LINES_PATTERN.sub('\n\n', text)
    return text.strip()


class _RTFScanner:
    """Per-call scan state. Created and discarded inside one extract() call."""

    def __init__(
        self,
        source: str,
        skip_destinations: frozenset,
        substitutions: Mapping[str, str],
    ):
        self.source = source
        self.length = len(source)
        self.pos = 0
        self.depth = 0
        self.skip_depth: Optional[int] = None
        self.output: List[str] = []
        self._skip_destinations = skip_destinations
        self._substitutions = substitutions

    @property
    def skipping(self) -> bool:
        return self.skip_depth is not None

    def run(self) -> str:
        source = self.source
        while self.pos < self.length:
            ch = source[self.pos]

            if ch == '{':
                self._open_group()
            elif ch == '}':
                self._close_group()
            elif self.skipping:
                self._skip_char()
            elif ch == '\\':
                self._read_escape()
            elif ch == '\r' or ch == '\n':
                self.pos += 1
            else:
                self.output.append(ch)
                self.pos += 1

        if self.depth or self.skipping:
            logger.debug(
                f"RTF scan ended inside an open group "
                f"(depth={self.depth}, skip_depth={self.skip_depth})"
            )

        return ''.join(self.output)

    def _open_group(self) -> None:
        self.depth += 1
        self.pos += 1
        if self.skipping:
            return
        word = read_destination_word(self.source, self.pos)
        if word in self._skip_destinations:
            self.skip_depth = self.depth

    def _close_group(self) -> None:
        if self.skip_depth == self.depth:
            self.skip_depth = None
        if self.depth > 0:
            self.depth -= 1
        self.pos += 1

    def _skip_char(self) -> None:
        # Escapes are not interpreted here; only braces change depth
        self.pos += 1

    def _read_escape(self) -> None:
        source = self.source
        self.pos += 1
        if self.pos >= self.length:
            return

        ch = source[self.pos]

        if ch in CONTROL_SYMBOLS:
            self.output.append(CONTROL_SYMBOLS[ch])
            self.pos += 1
            return

        if ch == "'":
            hex_value = source[self.pos + 1:self.pos + 3]
            if len(hex_value) == 2 and all(c in _HEX_DIGITS for c in hex_value):
                self.output.append(chr(int(hex_value, 16)))
            self.pos = min(self.pos + 3, self.length)
            return

        word, self.pos = read_control_word(source, self.pos)

        if word.name == UNICODE_CONTROL_WORD:
            self._emit_unicode(word.parameter)
            return

        text = self._substitutions.get(word.name)
        if text is not None:
            self.output.append(text)

    def _emit_unicode(self, parameter: Optional[int]) -> None:
        if parameter is not None:
            # Signed 16-bit code unit: -4064 -> 61472
            self.output.append(chr(parameter % 0x10000))

        # Skip the fallback glyph written for readers without \u support
        if self.pos < self.length and self.source[self.pos] not in UNICODE_FALLBACK_STOP_CHARS:
            self.pos += 1


class RTFTextExtractor:
    """
    Plain-text extractor for RTF.

    Holds configuration only (discard set and keyword substitutions); each
    call to extract() scans with fresh state, so one instance can be shared
    freely, including across threads.

    Usage:
        extractor = RTFTextExtractor()
        text = extractor.extract(rtf_string)
    """

    def __init__(
        self,
        skip_destinations: Optional[Iterable[str]] = None,
        substitutions: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize RTFTextExtractor.

        Args:
            skip_destinations: Group keywords whose content is discarded
                (default: SKIP_DESTINATIONS)
            substitutions: Control word to text mapping
                (default: CONTROL_WORD_SUBSTITUTIONS)
        """
        self._skip_destinations = frozenset(
            SKIP_DESTINATIONS if skip_destinations is None else skip_destinations
        )
        self._substitutions = dict(
            CONTROL_WORD_SUBSTITUTIONS if substitutions is None else substitutions
        )

    @property
    def skip_destinations(self) -> frozenset:
        return self._skip_destinations

    @property
    def substitutions(self) -> Mapping[str, str]:
        return dict(self._substitutions)

    def extract(self, source: str) -> str:
        """
        Extract plain text from RTF source.

        Never raises for string input: malformed escapes, invalid hex
        digits and unbalanced braces are absorbed.

        Args:
            source: Full RTF document text (already decoded from bytes)

        Returns:
            Normalized plain text
        """
        if not source:
            return ""

        scanner = _RTFScanner(source, self._skip_destinations, self._substitutions)
        return normalize_output(scanner.run())


_default_extractor = RTFTextExtractor()


def extract_rtf_text(source: str) -> str:
    """
    Extract plain text from RTF source with the default settings.

    Args:
        source: RTF text

    Returns:
        Plain text
    """
    return _default_extractor.extract(source)


__all__ = [
    'ControlWord',
    'RTFTextExtractor',
    'extract_rtf_text',
    'normalize_output',
    'read_control_word',
    'read_destination_word',
]
