# convertfast/core/processor/rtf_helper/rtf_metadata_extractor.py
"""
RTF Metadata Extractor

Extracts document properties from the {\\info ...} group, which the text
extractor discards. Implements BaseMetadataExtractor interface.
"""
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple, Union

from convertfast.core.functions.metadata_extractor import (
    BaseMetadataExtractor,
    DocumentMetadata,
)
from convertfast.core.processor.rtf_helper.rtf_text_extractor import (
    extract_rtf_text,
)

logger = logging.getLogger("convertfast.rtf.metadata")

# \info sub-group keyword -> DocumentMetadata attribute
INFO_TEXT_FIELDS = {
    'title': 'title',
    'subject': 'subject',
    'author': 'author',
    'keywords': 'keywords',
    'doccomm': 'comments',
    'operator': 'last_saved_by',
}

INFO_DATE_FIELDS = {
    'creatim': 'create_time',
    'revtim': 'last_saved_time',
}

_DATE_PARTS_PATTERN = re.compile(r'\\(yr|mo|dy|hr|min)(\d+)')


def find_group(content: str, keyword: str, start: int = 0) -> Optional[Tuple[int, int]]:
    """
    Locate the group opened by ``{\\keyword``.

    Args:
        content: RTF text
        keyword: Control word that opens the group
        start: Index to search from

    Returns:
        (body_start, body_end) where body_start is just after the keyword and
        its delimiter, and body_end is the index of the closing brace (or the
        end of content for an unterminated group). None when not found.
    """
    match = re.compile(r'\{\\' + re.escape(keyword) + r'(?![a-z])').search(content, start)
    if not match:
        return None

    pos = match.end()
    if pos < len(content) and content[pos] == ' ':
        pos += 1
    body_start = pos

    depth = 1
    n = len(content)
    while pos < n:
        ch = content[pos]
        if ch == '\\':
            pos += 2
            continue
        if ch == '{':
            depth += 1
        elif ch == '}':
            depth -= 1
            if depth == 0:
                return body_start, pos
        pos += 1

    return body_start, n


@dataclass
class RTFSourceInfo:
    """
    Source information for RTF metadata extraction.

    Container for data passed to RTFMetadataExtractor.extract().
    """
    content: str
    encoding: str = "cp1252"


class RTFMetadataExtractor(BaseMetadataExtractor):
    """
    RTF Metadata Extractor.

    Supported fields:
    - title, subject, author, keywords, comments (doccomm)
    - last_saved_by (operator), create_time (creatim), last_saved_time (revtim)

    Usage:
        extractor = RTFMetadataExtractor()
        metadata = extractor.extract(RTFSourceInfo(content=rtf_content))
        text = extractor.format(metadata)
    """

    def extract(self, source: Union[RTFSourceInfo, Dict[str, Any]]) -> DocumentMetadata:
        """
        Extract metadata from RTF content.

        Args:
            source: RTFSourceInfo object OR Dict[str, Any] (pre-parsed metadata)

        Returns:
            DocumentMetadata instance
        """
        if isinstance(source, dict):
            return DocumentMetadata.from_dict(source)

        span = find_group(source.content, 'info')
        if span is None:
            return DocumentMetadata()

        info = source.content[span[0]:span[1]]
        values: Dict[str, Any] = {}

        for keyword, attr in INFO_TEXT_FIELDS.items():
            field_span = find_group(info, keyword)
            if field_span is None:
                continue
            value = extract_rtf_text(info[field_span[0]:field_span[1]])
            if value:
                values[attr] = value

        for keyword, attr in INFO_DATE_FIELDS.items():
            field_span = find_group(info, keyword)
            if field_span is None:
                continue
            value = self._parse_date(info[field_span[0]:field_span[1]])
            if value:
                values[attr] = value

        self.logger.debug(f"Extracted RTF metadata fields: {sorted(values)}")
        return DocumentMetadata(**values)

    def _parse_date(self, body: str) -> Optional[datetime]:
        """Parse a \\yrN\\moN\\dyN[\\hrN][\\minN] sequence."""
        parts = {name: int(value) for name, value in _DATE_PARTS_PATTERN.findall(body)}
        try:
            return datetime(
                parts['yr'],
                parts['mo'],
                parts['dy'],
                parts.get('hr', 0),
                parts.get('min', 0),
            )
        except (KeyError, ValueError):
            return None


__all__ = [
    'RTFMetadataExtractor',
    'RTFSourceInfo',
    'find_group',
]
