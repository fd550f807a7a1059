# convertfast/core/processor/rtf_helper/rtf_constants.py
"""
RTF Constants

Constants used for RTF text extraction and decoding.
"""

# Groups whose leading keyword marks them as non-text (discarded with all nested groups).
# '*' is the generic "ignorable destination" marker.
SKIP_DESTINATIONS = frozenset({
    'fonttbl', 'colortbl', 'stylesheet', 'info',
    'header', 'footer',
    'headerl', 'headerr', 'headerf',
    'footerl', 'footerr', 'footerf',
    'pict', 'object', 'fldinst',
    '*',
})

# Control symbols: backslash followed by a single non-letter
CONTROL_SYMBOLS = {
    '\\': '\\',
    '{': '{',
    '}': '}',
    '~': '\u00A0',  # non-breaking space
    '-': '\u00AD',  # soft hyphen
    '_': '\u2011',  # non-breaking hyphen
}

# Control words that emit text. Anything not listed here is ignored.
CONTROL_WORD_SUBSTITUTIONS = {
    'par': '\n',
    'line': '\n',
    'tab': '\t',
    'lquote': '\u2018',
    'rquote': '\u2019',
    'ldblquote': '\u201C',
    'rdblquote': '\u201D',
    'bullet': '\u2022',
    'endash': '\u2013',
    'emdash': '\u2014',
}

# \uN control word
UNICODE_CONTROL_WORD = 'u'

# Characters that are never swallowed as the \uN fallback glyph
UNICODE_FALLBACK_STOP_CHARS = frozenset('\\{}')

RTF_MAGIC = '{\\rtf'

# Codepage to encoding mapping (\ansicpgN)
CODEPAGE_ENCODING_MAP = {
    437: 'cp437',
    850: 'cp850',
    852: 'cp852',
    855: 'cp855',
    857: 'cp857',
    860: 'cp860',
    861: 'cp861',
    863: 'cp863',
    865: 'cp865',
    866: 'cp866',
    869: 'cp869',
    874: 'cp874',
    932: 'cp932',     # Japanese
    936: 'gb2312',    # Simplified Chinese
    949: 'cp949',     # Korean
    950: 'big5',      # Traditional Chinese
    1250: 'cp1250',   # Central European
    1251: 'cp1251',   # Cyrillic
    1252: 'cp1252',   # Western European
    1253: 'cp1253',   # Greek
    1254: 'cp1254',   # Turkish
    1255: 'cp1255',   # Hebrew
    1256: 'cp1256',   # Arabic
    1257: 'cp1257',   # Baltic
    1258: 'cp1258',   # Vietnamese
    10000: 'mac_roman',
    65001: 'utf-8',
}

# Fallback encodings to try, in order
DEFAULT_ENCODINGS = ['utf-8', 'cp1252', 'cp949', 'latin-1']

# Minimum chardet confidence to trust its guess
CHARDET_MIN_CONFIDENCE = 0.7


__all__ = [
    'SKIP_DESTINATIONS',
    'CONTROL_SYMBOLS',
    'CONTROL_WORD_SUBSTITUTIONS',
    'UNICODE_CONTROL_WORD',
    'UNICODE_FALLBACK_STOP_CHARS',
    'RTF_MAGIC',
    'CODEPAGE_ENCODING_MAP',
    'DEFAULT_ENCODINGS',
    'CHARDET_MIN_CONFIDENCE',
]
