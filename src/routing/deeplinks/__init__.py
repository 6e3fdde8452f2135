"""
Exports públicos do módulo routing/deeplinks.

Parser puro de deep links e seus tipos de resultado.
"""

from routing.deeplinks.errors import ParseError, ParseErrorKind, ParseResult
from routing.deeplinks.parser import DEFAULT_SCHEME, parse_deep_link, split_segments

__all__ = [
    "DEFAULT_SCHEME",
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
    "parse_deep_link",
    "split_segments",
]
