"""
dmx-address: DMX-512 address value type and parser.

Understands dotted notation (``"1.234"``) and absolute addresses
(``"1024"``). Parsing never crashes on bad input; failures carry a
ParseErrorKind describing what was wrong.
"""

__version__ = "0.1.0"

from dmx_address.address import DMXAddress, ParseResult, parse_dmx_address, try_parse
from dmx_address.config import ParserSettings
from dmx_address.exceptions import DMXAddressError, DMXParseError, ParseErrorKind
from dmx_address.log import configure_logging

__all__ = [
    "DMXAddress",
    "ParseResult",
    "parse_dmx_address",
    "try_parse",
    "ParserSettings",
    "DMXAddressError",
    "DMXParseError",
    "ParseErrorKind",
    "configure_logging",
    "__version__",
]
