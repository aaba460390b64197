"""
Error kinds raised by the Huffman codec and its file helpers.

Codec errors derive from `HuffmanError`; I/O failures are wrapped in
`CompressionIOError` so callers can tell the two apart.
"""


class HuffmanError(Exception):
    """Base class for codec errors."""


class EmptyInputError(HuffmanError, ValueError):
    """Raised when there are no symbols to build a tree from."""


class UnknownSymbolError(HuffmanError, KeyError):
    """Raised when a symbol to encode has no entry in the code table."""

    def __init__(self, symbol, position: int | None = None):
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"No Huffman code for symbol {symbol!r}{where}")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return self.args[0]


class MalformedCodeError(HuffmanError, ValueError):
    """Raised by the decode side: bad code tables, truncated streams, bad frames."""


class CompressionIOError(OSError):
    """Reading the corpus or writing/reading outputs failed."""
