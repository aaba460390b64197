"""Static Huffman compression of text corpora."""

from huffpack.errors import (
    CompressionIOError,
    EmptyInputError,
    HuffmanError,
    MalformedCodeError,
    UnknownSymbolError,
)

__version__ = "0.1.0"

__all__ = [
    "CompressionIOError",
    "EmptyInputError",
    "HuffmanError",
    "MalformedCodeError",
    "UnknownSymbolError",
    "__version__",
]
