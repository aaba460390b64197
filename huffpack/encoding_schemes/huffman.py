import os
import sys
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, Mapping, Sequence

from huffpack.encoding_schemes.frequency import count_frequencies
from huffpack.encoding_schemes.huffman_tree import HuffmanNode, build_huffman_tree
from huffpack.errors import MalformedCodeError, UnknownSymbolError

# Debug logging controlled by environment variable HUFFPACK_DEBUG
_DEBUG = os.environ.get("HUFFPACK_DEBUG", "").lower() in {"1", "true", "yes"}


def _dbg(msg: str) -> None:
    if _DEBUG:
        print(f"[huffman] {msg}", file=sys.stderr)


@dataclass
class HuffmanEncoded:
    """
    Container for Huffman-encoded data.

    - bits: encoded bit string (e.g. '010101...')
    - codes: symbol -> code table needed to decode these bits
    - frequencies: the counts the tree was built from
    - symbol_count: number of symbols that were encoded
    """
    bits: str
    codes: Dict[Hashable, str]
    frequencies: Dict[Hashable, int] = field(default_factory=dict)
    symbol_count: int = 0

    @property
    def bit_length(self) -> int:
        return len(self.bits)


def _check_bitstring(bits: str, what: str) -> None:
    if not bits or not set(bits) <= {"0", "1"}:
        raise MalformedCodeError(f"{what} must be a non-empty string of '0'/'1', got {bits!r}")


def build_code_table(root: HuffmanNode, single_symbol_code: str = "0") -> Dict[Hashable, str]:
    """
    Walk the tree depth-first (left before right) and map each leaf symbol
    to its path, '0' for a left edge and '1' for a right edge.

    A tree made of a single leaf has an empty path, so that symbol gets
    `single_symbol_code` instead.
    """
    if root.is_leaf:
        if not single_symbol_code or not set(single_symbol_code) <= {"0", "1"}:
            raise ValueError(f"single_symbol_code must be a non-empty bitstring, got {single_symbol_code!r}")
        return {root.symbol: single_symbol_code}

    codes: Dict[Hashable, str] = {}
    # explicit stack: skewed distributions give trees deeper than the recursion limit
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = prefix
            continue
        stack.append((node.right, prefix + "1"))
        stack.append((node.left, prefix + "0"))
    return codes


def encode_symbols(symbols: Iterable[Hashable], codes: Mapping[Hashable, str]) -> str:
    """Concatenate the code of every symbol, in input order."""
    parts = []
    for position, symbol in enumerate(symbols):
        try:
            parts.append(codes[symbol])
        except KeyError:
            raise UnknownSymbolError(symbol, position) from None
    return "".join(parts)


def huffman_encode(
    data: Sequence[Hashable],
    exclude_last: bool = False,
    single_symbol_code: str = "0",
) -> HuffmanEncoded:
    """
    Encode a text (or bytes) with a Huffman code built from its own
    symbol frequencies.

    """
    frequencies = count_frequencies(data, exclude_last=exclude_last)
    root = build_huffman_tree(frequencies)
    codes = build_code_table(root, single_symbol_code=single_symbol_code)
    _dbg(f"{len(frequencies)} distinct symbols, root weight {root.weight}")

    bits = encode_symbols(data, codes)
    _dbg(f"encoded {len(data)} symbols into {len(bits)} bits")
    return HuffmanEncoded(
        bits=bits,
        codes=codes,
        frequencies=dict(frequencies),
        symbol_count=len(data),
    )


def reverse_code_table(codes: Mapping[Hashable, str]) -> Dict[str, Hashable]:
    """
    Invert a code table (code -> symbol), checking that it is a usable
    prefix code: every code is a non-empty bitstring, codes are unique and
    none is a prefix of another.
    """
    reverse: Dict[str, Hashable] = {}
    for symbol, code in codes.items():
        _check_bitstring(code, f"code for {symbol!r}")
        if code in reverse:
            raise MalformedCodeError(
                f"symbols {reverse[code]!r} and {symbol!r} share the code {code!r}"
            )
        reverse[code] = symbol

    # after sorting, a code that prefixes another one prefixes its successor
    ordered = sorted(reverse)
    for shorter, longer in zip(ordered, ordered[1:]):
        if longer.startswith(shorter):
            raise MalformedCodeError(f"code {shorter!r} is a prefix of {longer!r}")
    return reverse


def decode_bits(bits: str, codes: Mapping[Hashable, str]) -> list:
    """
    Decode a bit string back into the list of symbols, left to right.

    Raises MalformedCodeError on digits other than '0'/'1', on a path no code
    starts with, or on trailing bits that do not complete a code.
    """
    reverse = reverse_code_table(codes)
    prefixes = {code[:i] for code in reverse for i in range(1, len(code))}

    decoded = []
    current = ""
    for position, bit in enumerate(bits):
        if bit not in "01":
            raise MalformedCodeError(f"invalid digit {bit!r} at bit {position}")
        current += bit
        if current in reverse:
            decoded.append(reverse[current])
            current = ""
        elif current not in prefixes:
            raise MalformedCodeError(f"no code starts with {current!r} (ending at bit {position})")
    if current:
        raise MalformedCodeError(f"bitstream ends inside a code: {current!r}")
    return decoded


def huffman_decode(encoded: HuffmanEncoded):
    """
    Decode HuffmanEncoded back to the original text or bytes.

    """
    symbols = decode_bits(encoded.bits, encoded.codes)
    if encoded.symbol_count and len(symbols) != encoded.symbol_count:
        raise MalformedCodeError(
            f"decoded {len(symbols)} symbols, expected {encoded.symbol_count}"
        )
    if all(isinstance(s, int) for s in encoded.codes):
        return bytes(symbols)
    return "".join(symbols)
