from dataclasses import dataclass


@dataclass
class CompressionConfig:
    """
    Configuration for the Huffman compression pipeline.
    """
    encoding: str = "utf-8"
    # None keeps the corpus as read; "\r" re-terminates every line like the
    # legacy compressor did.
    line_terminator: str | None = None
    # Legacy quirk: count frequencies over all symbols but the last one.
    exclude_last_symbol: bool = False
    single_symbol_code: str = "0"
    # Prefix the payload with a bit-length header so it can be decompressed.
    framed: bool = False
    codes_suffix: str = "_codes"
    compressed_suffix: str = "_compressed"
    report_formats: tuple[str, ...] = ("csv", "json")
