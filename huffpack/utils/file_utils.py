import re
from pathlib import Path
from typing import Dict, Hashable, Mapping

from huffpack.errors import CompressionIOError, MalformedCodeError

# Same line breaks a line-by-line text scanner recognises.
_LINE_BREAK = re.compile(r"\r\n|[\n\r\u2028\u2029\u0085]")


def add_suffix_to_top_level(rel_path: Path, suffix: str) -> Path:
    """
    Add a suffix to the top-level directory name of a relative path.

    Example:
        'corpus/subdir/file1.txt'
        + '_compressed'
        -> 'corpus_compressed/subdir/file1.txt'
    """
    parts = list(rel_path.parts)
    if not parts:
        return Path()
    parts[0] = parts[0] + suffix
    return Path(*parts)


def suffix_filename(path: Path, suffix: str) -> Path:
    """
    Add a suffix before the file extension.

    Example:
        bible.txt + '_codes' -> bible_codes.txt
        README    + '_codes' -> README_codes
    """
    if path.suffix:
        return path.with_name(path.stem + suffix + path.suffix)
    return path.with_name(path.name + suffix)


def join_lines(text: str, line_terminator: str) -> str:
    """Re-terminate every line of `text` (including the last) with `line_terminator`."""
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return "".join(line + line_terminator for line in lines)


def read_corpus(path: Path, encoding: str = "utf-8", line_terminator: str | None = None) -> str:
    """
    Read the text to compress.

    With a line_terminator the text is read line by line and every line is
    followed by that terminator, e.g. '\\r' gives the legacy compressor's input.
    """
    try:
        text = Path(path).read_bytes().decode(encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise CompressionIOError(f"cannot read corpus {path}: {exc}") from exc
    if line_terminator is not None:
        text = join_lines(text, line_terminator)
    return text


def format_code_table(codes: Mapping[Hashable, str], encoding: str = "utf-8") -> bytes:
    """
    Serialise a code table as `<symbol>=<code>\\n` lines.

    A text table is encoded as a whole in `encoding` (one BOM at most, and
    separators in the same encoding as the symbols). Byte symbols (ints) are
    written as one raw byte each.
    """
    if codes and all(isinstance(symbol, int) for symbol in codes):
        return b"".join(
            bytes([symbol]) + b"=" + code.encode("ascii") + b"\n"
            for symbol, code in codes.items()
        )
    text = "".join(f"{symbol}={code}\n" for symbol, code in codes.items())
    return text.encode(encoding)


def parse_code_table(data: bytes, encoding: str = "utf-8", binary: bool = False) -> Dict[Hashable, str]:
    """
    Parse the output of `format_code_table`.

    Entries are read by position (one symbol, '=', digits, newline) rather
    than by splitting on newlines, because '\\n' and '=' are valid symbols.
    With binary=True symbols come back as ints (one byte each).
    """
    if binary:
        content = data
        sep, nl = ord("="), ord("\n")
    else:
        try:
            content = data.decode(encoding)
        except UnicodeDecodeError as exc:
            raise MalformedCodeError(f"code table is not valid {encoding}: {exc}") from exc
        sep, nl = "=", "\n"

    codes: Dict[Hashable, str] = {}
    pos = 0
    while pos < len(content):
        symbol = content[pos]
        if pos + 1 >= len(content) or content[pos + 1] != sep:
            raise MalformedCodeError(f"expected '=' after symbol {symbol!r} at offset {pos}")
        end = content.find(nl, pos + 2)
        if end < 0:
            raise MalformedCodeError(f"unterminated entry for symbol {symbol!r}")
        code = content[pos + 2:end]
        if binary:
            code = code.decode("ascii", errors="replace")
        if not code or not set(code) <= {"0", "1"}:
            raise MalformedCodeError(f"invalid code {code!r} for symbol {symbol!r}")
        if symbol in codes:
            raise MalformedCodeError(f"duplicate entry for symbol {symbol!r}")
        codes[symbol] = code
        pos = end + 1
    return codes


def write_code_table(path: Path, codes: Mapping[Hashable, str], encoding: str = "utf-8") -> None:
    try:
        Path(path).write_bytes(format_code_table(codes, encoding=encoding))
    except OSError as exc:
        raise CompressionIOError(f"cannot write code table {path}: {exc}") from exc


def read_code_table(path: Path, encoding: str = "utf-8", binary: bool = False) -> Dict[Hashable, str]:
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise CompressionIOError(f"cannot read code table {path}: {exc}") from exc
    return parse_code_table(data, encoding=encoding, binary=binary)


def write_payload(path: Path, payload: bytes) -> int:
    """Write the compressed bytes and return how many were written."""
    try:
        Path(path).write_bytes(payload)
    except OSError as exc:
        raise CompressionIOError(f"cannot write payload {path}: {exc}") from exc
    return len(payload)


def read_payload(path: Path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise CompressionIOError(f"cannot read payload {path}: {exc}") from exc
