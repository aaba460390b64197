"""
Command-line entry point.

    huffpack compress bible.txt --codes codes.txt --output compressed.txt
    huffpack decompress compressed.txt --codes codes.txt --output bible_out.txt
    huffpack batch corpus/ out/
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from huffpack.errors import CompressionIOError, HuffmanError
from huffpack.pipeline import (
    CompressionConfig,
    compress_file,
    decompress_file,
    run_batch_on_folder,
)
from huffpack.reporting.report import format_stats

LINE_TERMINATORS = {"none": None, "cr": "\r", "lf": "\n", "crlf": "\r\n"}


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--encoding", default="utf-8", help="Text encoding (default: utf-8).")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="huffpack",
        description="Static Huffman compression of text files.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    compress = sub.add_parser("compress", help="Compress a text file.")
    compress.add_argument("input", help="Text file to compress.")
    compress.add_argument("--codes", default="codes.txt", help="Code table output (default: codes.txt).")
    compress.add_argument(
        "--output", default="compressed.txt", help="Compressed output (default: compressed.txt)."
    )
    compress.add_argument(
        "--framed",
        action="store_true",
        help="Prefix the payload with its bit length so it can be decompressed.",
    )
    compress.add_argument(
        "--legacy-window",
        action="store_true",
        help="Leave the last symbol out of the frequency count (legacy behaviour).",
    )
    compress.add_argument(
        "--line-terminator",
        choices=sorted(LINE_TERMINATORS),
        default="none",
        help="Re-terminate every line before compressing (legacy: cr). Default: none.",
    )
    _add_common_args(compress)

    decompress = sub.add_parser("decompress", help="Decompress a payload with its code table.")
    decompress.add_argument("payload", help="Compressed file.")
    decompress.add_argument("--codes", required=True, help="Code table written by compress.")
    decompress.add_argument(
        "--bit-length",
        type=int,
        default=None,
        help="Number of encoded bits of a bare payload. When given, no frame header is looked for.",
    )
    decompress.add_argument("--output", default="", help="Write the text here instead of stdout.")
    _add_common_args(decompress)

    batch = sub.add_parser("batch", help="Compress every file under a folder.")
    batch.add_argument("input_root", help="Folder with text files.")
    batch.add_argument("output_root", help="Folder for codes, payloads and report.")
    batch.add_argument(
        "--report-formats",
        default="csv,json",
        help="Comma-separated list of formats: csv,json (default: csv,json).",
    )
    batch.add_argument(
        "--no-frame",
        action="store_true",
        help="Write bare payloads (no round-trip check in the report).",
    )
    _add_common_args(batch)

    return parser.parse_args(argv)


def _run(args: argparse.Namespace) -> None:
    if args.command == "compress":
        cfg = CompressionConfig(
            encoding=args.encoding,
            line_terminator=LINE_TERMINATORS[args.line_terminator],
            exclude_last_symbol=args.legacy_window,
            framed=args.framed,
        )
        stats = compress_file(Path(args.input), Path(args.codes), Path(args.output), cfg)
        print(format_stats(stats))
    elif args.command == "decompress":
        cfg = CompressionConfig(encoding=args.encoding)
        out_path = Path(args.output) if args.output else None
        text = decompress_file(
            Path(args.payload),
            Path(args.codes),
            out_path=out_path,
            bit_length=args.bit_length,
            cfg=cfg,
        )
        if out_path is None:
            sys.stdout.write(text)
    elif args.command == "batch":
        formats = tuple(fmt.strip() for fmt in args.report_formats.split(",") if fmt.strip())
        cfg = CompressionConfig(
            encoding=args.encoding,
            framed=not args.no_frame,
            report_formats=formats,
        )
        results = run_batch_on_folder(Path(args.input_root), Path(args.output_root), cfg)
        print(f"Compressed {len(results)} file(s) into {args.output_root}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        _run(args)
    except (HuffmanError, CompressionIOError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
