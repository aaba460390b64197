from __future__ import annotations

import argparse
import csv
import json
import statistics
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence

from huffpack.utils.file_utils import add_suffix_to_top_level, suffix_filename

if TYPE_CHECKING:
    from huffpack.encoding_schemes.huffman import HuffmanEncoded

REPORT_COLUMNS = [
    "input_path",
    "status",
    "original_size_bytes",
    "compressed_size_bytes",
    "compression_ratio_percent",
    "decoded_size_bytes",
    "success",
]


@dataclass
class CompressionStats:
    original_bits: int
    compressed_bits: int
    ratio_percent: float
    elapsed_seconds: float
    symbol_count: int = 0
    alphabet_size: int = 0
    average_code_length: float = 0.0


def compute_stats(
    original_bytes: int,
    compressed_bytes: int,
    encoded: Optional["HuffmanEncoded"] = None,
    elapsed_seconds: float = 0.0,
) -> CompressionStats:
    """
    Size statistics for one compression run.

    The ratio is compressed size over original size, in percent (smaller is better).
    """
    ratio = compressed_bytes / original_bytes * 100 if original_bytes else 0.0
    stats = CompressionStats(
        original_bits=original_bytes * 8,
        compressed_bits=compressed_bytes * 8,
        ratio_percent=ratio,
        elapsed_seconds=elapsed_seconds,
    )
    if encoded is not None:
        stats.symbol_count = encoded.symbol_count
        stats.alphabet_size = len(encoded.codes)
        if encoded.symbol_count:
            stats.average_code_length = encoded.bit_length / encoded.symbol_count
    return stats


def format_stats(stats: CompressionStats) -> str:
    rule = "-" * 56
    lines = [
        "The statistics for my Huffman Coding implementation",
        rule,
        f"The original file size: {stats.original_bits} bits",
        f"The compressed file size: {stats.compressed_bits} bits",
        f"The compression ratio: {stats.ratio_percent:.0f}%",
        f"The elapsed time for encoding and packing: {stats.elapsed_seconds:.3f} seconds",
        rule,
    ]
    return "\n".join(lines)


def _expected_output_path(
    input_file: Path,
    input_root: Path,
    output_root: Path,
    folder: str,
    suffix: str,
) -> Path:
    rel_path = input_file.relative_to(input_root)
    rel_dir = add_suffix_to_top_level(rel_path.parent, suffix)
    rel_file = suffix_filename(Path(rel_path.name), suffix)
    return output_root / folder / rel_dir / rel_file.name


def _iter_files(root: Path) -> Iterable[Path]:
    return sorted(p for p in root.rglob("*") if p.is_file())


def _format_csv_value(value: object) -> object:
    if value is None:
        return ""
    return value


def generate_report(
    input_root: Path,
    output_root: Path,
    report_dir: Path,
    formats: Sequence[str] = ("csv", "json"),
    compressed_suffix: str = "_compressed",
    decoded_suffix: str = "_decoded",
) -> Dict[str, object]:
    """
    Compare a batch output tree against its inputs: compressed sizes and
    whether the decoded copy matches the original byte for byte.
    """
    input_root = input_root.resolve()
    output_root = output_root.resolve()
    report_dir = report_dir.resolve()

    rows: List[Dict[str, object]] = []
    total_original_bytes = 0
    total_compressed_bytes = 0
    success_count = 0
    ratios: List[float] = []

    for input_file in _iter_files(input_root):
        rel_path = input_file.relative_to(input_root)
        compressed_path = _expected_output_path(
            input_file, input_root, output_root, "out_compressed", compressed_suffix
        )
        decoded_path = _expected_output_path(
            input_file, input_root, output_root, "out_decoded", decoded_suffix
        )
        row: Dict[str, object] = {
            "input_path": str(rel_path),
            "status": "ok",
        }

        original_bytes = input_file.read_bytes()
        total_original_bytes += len(original_bytes)
        row["original_size_bytes"] = len(original_bytes)

        if not compressed_path.exists():
            row["compressed_size_bytes"] = None
            row["compression_ratio_percent"] = None
            row["decoded_size_bytes"] = None
            row["success"] = False
            row["status"] = "missing_compressed"
            rows.append(row)
            continue

        compressed_size = compressed_path.stat().st_size
        total_compressed_bytes += compressed_size
        row["compressed_size_bytes"] = compressed_size
        stats = compute_stats(len(original_bytes), compressed_size)
        row["compression_ratio_percent"] = stats.ratio_percent
        ratios.append(stats.ratio_percent)

        if decoded_path.exists():
            decoded_bytes = decoded_path.read_bytes()
            row["decoded_size_bytes"] = len(decoded_bytes)
            success = decoded_bytes == original_bytes
            row["success"] = success
            if success:
                success_count += 1
        else:
            row["decoded_size_bytes"] = None
            row["success"] = False
            row["status"] = "missing_decoded"

        rows.append(row)

    report_dir.mkdir(parents=True, exist_ok=True)
    formats = [fmt.lower() for fmt in formats]

    summary = {
        "total_files": len(rows),
        "compressed_present": len(ratios),
        "success_count": success_count,
        "success_rate": (success_count / len(rows)) if rows else 0.0,
        "total_original_bytes": total_original_bytes,
        "total_compressed_bytes": total_compressed_bytes,
        "overall_ratio_percent": (
            total_compressed_bytes / total_original_bytes * 100 if total_original_bytes else 0.0
        ),
        "median_ratio_percent": statistics.median(ratios) if ratios else 0.0,
    }

    meta = {
        "input_root": str(input_root),
        "output_root": str(output_root),
        "report_dir": str(report_dir),
        "generated_at_utc": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }

    if "csv" in formats:
        csv_path = report_dir / "report.csv"
        with csv_path.open("w", newline="", encoding="utf-8") as csv_file:
            writer = csv.DictWriter(csv_file, fieldnames=REPORT_COLUMNS)
            writer.writeheader()
            for row in rows:
                writer.writerow({k: _format_csv_value(row.get(k)) for k in REPORT_COLUMNS})

    if "json" in formats:
        json_path = report_dir / "report.json"
        report_payload = {"meta": meta, "summary": summary, "files": rows}
        json_path.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")

    return {"meta": meta, "summary": summary, "files": rows}


def stats_to_dict(stats: CompressionStats) -> Dict[str, object]:
    return asdict(stats)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate compression reports for a batch output tree.",
    )
    parser.add_argument("--input-root", required=True, help="Path to original corpus root.")
    parser.add_argument("--output-root", required=True, help="Path to batch output root.")
    parser.add_argument(
        "--report-dir",
        default="",
        help="Output directory for reports (default: <output-root>/report).",
    )
    parser.add_argument(
        "--formats",
        default="csv,json",
        help="Comma-separated list of formats: csv,json (default: csv,json).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    input_root = Path(args.input_root)
    output_root = Path(args.output_root)
    report_dir = Path(args.report_dir) if args.report_dir else output_root / "report"
    formats = [fmt.strip() for fmt in args.formats.split(",") if fmt.strip()]
    generate_report(
        input_root=input_root,
        output_root=output_root,
        report_dir=report_dir,
        formats=formats,
    )
    print(f"Report written to {report_dir}")


if __name__ == "__main__":
    main()
