# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Write benchmark results as CSV, fixed-width text and HTML."""

from __future__ import annotations

import argparse
import csv
import html
import math
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from sumbench.bench import FIELDS, BenchmarkResult

REQUIRED = {"strategy", "scope", "rows", "columns", "kind", "best_s"}
TABLE_COLUMNS: List[Tuple[str, str]] = [
    ("strategy", "Strategy"),
    ("scope", "Scope"),
    ("rows", "Rows"),
    ("columns", "Cols"),
    ("kind", "Kind"),
    ("best_s", "Best (s)"),
    ("median_s", "Median (s)"),
    ("speedup", "Speedup"),
    ("agrees", "Agrees"),
]


def _fmt(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, float):
        if math.isnan(value):
            return "nan"
        return f"{value:.6g}"
    return str(value)


def write_results_csv(results: Iterable[BenchmarkResult], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as fh:
        writer = csv.DictWriter(fh, fieldnames=FIELDS)
        writer.writeheader()
        for result in results:
            row = result.as_row()
            writer.writerow({key: "" if row[key] is None else row[key] for key in FIELDS})


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw == "":
        return None
    return float(raw)


def read_results_csv(path: Path) -> List[BenchmarkResult]:
    results: List[BenchmarkResult] = []
    with path.open(newline="") as fh:
        reader = csv.DictReader(fh)
        missing = REQUIRED - set(reader.fieldnames or [])
        if missing:
            raise ValueError(f"{path} missing columns: {', '.join(sorted(missing))}")
        for row in reader:
            results.append(
                BenchmarkResult(
                    strategy=row["strategy"],
                    scope=row["scope"],
                    rows=int(row["rows"]),
                    columns=int(row["columns"]),
                    kind=row["kind"],
                    best_s=_optional_float(row.get("best_s")),
                    median_s=_optional_float(row.get("median_s")),
                    speedup=_optional_float(row.get("speedup")),
                    agrees=row.get("agrees", "True") != "False",
                    skipped=row.get("skipped", "False") == "True",
                    checksum=_optional_float(row.get("checksum")),
                )
            )
    return results


def render_table(results: Sequence[BenchmarkResult]) -> str:
    if not results:
        return "No results."
    rows = []
    for result in results:
        row = result.as_row()
        cells = {key: _fmt(row[key]) for key, _ in TABLE_COLUMNS}
        if result.skipped:
            cells["best_s"] = "skipped"
        rows.append(cells)

    widths = {key: max(len(label), *(len(cells[key]) for cells in rows)) for key, label in TABLE_COLUMNS}
    fmt = "  ".join(f"{{{key}:<{widths[key]}}}" for key, _ in TABLE_COLUMNS)
    header = fmt.format(**{key: label for key, label in TABLE_COLUMNS})
    lines = [header, "-" * len(header)]
    lines.extend(fmt.format(**cells) for cells in rows)
    return "\n".join(lines)


def render_html_table(headers: List[str], rows: List[Dict[str, str]]) -> str:
    if not headers:
        return "<p>No columns reported.</p>"

    head_html = "".join(f"<th>{html.escape(h)}</th>" for h in headers)
    body_rows: List[str] = []
    if not rows:
        body_rows.append(f"<tr><td colspan=\"{len(headers)}\">No rows</td></tr>")
    for row in rows:
        cells = "".join(f"<td>{html.escape(str(row.get(header) or ''))}</td>" for header in headers)
        body_rows.append(f"<tr>{cells}</tr>")
    return f"<table><thead><tr>{head_html}</tr></thead><tbody>{''.join(body_rows)}</tbody></table>"


def load_csv_preview(path: Path, limit: int = 10) -> Tuple[List[str], List[Dict[str, str]], int]:
    headers: List[str] = []
    preview: List[Dict[str, str]] = []
    total = 0
    with path.open(newline="") as fh:
        reader = csv.DictReader(fh)
        headers = list(reader.fieldnames or [])
        for row in reader:
            total += 1
            if len(preview) < limit:
                preview.append(row)
    return headers, preview, total


def render_html(sections: List[str], title: str = "sumbench report", source: str = "") -> str:
    if not sections:
        sections = ["<p>No reports generated.</p>"]
    origin = f"<p>Generated from {html.escape(source)}</p>" if source else ""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{html.escape(title)}</title>
  <style>
    body {{ font-family: sans-serif; margin: 1.5rem; }}
    table {{ border-collapse: collapse; margin-bottom: 1.5rem; width: 100%; }}
    th, td {{ border: 1px solid #ddd; padding: 0.4rem; font-size: 0.9rem; }}
    th {{ background-color: #f2f2f2; text-align: left; }}
    section {{ margin-bottom: 2rem; }}
  </style>
</head>
<body>
  <h1>{html.escape(title)}</h1>
  {origin}
  {chr(10).join(sections)}
</body>
</html>
"""


def build_report(directory: Path, rows: int = 10) -> str:
    """Render every ``*.csv`` under ``directory`` as one HTML section each."""
    sections: List[str] = []
    for path in sorted(directory.glob("*.csv")):
        headers, preview, total = load_csv_preview(path, rows)
        title = html.escape(path.stem.replace("_", " "))
        sections.append(
            f"<section><h2>{title} (showing {len(preview)} of {total})</h2>"
            f"{render_html_table(headers, preview)}</section>"
        )
    return render_html(sections, source=str(directory))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate an HTML summary of benchmark CSVs.")
    parser.add_argument("--input", required=True, type=Path)
    parser.add_argument("--output", required=True, type=Path)
    parser.add_argument("--rows", type=int, default=10, help="Rows per table to render")
    args = parser.parse_args(argv)

    if not args.input.is_dir():
        parser.error(f"{args.input} is not a directory")
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(build_report(args.input, args.rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
