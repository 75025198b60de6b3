# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""sumbench command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from sumbench import diff, report, versions
from sumbench.bench import run_benchmark, sweep
from sumbench.compare import OPERATORS, compare_values
from sumbench.config import (
    DEFAULT_ENV_PATH,
    PARSERS,
    PREFIX,
    Settings,
    configure_logging,
    load_settings,
    parse_log_level,
    update_env_var,
)
from sumbench.dataset import KINDS, ensure_numeric, load_csv, numeric_columns, promotion_report
from sumbench.errors import ConfigError, SumbenchError
from sumbench.strategies import SCOPES, STRATEGIES

logger = logging.getLogger("sumbench.cli")

DELEGATES: Dict[str, Callable[[Optional[List[str]]], int]] = {
    "diff": diff.main,
    "report": report.main,
    "versions": versions.main,
}


def _int_list(raw: str) -> List[int]:
    try:
        values = [int(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {raw!r}") from None
    if not values or any(v < 0 for v in values):
        raise argparse.ArgumentTypeError(f"expected non-negative integers, got {raw!r}")
    return values


def _strategy_list(raw: str) -> List[str]:
    names = [part.strip() for part in raw.split(",") if part.strip()]
    unknown = [name for name in names if name not in STRATEGIES]
    if unknown or not names:
        raise argparse.ArgumentTypeError(
            f"unknown strategies {', '.join(unknown) or raw!r}; choose from {', '.join(STRATEGIES)}"
        )
    return names


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sumbench", description="Benchmark ways of summing tabular data.")
    parser.add_argument("--env-file", type=Path, default=DEFAULT_ENV_PATH)
    parser.add_argument("--log-level", help="Override SUMBENCH_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Time every strategy on synthetic or CSV data")
    run.add_argument("--sizes", type=_int_list, default=[1_000, 10_000], help="Comma-separated row counts")
    run.add_argument("--columns", type=int, default=10)
    run.add_argument("--kind", choices=KINDS, default="float")
    run.add_argument("--scope", choices=SCOPES, default="columns")
    run.add_argument("--strategies", type=_strategy_list, default=None)
    run.add_argument("--csv", type=Path, help="Benchmark this CSV instead of synthetic data")
    run.add_argument("--numeric-only", action="store_true", help="Drop non-numeric CSV columns")
    run.add_argument("--skipna", action="store_true")
    run.add_argument("--output", type=Path, help="Write results to this CSV file")

    promo = sub.add_parser("promotion", help="Show the memory cost of mixing floats into an int column")
    promo.add_argument("--rows", type=int, default=1_000_000)

    gate = sub.add_parser("gate", help="Fail unless a strategy meets a speedup threshold")
    gate.add_argument("--results", required=True, type=Path)
    gate.add_argument("--strategy", default="vectorized", choices=list(STRATEGIES))
    gate.add_argument("--threshold", type=float, default=1.0)
    gate.add_argument("--op", choices=list(OPERATORS), default="ge")

    cfg = sub.add_parser("config", help="Show settings or update an env file")
    cfg_sub = cfg.add_subparsers(dest="action", required=True)
    cfg_sub.add_parser("show")
    cfg_set = cfg_sub.add_parser("set")
    cfg_set.add_argument("key")
    cfg_set.add_argument("value")

    for name in DELEGATES:
        sub.add_parser(name, help=f"See `sumbench {name} --help`", add_help=False)
    return parser


def cmd_run(args: argparse.Namespace, settings: Settings) -> int:
    if args.csv:
        frame = load_csv(args.csv)
        if args.numeric_only:
            frame = frame[numeric_columns(frame)]
        ensure_numeric(frame)
        results = run_benchmark(
            frame, args.strategies, scope=args.scope, settings=settings, kind=args.csv.stem, skipna=args.skipna
        )
    else:
        results = sweep(
            args.sizes,
            args.columns,
            kind=args.kind,
            scope=args.scope,
            settings=settings,
            strategies=args.strategies,
            skipna=args.skipna,
        )

    print(report.render_table(results))
    if args.output:
        report.write_results_csv(results, args.output)
        logger.info("wrote %d results to %s", len(results), args.output)
    if any(not r.agrees for r in results):
        print("[sumbench] strategies disagree; see warnings above", file=sys.stderr)
        return 1
    return 0


def cmd_promotion(args: argparse.Namespace, settings: Settings) -> int:
    result = promotion_report(args.rows, seed=settings.seed)
    print(f"rows:   {result.rows}")
    print(f"before: {result.before_dtype:<8} {result.before_bytes} bytes")
    print(f"after:  {result.after_dtype:<8} {result.after_bytes} bytes")
    print(f"growth: {result.growth:.2f}x")
    return 0


def cmd_gate(args: argparse.Namespace, settings: Settings) -> int:
    try:
        results = report.read_results_csv(args.results)
    except (FileNotFoundError, ValueError) as exc:
        print(f"[sumbench] unreadable results: {exc}", file=sys.stderr)
        return 2
    rows = [
        r for r in results
        if r.strategy == args.strategy and not r.skipped and r.speedup is not None
    ]
    if not rows:
        print(f"[sumbench] no measured {args.strategy} results in {args.results}", file=sys.stderr)
        return 2
    failed = [r for r in rows if not compare_values(r.speedup, args.threshold, args.op)]
    for r in failed:
        print(
            f"[sumbench] {r.strategy} {r.scope} {r.rows}x{r.columns}: "
            f"speedup {r.speedup:.2f} not {args.op} {args.threshold}",
            file=sys.stderr,
        )
    return 1 if failed else 0


def cmd_config(args: argparse.Namespace, settings: Settings) -> int:
    if args.action == "show":
        for key, value in settings.as_env().items():
            print(f"{key}={value}")
        return 0

    field_name = args.key.upper()
    if field_name.startswith(PREFIX):
        field_name = field_name[len(PREFIX):]
    field_name = field_name.lower()
    parser = PARSERS.get(field_name)
    if parser is None:
        raise ConfigError(f"unknown setting {args.key!r}; expected one of {', '.join(PARSERS)}")
    try:
        parser(args.value)
    except ValueError as exc:
        raise ConfigError(f"{args.key}={args.value!r}: {exc}") from exc
    update_env_var(args.env_file, f"{PREFIX}{field_name.upper()}", args.value)
    return 0


COMMANDS = {
    "run": cmd_run,
    "promotion": cmd_promotion,
    "gate": cmd_gate,
    "config": cmd_config,
}


def _split_global(argv: List[str]) -> int:
    """Index of the first subcommand token, skipping global options."""
    idx = 0
    while idx < len(argv) and argv[idx].startswith("-"):
        idx += 1 if "=" in argv[idx] or argv[idx] in ("-h", "--help") else 2
    return idx


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    idx = _split_global(argv)
    if idx < len(argv) and argv[idx] in DELEGATES:
        args = parser.parse_args(argv[:idx + 1])
        rest = argv[idx + 1:]
    else:
        args = parser.parse_args(argv)
        rest = []

    try:
        if args.command == "config" and args.action == "set":
            # The file being repaired may hold values load_settings rejects.
            settings = Settings()
        else:
            settings = load_settings(args.env_file)
        configure_logging(parse_log_level(args.log_level) if args.log_level else settings.log_level)
        if args.command in DELEGATES:
            return DELEGATES[args.command](rest)
        return COMMANDS[args.command](args, settings)
    except (SumbenchError, ValueError, FileNotFoundError) as exc:
        print(f"[sumbench] {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
