from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Iterator, List, TextIO

import pandas as pd

from . import metrics
from .config import (
    WemaConfig,
    find_config_file,
    load_config,
    parse_k,
    parse_window_size,
)
from .exceptions import InvalidParameterError, WemaValidationError
from .indicators.window_ema import WindowExponentialMovingAverage

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wema", description="Windowed exponential moving average")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="Replay values through the indicator and print outputs")
    run_p.add_argument("--k", help="Smoothing coefficient (default: config or 0.5)")
    run_p.add_argument("--window", type=int, help="Window size (default: config or 3)")
    run_p.add_argument("--name", help="Indicator name")
    run_p.add_argument("--config", help="Path to wema.yml (default: discovered in cwd)")
    run_p.add_argument("--input", help="CSV file to read; stdin numbers when omitted")
    run_p.add_argument("--column", default="value", help="CSV column holding the values")
    run_p.add_argument(
        "--decimal",
        action="store_true",
        help="Use decimal arithmetic for k and the input values",
    )
    run_p.add_argument("--metrics-port", type=int, help="Expose Prometheus metrics on this port")
    return parser


def _number_parser(use_decimal: bool) -> Callable[[Any], Any]:
    def parse(token: Any) -> Any:
        try:
            return Decimal(str(token).strip()) if use_decimal else float(token)
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise InvalidParameterError(f"not a number: {token!r}") from exc

    return parse


def _resolve_config(path: str | None) -> WemaConfig:
    cfg_path = path or find_config_file()
    if not cfg_path:
        logger.debug("No wema config file discovered; using defaults")
        return WemaConfig()
    logger.info("Using configuration %s", cfg_path)
    return load_config(cfg_path)


def _iter_values(
    args: argparse.Namespace, parse: Callable[[Any], Any], stdin: TextIO
) -> Iterator[tuple[Any, Any]]:
    if args.input is None:
        i = 0
        for line in stdin:
            for tok in line.split():
                yield i, parse(tok)
                i += 1
        return
    frame = pd.read_csv(args.input, dtype={args.column: str} if args.decimal else None)
    if args.column not in frame.columns:
        raise InvalidParameterError(f"column {args.column!r} not found in {args.input}")
    for ts, v in frame[args.column].items():
        yield ts, parse(v)


def _run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> int:
    cfg = _resolve_config(args.config)
    parse = _number_parser(args.decimal)

    k = parse(args.k) if args.k is not None else parse(cfg.indicator.k)
    parse_k(k)
    window = parse_window_size(args.window if args.window is not None else cfg.indicator.window_size)
    name = args.name if args.name is not None else cfg.indicator.name

    port = args.metrics_port
    if port is None and cfg.metrics.enabled:
        port = cfg.metrics.port
    if port is not None:
        metrics.start_metrics_server(port)
        logger.info("Metrics exposed on port %d", port)

    indicator = WindowExponentialMovingAverage(k, window, name=name)
    for ts, value in _iter_values(args, parse, stdin):
        out = indicator.update((ts, value))
        stdout.write(f"{value}\t{out}\t{int(indicator.is_ready)}\n")
        stdout.flush()
    logger.info("Replayed %d values through %s", indicator.samples, indicator.name)
    return 0


def main(argv: List[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    try:
        return _run(args, stdin or sys.stdin, stdout or sys.stdout)
    except (WemaValidationError, OSError) as exc:
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
