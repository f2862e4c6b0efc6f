from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from tunnel_guard.adapters import factory
from tunnel_guard.config.loader import ConfigError, load_config
from tunnel_guard.observability.logging import LogSink, ScanLogger
from tunnel_guard.usecases.config_models import AppConfig
from tunnel_guard.usecases.steps.format_result import FormatResult
from tunnel_guard.usecases.steps.parse_steps import ParseSteps
from tunnel_guard.usecases.validate_tunnel import ValidateTunnel

# argparse already uses 2 for usage errors.
EXIT_INPUT_ERROR = 1
EXIT_CONFIG_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tunnel-guard",
        description="Find the first step that is not a sum of two of the preceding steps",
    )
    parser.add_argument("--input", required=True, help="Path to input file, one step per line ('-' for stdin)")
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--window-length", type=int, help="Override scan.window_length")
    parser.add_argument("--output", help="Override output file path ('-' for stdout)")
    parser.add_argument("--format", choices=["text", "json"], help="Override output format")
    parser.add_argument("--index-base", type=int, choices=[0, 1], help="Override displayed index base")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Override logging level",
    )
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    # CLI flags take precedence over config values; validation runs again on the merged result.
    data = config.model_dump(by_alias=False)
    if args.window_length is not None:
        data["scan"]["window_length"] = args.window_length
    if args.output is not None:
        data["output"]["file_path"] = args.output
    if args.format is not None:
        data["output"]["format"] = args.format
    if args.index_base is not None:
        data["output"]["index_base"] = args.index_base
    if args.log_level is not None:
        data["logging"]["level"] = args.log_level
    return AppConfig.model_validate(data)


def build_use_case(config: AppConfig, log: ScanLogger) -> ValidateTunnel:
    return ValidateTunnel(
        window_length=config.scan.window_length,
        parser=ParseSteps(kind=config.input.value_type, log=log),
        formatter=FormatResult(fmt=config.output.format, index_base=config.output.index_base),
        log=log,
    )


def run(argv: Sequence[str] | None = None) -> int:
    # Thin orchestration wrapper; the scan itself lives in usecases.
    args = parse_args(argv)
    try:
        config = load_config(Path(args.config)) if args.config else AppConfig()
        config = apply_overrides(config, args)
    except (ConfigError, ValueError) as exc:
        print(f"tunnel-guard: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    sink: LogSink | None = None
    try:
        sink = factory.log_sink(config.logging)
        log = ScanLogger(sink=sink, min_level=config.logging.level)
        use_case = build_use_case(config, log)
        use_case(factory.input_source(args.input, config.input), factory.output_sink(config.output))
    except (OSError, UnicodeDecodeError) as exc:
        # Decode failures can only come from stdin; file input replaces bad bytes.
        print(f"tunnel-guard: i/o error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    finally:
        close = getattr(sink, "close", None)
        if callable(close):
            close()
    return 0
