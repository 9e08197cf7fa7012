from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from commission_fees.adapters.input_source import CsvInputSource
from commission_fees.adapters.log_sinks import JsonlLogSink, StreamLogSink
from commission_fees.adapters.output_sink import FileOutputSink, StreamOutputSink
from commission_fees.config.loader import default_config_path, load_config
from commission_fees.config.models import AppConfig, LoggingConfig
from commission_fees.domain.errors import FeeError, InputUnavailableError
from commission_fees.domain.messages import OperationRecord
from commission_fees.kernel.scenario_builder import InvalidScenarioConfigError, StepBuildError
from commission_fees.kernel.step_registry import UnknownStepError
from commission_fees.observability.logging import LEVELS, LogMessage
from commission_fees.ports.input_source import InputSource
from commission_fees.ports.log_sink import LogSink
from commission_fees.ports.output_sink import OutputSink
from commission_fees.usecases.engine import FeeEngine
from commission_fees.usecases.steps.parse_operation_record import ParseOperationRecord

EXIT_OK = 0
EXIT_BATCH_FAILED = 1
EXIT_INPUT_UNAVAILABLE = 2
EXIT_OUTPUT_FAILED = 3

# Pipeline assembly failures are configuration problems, reported like any failed batch.
_BATCH_ERRORS = (FeeError, UnknownStepError, StepBuildError, InvalidScenarioConfigError)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Commission fee calculator for cash-in/cash-out operations")
    parser.add_argument("input", help="Path to operations CSV file")
    parser.add_argument("--config", help="Path to YAML config (defaults to the bundled baseline)")
    parser.add_argument("--output", help="Write fees to this file instead of stdout")
    parser.add_argument("--log-level", choices=sorted(LEVELS, key=LEVELS.__getitem__), help="Override log level")
    parser.add_argument("--log-path", help="Append JSONL logs to this file instead of stderr")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_logging_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI overrides take precedence over config.
    if args.log_level is not None:
        config.logging.level = args.log_level
    if args.log_path is not None:
        config.logging.path = args.log_path


def apply_output_override(config: AppConfig, args: argparse.Namespace) -> None:
    if args.output is not None:
        config.output.file_path = args.output


def build_log_sink(config: LoggingConfig) -> LogSink:
    if config.path:
        return JsonlLogSink(Path(config.path), min_level=config.level)
    return StreamLogSink(min_level=config.level)


def build_output_sink(config: AppConfig) -> OutputSink:
    if config.output.file_path:
        return FileOutputSink(Path(config.output.file_path), atomic_replace=config.output.atomic_replace)
    return StreamOutputSink()


def read_records(source: InputSource) -> list[OperationRecord]:
    # The whole source is read and parsed before any fee is computed.
    parse = ParseOperationRecord()
    records: list[OperationRecord] = []
    for row in source.rows():
        records.extend(parse(row, None))
    return records


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config_path = Path(args.config) if args.config else default_config_path()

    try:
        config = load_config(config_path)
    except FeeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BATCH_FAILED

    apply_logging_overrides(config, args)
    apply_output_override(config, args)
    try:
        log_sink = build_log_sink(config.logging)
    except OSError as exc:
        print(f"error: cannot open log {config.logging.path}: {exc.strerror or exc}", file=sys.stderr)
        return EXIT_BATCH_FAILED

    try:
        records = read_records(CsvInputSource(Path(args.input)))
        fees = FeeEngine(config, log_sink=log_sink, run_id="cli").process(records)
    except InputUnavailableError as exc:
        return _fail(log_sink, "input_unavailable", exc, EXIT_INPUT_UNAVAILABLE)
    except _BATCH_ERRORS as exc:
        return _fail(log_sink, "run_failed", exc, EXIT_BATCH_FAILED)

    # Output is written only after the whole batch succeeded.
    try:
        write_fees(build_output_sink(config), fees)
    except OSError as exc:
        return _fail(log_sink, "output_failed", exc, EXIT_OUTPUT_FAILED)

    log_sink.close()
    return EXIT_OK


def write_fees(sink: OutputSink, fees: Sequence[str]) -> None:
    # The sink is closed even when a write fails; close publishes the file in atomic mode.
    try:
        for fee in fees:
            sink.write_fee(fee)
    finally:
        sink.close()


def _fail(log_sink: LogSink, event: str, exc: Exception, code: int) -> int:
    log_sink.emit(
        LogMessage(
            level="ERROR",
            message=event,
            fields={"error": type(exc).__name__, "detail": str(exc)},
        )
    )
    print(f"error: {exc}", file=sys.stderr)
    log_sink.close()
    return code
