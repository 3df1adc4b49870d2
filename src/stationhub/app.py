"""Application bootstrap for the StationHub desktop client."""

from __future__ import annotations

import os
import sys
from typing import List, Optional

from stationhub.cli import parse_arguments, run_headless_from_args
from stationhub.headless import HeadlessResult
from stationhub.logs.rotating import app_support_dir, get_logger


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for both GUI and headless execution."""

    raw_argv = list(argv if argv is not None else sys.argv[1:])
    args, extras = parse_arguments(raw_argv)
    automation_env = os.getenv("STATIONHUB_AUTOMATION") == "1"

    if args.headless:
        try:
            result = run_headless_from_args(args)
        except (ValueError, FileNotFoundError) as exc:
            _emit_headless_miss(exc, automation_env)
            return 2
        _print_headless_result(result)
        return result.exit_code

    if automation_env:
        print("GUI_SUPPRESSED automation", flush=True)
        return 0

    sys.argv = [sys.argv[0]] + extras
    return _launch_gui()


def _launch_gui() -> int:
    from PySide6.QtWidgets import QApplication

    from stationhub.ui.main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("StationHub")
    app.setOrganizationName("StationHub")

    support_dir = app_support_dir()
    logger = get_logger()
    logger.info("Launching GUI (support dir %s)", support_dir)
    window = MainWindow()
    window.show()

    result = app.exec()
    logger.info("GUI event loop exited (%s)", result)
    return result


def _print_headless_result(result: HeadlessResult) -> None:
    print(result.text, flush=True)
    print(result.summary_line, file=sys.stderr, flush=True)
    if result.output_path:
        print(f"TXT: {result.output_path}", file=sys.stderr, flush=True)
    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr, flush=True)


def _emit_headless_miss(exc: Exception, automation: bool) -> None:
    label = "AUTOMATION_MISS" if automation else "HEADLESS_MISS"
    if isinstance(exc, FileNotFoundError):
        reason = "input_missing"
    else:
        reason = "invalid_args"
    print(f"{label} reason={reason}", flush=True)
    print(f"Headless error: {exc}", file=sys.stderr, flush=True)


if __name__ == "__main__":
    sys.exit(main())
