"""Command-line parsing for the StationHub application."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

from stationhub.dates import parse_iso_date
from stationhub.headless import HeadlessOptions, HeadlessResult, execute_headless

TEMPLATE_CHOICES = ("hoto", "ohca")
MODE_CHOICES = ("create", "update")
DUTY_CHOICES = ("DD", "ND")


def parse_arguments(argv: Optional[List[str]] = None) -> Tuple[argparse.Namespace, List[str]]:
    """Parse known CLI arguments and return ``(args, extras)``."""

    parser = argparse.ArgumentParser(description="StationHub shift templates")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Render a template without launching the GUI.",
    )
    parser.add_argument(
        "--template",
        choices=TEMPLATE_CHOICES,
        default="hoto",
        help="Template to render in headless mode (default: hoto).",
    )
    parser.add_argument(
        "--mode",
        choices=MODE_CHOICES,
        default="create",
        help="HOTO mode: create a fresh message or update an existing one.",
    )
    parser.add_argument(
        "--date",
        dest="hoto_date",
        help="HOTO date in YYYY-MM-DD format (default: today).",
    )
    parser.add_argument(
        "--duty",
        type=str.upper,
        choices=DUTY_CHOICES,
        default="DD",
        help="Day duty (DD) or night duty (ND).",
    )
    parser.add_argument(
        "--call-sign",
        dest="call_sign",
        default="",
        help="Call sign whose usage is being reported, e.g. A441D.",
    )
    parser.add_argument(
        "--previous-call-sign",
        dest="previous_call_sign",
        default="",
        help="Call sign whose block to drop when --call-sign is left empty (update mode).",
    )
    parser.add_argument(
        "--drugs",
        dest="drugs_file",
        help="Path to a text file with one 'Name xN' line per drug.",
    )
    parser.add_argument(
        "--drugs-text",
        dest="drugs_text",
        help="Drug usage given inline; separate lines with newlines.",
    )
    parser.add_argument(
        "--existing",
        dest="existing_file",
        help="Path to the current HOTO message (update mode).",
    )
    parser.add_argument("--incident", default="", help="OHCA incident number.")
    parser.add_argument("--rank", default="", help="OHCA reporting rank.")
    parser.add_argument("--name", default="", help="OHCA reporting name.")
    parser.add_argument(
        "--code-review-done",
        action="store_true",
        help="Mark the OHCA code review as done.",
    )
    parser.add_argument(
        "--output",
        dest="output",
        help="Write the rendered text to this path as well as stdout.",
    )
    parser.add_argument(
        "--log-dir",
        dest="log_dir",
        help="Directory for headless run logs (default: the StationHub logs directory).",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        help="Optional explicit log file path for headless runs.",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable debug logging (headless mode).",
    )

    args, extras = parser.parse_known_args(argv)
    return args, extras


def create_headless_options(args: argparse.Namespace) -> HeadlessOptions:
    """Return ``HeadlessOptions`` derived from parsed ``args``."""

    if not args.headless:
        raise ValueError("create_headless_options called without --headless flag")

    if args.drugs_file and args.drugs_text is not None:
        raise ValueError("--drugs and --drugs-text are mutually exclusive")

    hoto_date = _parse_date(args.hoto_date) if args.hoto_date else None
    drugs_file = Path(args.drugs_file).expanduser() if args.drugs_file else None
    existing_file = Path(args.existing_file).expanduser() if args.existing_file else None
    output = Path(args.output).expanduser() if args.output else None
    log_dir = Path(args.log_dir).expanduser() if args.log_dir else None
    log_file = Path(args.log_file).expanduser() if args.log_file else None

    return HeadlessOptions(
        template=args.template,
        mode=args.mode,
        hoto_date=hoto_date,
        duty=str(args.duty).upper(),
        call_sign=args.call_sign or "",
        previous_call_sign=args.previous_call_sign or "",
        drugs_file=drugs_file,
        drugs_text=args.drugs_text or "",
        existing_file=existing_file,
        incident_number=args.incident or "",
        rank=args.rank or "",
        name=args.name or "",
        code_review_done=bool(args.code_review_done),
        output=output,
        log_dir=log_dir,
        log_file=log_file,
        trace=bool(args.trace),
    )


def run_headless_from_args(args: argparse.Namespace) -> HeadlessResult:
    """Execute the headless render using ``args`` and return the result."""

    options = create_headless_options(args)
    return execute_headless(options)


def _parse_date(raw: str) -> date:
    parsed = parse_iso_date(raw)
    if parsed is None:
        raise ValueError("--date must be in YYYY-MM-DD format")
    return parsed


__all__ = [
    "parse_arguments",
    "create_headless_options",
    "run_headless_from_args",
    "TEMPLATE_CHOICES",
    "MODE_CHOICES",
    "DUTY_CHOICES",
]
