"""Headless template runner used by the CLI and automation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

from stationhub.dates import default_hoto_date
from stationhub.fs.exports import safe_write_text
from stationhub.hoto.builder import HotoMode, build_result
from stationhub.logs.rotating import get_logger, log_path
from stationhub.report.model import OhcaReport
from stationhub.report.ohca import build_ohca_text

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class HeadlessOptions:
    """Configuration for a headless template run."""

    template: str = "hoto"
    mode: str = "create"
    hoto_date: Optional[date] = None
    duty: str = "DD"
    call_sign: str = ""
    previous_call_sign: str = ""
    drugs_file: Optional[Path] = None
    drugs_text: str = ""
    existing_file: Optional[Path] = None
    incident_number: str = ""
    rank: str = ""
    name: str = ""
    code_review_done: bool = False
    output: Optional[Path] = None
    log_dir: Optional[Path] = None
    log_file: Optional[Path] = None
    trace: bool = False


@dataclass(slots=True)
class HeadlessResult:
    """Outcome of a headless template run."""

    exit_code: int
    text: str
    output_path: Optional[Path]
    summary_line: str
    warnings: List[str] = field(default_factory=list)
    log_file: Optional[Path] = None


def execute_headless(options: HeadlessOptions) -> HeadlessResult:
    """Render the template described by ``options``."""

    drugs_text = _read_input(options.drugs_file) if options.drugs_file else options.drugs_text
    existing_text = _read_input(options.existing_file) if options.existing_file else ""

    log_dir = (options.log_dir or log_path().parent).expanduser().resolve()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = (options.log_file or (log_dir / _default_log_name())).expanduser().resolve()
    base_logger = _configure_logging(log_file, trace=options.trace)
    LOGGER.info("Headless start: template=%s", options.template)
    if options.trace:
        base_logger.debug("Trace mode enabled for headless execution.")

    warnings: List[str] = []
    if options.template == "ohca":
        report = OhcaReport(
            incident_number=options.incident_number,
            call_sign=options.call_sign,
            rank=options.rank,
            name=options.name,
            code_review="done" if options.code_review_done else "not_done",
        )
        text = build_ohca_text(report)
        summary_line = f"OHCA incident={report.incident_number.strip() or '-'} code_review={report.code_review}"
    elif options.template == "hoto":
        hoto_date = options.hoto_date or default_hoto_date()
        result = build_result(
            options.mode,
            hoto_date,
            options.duty,
            options.call_sign,
            drugs_text,
            existing_text,
            previous_call_sign=options.previous_call_sign,
        )
        text = result.text
        if options.mode == HotoMode.UPDATE.value and result.mode is HotoMode.CREATE:
            warnings.append("No existing HOTO text supplied; created a fresh message")
        if result.untallied:
            warnings.append(f"{result.untallied} drug total(s) not tallied; count them by hand")
        summary_line = (
            f"HOTO mode={result.mode.value} action={result.action} "
            f"blocks={len(result.document.blocks)} totals={len(result.document.totals)} "
            f"untallied={result.untallied}"
        )
    else:
        raise ValueError(f"Unknown template: {options.template}")

    output_path: Optional[Path] = None
    if options.output is not None:
        output_path = safe_write_text(options.output.expanduser().resolve(), text)

    LOGGER.info("Headless run completed: %s output=%s", summary_line, output_path)

    return HeadlessResult(
        exit_code=0,
        text=text,
        output_path=output_path,
        summary_line=summary_line,
        warnings=warnings,
        log_file=log_file,
    )


def _read_input(path: Path) -> str:
    resolved = path.expanduser().resolve()
    if not resolved.exists():
        raise FileNotFoundError(f"Input file not found: {resolved}")
    return resolved.read_text(encoding="utf-8")


def _configure_logging(log_file: Path, *, trace: bool = False) -> logging.Logger:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    base_logger = get_logger()
    level = logging.DEBUG if trace else logging.INFO
    base_logger.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not any(isinstance(handler, logging.StreamHandler) for handler in root_logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        root_logger.addHandler(stream_handler)

    existing_paths = {
        getattr(handler, "baseFilename", None)
        for handler in base_logger.handlers
        if hasattr(handler, "baseFilename")
    }
    if str(log_file) not in existing_paths:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(formatter)
        base_logger.addHandler(file_handler)

    return base_logger


def _default_log_name() -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"headless_{timestamp}.log"


__all__ = ["HeadlessOptions", "HeadlessResult", "execute_headless"]
