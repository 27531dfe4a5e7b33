"""Logging configuration."""

from __future__ import annotations

import linecache
import logging
import sys
import traceback
from pathlib import Path
from types import TracebackType
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.types import EventDict

# Type for exception info tuple (from sys.exc_info())
ExcInfo = tuple[type[BaseException] | None, BaseException | None, TracebackType | None]

TracebackFrame = dict[str, str | int | None]

ExceptionDetails = dict[
    str,
    None | str | list[TracebackFrame],
]

APP_LOG_FILENAME = "lostfound.json.log"


def format_exception_for_json(
    exc_info: ExcInfo | None,
) -> ExceptionDetails:
    """Format exception information for JSON logging.

    Args:
        exc_info: Exception info tuple from sys.exc_info() or None

    Returns:
        Dictionary with exception details:
        - exception_type: Exception class name (str or None)
        - exception_message: Exception message (str or None)
        - exception_module: Module where exception occurred (str or None)
        - traceback_frames: List of traceback frames
        - traceback_text: Full traceback as text (for reference)
    """
    if exc_info is None or exc_info == (None, None, None):
        return {}

    exc_type, exc_value, exc_tb = exc_info

    exception_details: ExceptionDetails = {
        "exception_type": exc_type.__name__ if exc_type else None,
        "exception_message": str(exc_value) if exc_value else None,
        "exception_module": exc_type.__module__ if exc_type else None,
    }

    if exc_tb:
        tb_frames: list[TracebackFrame] = []
        current_tb: TracebackType | None = exc_tb

        while current_tb is not None:
            frame = current_tb.tb_frame
            frame_info: TracebackFrame = {
                "filename": frame.f_code.co_filename,
                "lineno": current_tb.tb_lineno,
                "function": frame.f_code.co_name,
            }

            line = linecache.getline(frame.f_code.co_filename, current_tb.tb_lineno)
            if line:
                frame_info["source_line"] = line.strip()

            tb_frames.append(frame_info)
            current_tb = current_tb.tb_next

        exception_details["traceback_frames"] = tb_frames
        exception_details["traceback_text"] = "".join(
            traceback.format_exception(exc_type, exc_value, exc_tb)
        )

    return exception_details


def exception_processor(
    logger: structlog.BoundLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Move exception information into structured fields.

    Handles both ``exc_info`` (from logger.exception() or exc_info=True) and an
    exception instance passed directly as ``exception=``.
    """
    exc_info = event_dict.pop("exc_info", None)  # type: ignore[assignment]

    if exc_info is True:
        exc_info = sys.exc_info()  # type: ignore[assignment]

    if exc_info and exc_info != (None, None, None):
        exception_details = format_exception_for_json(exc_info)  # type: ignore[arg-type]
        if exception_details:
            event_dict["exception"] = exception_details

            exc_type = exception_details.get("exception_type")
            exc_msg = exception_details.get("exception_message")
            if exc_type and exc_msg:
                event_dict["exception_summary"] = f"{exc_type}: {exc_msg}"

    if "exception" in event_dict and isinstance(event_dict["exception"], BaseException):
        exc = event_dict.pop("exception")
        exc_info = (type(exc), exc, exc.__traceback__)
        exception_details = format_exception_for_json(exc_info)
        if exception_details:
            event_dict["exception"] = exception_details

    return event_dict


def _resolve_level(debug: bool, level: str | None) -> int:
    if level:
        return logging.getLevelNamesMapping()[level.upper()]
    return logging.DEBUG if debug else logging.INFO


def _app_log_handlers(
    log_level: int, logs_dir: Path | None
) -> tuple[list[logging.Handler], Path | None]:
    """Build the handlers for application logs.

    Returns the handlers and the log file path (None when logging to stdout).
    """
    if logs_dir:
        log_file = logs_dir / APP_LOG_FILENAME
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            # Fall back to stdout rather than failing the caller
            sys.stderr.write(f"Warning: Failed to setup file logging: {e}\n")
        else:
            file_handler.setLevel(log_level)
            return [file_handler], log_file

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(log_level)
    return [stdout_handler], None


def setup_logging(
    debug: bool = False,
    logs_dir: Path | None = None,
    level: str | None = None,
) -> None:
    """Setup structured logging with structlog.

    Application logs go to stdout (pretty in debug, JSON otherwise). When
    ``logs_dir`` is given they go to a JSON file there instead.

    Args:
        debug: Use the console renderer; also selects DEBUG when no level is given
        logs_dir: Optional directory for log files.
        level: Log level name (e.g. "WARNING"), overriding the debug default
    """
    log_level = _resolve_level(debug, level)
    handlers, log_file = _app_log_handlers(log_level, logs_dir)

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=handlers,
        force=True,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        exception_processor,
        structlog.processors.format_exc_info,
    ]

    # File logs are always JSON; console is pretty only in debug
    if log_file or not debug:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,  # type: ignore[arg-type]
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.getLogger().setLevel(log_level)

    structlog.get_logger("lostfound.logging").info(
        "Logging configured",
        level=logging.getLevelName(log_level),
        debug=debug,
        app_file_logging=log_file is not None,
        app_log_file=str(log_file) if log_file else None,
    )
