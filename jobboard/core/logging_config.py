"""
Logging configuration for the admin tools.

Console scripts print their report with print(); logging carries the
diagnostic trail (store requests, seeded rows, unexpected failures) and can
be switched to JSON for log shipping. The staff CLI sends it to stderr so a
report piped from stdout never picks up log lines or tracebacks.
"""

import logging
import sys
from typing import IO, Any, Dict, Optional
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
JSON_FORMAT = '%(timestamp)s %(level)s %(logger)s %(message)s'
QUIET_LOGGERS = ("httpx", "httpcore", "passlib")


class AdminJsonFormatter(jsonlogger.JsonFormatter):
    """JSON lines with a UTC timestamp; source location only on warnings and up."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name

        if record.levelno >= logging.WARNING:
            log_record['source'] = f"{record.module}:{record.funcName}:{record.lineno}"


def build_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return AdminJsonFormatter(JSON_FORMAT)
    return logging.Formatter(PLAIN_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')


def setup_logging(log_level: str = "WARNING", json_logs: bool = False, stream: Optional[IO[str]] = None) -> None:
    """
    Configure logging for a script run.

    Args:
        log_level: Logging level name; unknown names fall back to WARNING
        json_logs: Whether to use JSON formatting instead of human-readable lines
        stream: Where log records are written (defaults to stdout)
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(build_formatter(json_logs))

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
