"""Logging module."""
import copy
import inspect
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

from loguru import logger

AUDIT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[type].value}</cyan> - {message}"
)
"""Audit entry format for files and debug output."""

CONFIRMATION_FORMAT = "{message}"
"""Audit entry format for the console, one confirmation per line."""

LOGURU_LEVELS = frozenset(
    ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
)


class InterceptHandler(logging.Handler):
    """Route standard library log records to loguru."""

    def emit(self, record: logging.LogRecord):
        if record.levelname in LOGURU_LEVELS:
            level = record.levelname
        else:
            level = record.levelno

        # report the frame that called into logging
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


class AuditLogType(str, Enum):
    audit = "audit"
    event_create = "event.create"
    event_register = "event.register"
    action_undo = "action.undo"


def setup_logging(debug: bool = False, audit_path: Optional[Path] = None):
    """Set up the logger.

    Store actions are always confirmed on stderr.

    Args:
        debug: Log debug messages, with timestamps on audit entries.
        audit_path: A file to append the audit log to.
    """
    level = logging.DEBUG if debug else logging.INFO

    logger.remove()
    logger.add(sys.stderr, level=level)

    audit_log.remove()
    audit_log.add(
        sys.stderr,
        level=level,
        format=AUDIT_FORMAT if debug else CONFIRMATION_FORMAT,
    )
    if audit_path is not None:
        audit_log.add(audit_path, level=logging.INFO, format=AUDIT_FORMAT)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def _create_audit_log():
    audit = copy.deepcopy(logger, memo={id(sys.stderr): sys.stderr})
    audit.remove()
    audit.configure(
        extra=dict(
            type=AuditLogType.audit,
            event=None,
            user_id=None,
        )
    )
    return audit.bind(name="audit")


audit_log = _create_audit_log()
"""Logger for store actions, without sinks until :func:`setup_logging`."""
