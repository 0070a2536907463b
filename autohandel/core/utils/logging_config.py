"""
Logging setup for the AutoHandel back-office.

Production (PRODUCTION=true or running under gunicorn) writes one JSON object
per line; development gets a short coloured line. Inside a request both
formats carry the request path and the logged-in username.
"""

import os
import sys
import json
import logging
from datetime import datetime, timezone

from flask import g, has_request_context, request


def _request_fields() -> dict:
    if not has_request_context():
        return {}
    fields = {'method': request.method, 'path': request.path}
    # only a user Flask-Login already loaded; loading one here could log recursively
    user = g.get('_login_user')
    if user is not None and getattr(user, 'is_authenticated', False):
        fields['user'] = user.username
    return fields


class JSONFormatter(logging.Formatter):
    """One JSON document per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'ts': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'msg': record.getMessage(),
            'where': f'{record.module}:{record.lineno}',
        }
        entry.update(_request_fields())
        entry.update(getattr(record, 'context', None) or {})
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


class DevelopmentFormatter(logging.Formatter):
    """Readable single-line output for a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, '')
        reset = '\033[0m' if color else ''
        line = (
            f'{color}{datetime.now():%H:%M:%S} {record.levelname[0]}{reset} '
            f'{record.name}: {record.getMessage()}'
        )

        context = {**_request_fields(), **(getattr(record, 'context', None) or {})}
        if context:
            line += '  [' + ' '.join(f'{k}={v}' for k, v in context.items()) + ']'
        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)
        return line


def _production_logging() -> bool:
    return os.environ.get('PRODUCTION', '').lower() == 'true' or \
        'gunicorn' in os.environ.get('SERVER_SOFTWARE', '')


def setup_logging(
    level: str = 'INFO',
    json_format: bool = None,
    logger_name: str = 'autohandel'
) -> logging.Logger:
    """Attach a stdout handler to the ``autohandel`` logger tree.

    Args:
        level: Level name; unknown names fall back to INFO.
        json_format: Force JSON on or off. None picks JSON in production.
        logger_name: Root of the logger tree to configure.
    """
    if json_format is None:
        json_format = _production_logging()

    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if json_format else DevelopmentFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    # werkzeug's per-request lines duplicate ours in production
    if json_format:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    return logger


def get_logger(name: str = 'autohandel') -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: int, message: str, **context):
    """Log ``message`` with extra key-value fields rendered by both formatters."""
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={'context': context})
