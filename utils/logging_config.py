"""
Logging setup for the bookstore core.

One root configuration for the CLI and any embedding application:
- level from config.LOG_LEVEL
- console output plus <LOG_DIR>/bookstore.log, rotated at midnight
- customer data masked before it reaches any handler (LOG_MASK_SECRETS)
"""

import logging
import logging.handlers
import re
from pathlib import Path
from typing import Pattern

import config

LOG_FORMAT = '%(asctime)s | %(name)-25s | %(levelname)-8s | %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class SecretMaskingFilter(logging.Filter):
    """
    Rewrites log records so customer data never lands in a log file.

    Masked: shipping addresses (checkout form and order payloads), payment
    transaction codes, emails, phone numbers and bearer/API credentials.
    """

    PATTERNS: list[tuple[Pattern, str]] = [
        (re.compile(r'(Bearer\s+)([A-Za-z0-9_\-\.]+)', re.IGNORECASE), r'\1[REDACTED_BEARER_TOKEN]'),
        (re.compile(r'(api[_-]?key["\']?\s*[:=]\s*["\']?)([A-Za-z0-9_\-]{20,})', re.IGNORECASE),
         r'\1[REDACTED_API_KEY]'),

        # TX-<millis>-<hex>, minted per checkout attempt
        (re.compile(r'\bTX-\d{10,}(-[a-f0-9]+)?\b'), '[REDACTED_TX_CODE]'),

        # shipping_address=..., "shippingAddress": "..."
        (re.compile(r'(address["\']?\s*[:=]\s*["\']?)([^"\']{10,})(["\']?)', re.IGNORECASE),
         r'\1[REDACTED_ADDRESS]\3'),

        (re.compile(r'\b[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}\b'), '[REDACTED_EMAIL]'),
        (re.compile(r'\b(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b'), '[REDACTED_PHONE]'),
    ]

    def mask(self, text: str) -> str:
        for pattern, replacement in self.PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        # Records are rewritten, never dropped
        if record.msg:
            record.msg = self.mask(str(record.msg))
        if isinstance(record.args, tuple):
            record.args = tuple(self.mask(a) if isinstance(a, str) else a for a in record.args)
        return True


def _build_handlers(log_dir: Path, level: int, retention_days: int) -> list[logging.Handler]:
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = [
        logging.handlers.TimedRotatingFileHandler(
            filename=log_dir / "bookstore.log",
            when="midnight",
            backupCount=retention_days,
            encoding="utf-8"
        ),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def setup_logging():
    """
    Configure the root logger. Call once at startup (run.py does).

    Replaces any handlers already on the root logger, so calling it again
    reconfigures instead of duplicating output.
    """
    level_name = getattr(config, "LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    retention_days = getattr(config, "LOG_RETENTION_DAYS", 5)
    mask_secrets = getattr(config, "LOG_MASK_SECRETS", True)

    handlers = _build_handlers(Path(getattr(config, "LOG_DIR", "logs")), level, retention_days)
    if mask_secrets:
        masking_filter = SecretMaskingFilter()
        for handler in handlers:
            handler.addFilter(masking_filter)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # aiohttp logs every connection at DEBUG
    logging.getLogger("aiohttp").setLevel(max(level, logging.WARNING))

    logging.info(f"Logging initialized: level={level_name}, retention={retention_days} days, "
                 f"masking={'on' if mask_secrets else 'off'}")
