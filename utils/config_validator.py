"""
Startup configuration checks.

Catches a bad .env before the first backend call or the first localized
message, so the operator sees one clear error instead of a stack trace.
"""

import sys
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

L10N_DIR = Path(__file__).resolve().parent.parent / "l10n"


class ConfigValidationError(Exception):
    """A configuration value is missing or malformed."""
    pass


def validate_api_base_url(url: Optional[str]) -> None:
    """
    The backend base URL must be an absolute http(s) URL.

    Raises:
        ConfigValidationError: If the URL is empty, relative or uses another scheme
    """
    if not url or not url.strip():
        raise ConfigValidationError(
            "API_BASE_URL is empty.\n"
            "Add to .env: API_BASE_URL=http://localhost:8080/api"
        )

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigValidationError(
            f"API_BASE_URL must be an absolute http(s) URL, got '{url}'.\n"
            "Example: API_BASE_URL=https://bookstore.example.com/api"
        )


def validate_required_config(value: Optional[str], name: str, example: str = "") -> None:
    if value:
        return
    hint = f"\nAdd to .env: {name}={example}" if example else ""
    raise ConfigValidationError(f"{name} is not set.{hint}")


def validate_language(language: Optional[str]) -> None:
    """LANGUAGE must name a bundled l10n/<LANGUAGE>.json file."""
    validate_required_config(language, "LANGUAGE", "en")
    if not (L10N_DIR / f"{language}.json").is_file():
        available = ", ".join(sorted(p.stem for p in L10N_DIR.glob("*.json")))
        raise ConfigValidationError(
            f"No translations for LANGUAGE='{language}'. Available: {available}"
        )


def validate_startup_config(config_module) -> None:
    """
    Run every check against the loaded config module.

    Raises:
        ConfigValidationError: On the first failing check
    """
    validate_api_base_url(getattr(config_module, 'API_BASE_URL', None))
    validate_language(getattr(config_module, 'LANGUAGE', None))
    validate_required_config(getattr(config_module, 'CURRENCY_SYMBOL', None), 'CURRENCY_SYMBOL', 'R')


def validate_or_exit(config_module) -> None:
    """Entry point used by run.py: print the problem to stderr and exit(1)."""
    try:
        validate_startup_config(config_module)
    except ConfigValidationError as e:
        print("\n ERROR: Invalid configuration\n", file=sys.stderr)
        print(str(e), file=sys.stderr)
        print("\nFix .env and start again.\n", file=sys.stderr)
        sys.exit(1)
