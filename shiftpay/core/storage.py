# shiftpay/core/storage.py
"""
Loading of the payroll settings snapshot.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from shiftpay.core.config import DEFAULT_SETTINGS_FILE, NIGHT_START_MINUTE
from shiftpay.core.models import PayrollSettings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """General error type for problems loading data files."""

    pass


def _load_json(file_path: Path) -> list[Any] | dict[str, Any]:
    """
    Read and parse JSON with robust error handling.
    Args:
        file_path: Path to the JSON file
    Returns:
        Parsed JSON data as list or dict
    Raises:
        StorageError: If file cannot be read or JSON is invalid
    """
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.exception("Failed to read JSON file %s", file_path)
        raise StorageError(f"Could not read JSON file {file_path}: {e}") from e

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.exception("Invalid JSON in file %s", file_path)
        raise StorageError(f"Invalid JSON in file {file_path}: {e}") from e


def settings_file_path() -> Path:
    """Settings file location, SHIFTPAY_SETTINGS_FILE overrides the default."""
    override = os.getenv("SHIFTPAY_SETTINGS_FILE", "").strip()
    return Path(override) if override else DEFAULT_SETTINGS_FILE


def load_settings(file_path: Path | None = None) -> PayrollSettings:
    """
    Load payroll settings from data file.

    A missing file means the settings were never saved; defaults are
    returned (closing date 31 = end of month).

    Args:
        file_path: Settings file, default from settings_file_path()
    Returns:
        Payroll settings
    Raises:
        StorageError: If file exists but cannot be read or parsed
    """
    file_path = file_path or settings_file_path()

    if not file_path.exists():
        logger.info("Settings file %s not found, using defaults", file_path)
        return PayrollSettings()

    data = _load_json(file_path)
    try:
        if not isinstance(data, dict):
            raise TypeError("Expected settings dict")
        settings = PayrollSettings(**data)
    except (TypeError, ValidationError) as e:
        logger.exception("Failed to parse settings from %s", file_path)
        raise StorageError(f"Could not parse settings from {file_path}: {e}") from e

    _warn_on_unused_night_shift_start(settings)
    return settings


def _warn_on_unused_night_shift_start(settings: PayrollSettings) -> None:
    """The calculator always uses 22:00; flag a stored value that disagrees."""
    hours, _, minutes = settings.night_shift_start.partition(":")
    try:
        configured = int(hours) * 60 + int(minutes or 0)
    except ValueError:
        logger.warning("night_shift_start %r is not HH:MM (display only)", settings.night_shift_start)
        return

    if configured != NIGHT_START_MINUTE:
        logger.warning(
            "night_shift_start is %s but night pay is always calculated from 22:00",
            settings.night_shift_start,
        )
