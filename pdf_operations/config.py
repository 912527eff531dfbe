"""Environment driven settings for :mod:`pdf_operations`."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOGGER = logging.getLogger("pdf_operations.config")

RENDER_SCALE_ENV = "PDF_OPERATIONS_RENDER_SCALE"
IMAGE_FORMAT_ENV = "PDF_OPERATIONS_IMAGE_FORMAT"
LOG_LEVEL_ENV = "PDF_OPERATIONS_LOG_LEVEL"

DEFAULT_RENDER_SCALE = 4.0
DEFAULT_IMAGE_FORMAT = "png"
DEFAULT_LOG_LEVEL = "WARNING"

_IMAGE_FORMATS = {"png", "jpeg", "jpg", "tiff", "bmp"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""

    render_scale: float = DEFAULT_RENDER_SCALE
    image_format: str = DEFAULT_IMAGE_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL


def _read_scale() -> float:
    value = os.getenv(RENDER_SCALE_ENV)
    if value is None or not value.strip():
        return DEFAULT_RENDER_SCALE
    try:
        scale = float(value)
    except ValueError:
        LOGGER.warning("Ignoring %s=%r: not a number", RENDER_SCALE_ENV, value)
        return DEFAULT_RENDER_SCALE
    if scale <= 0:
        LOGGER.warning("Ignoring %s=%r: must be positive", RENDER_SCALE_ENV, value)
        return DEFAULT_RENDER_SCALE
    return scale


def _read_image_format() -> str:
    value = os.getenv(IMAGE_FORMAT_ENV)
    if value is None or not value.strip():
        return DEFAULT_IMAGE_FORMAT
    image_format = value.strip().lower()
    if image_format not in _IMAGE_FORMATS:
        LOGGER.warning("Ignoring %s=%r: unsupported format", IMAGE_FORMAT_ENV, value)
        return DEFAULT_IMAGE_FORMAT
    return image_format


def _read_log_level() -> str:
    value = os.getenv(LOG_LEVEL_ENV)
    if value is None or not value.strip():
        return DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        LOGGER.warning("Ignoring %s=%r: unknown level", LOG_LEVEL_ENV, value)
        return DEFAULT_LOG_LEVEL
    return level


def get_settings() -> Settings:
    """Return settings read from the current environment.

    The environment is consulted on every call so tests and long running
    callers can change variables without reloading the module.
    """

    return Settings(
        render_scale=_read_scale(),
        image_format=_read_image_format(),
        log_level=_read_log_level(),
    )


__all__ = [
    "Settings",
    "get_settings",
    "RENDER_SCALE_ENV",
    "IMAGE_FORMAT_ENV",
    "LOG_LEVEL_ENV",
    "DEFAULT_RENDER_SCALE",
    "DEFAULT_IMAGE_FORMAT",
    "DEFAULT_LOG_LEVEL",
]
