import logging
import os

from dotenv import load_dotenv

from int_width import INT64, IntWidth, width_named

logger = logging.getLogger(__name__)

# Signed width used for years when the caller does not give one
DEFAULT_WIDTH_VARIABLE = 'YEARMONTH_DEFAULT_WIDTH'
DEFAULT_WIDTH = INT64


def default_width() -> IntWidth:
    """
    Return the configured default year width. Read from the environment on
    every call so that a later load_settings() takes effect.
    """
    name = os.environ.get(DEFAULT_WIDTH_VARIABLE)
    if not name:
        return DEFAULT_WIDTH
    width = width_named(name)
    if not width.signed:
        raise ValueError(f'{DEFAULT_WIDTH_VARIABLE} must name a signed width, not {width}')
    return width


def load_settings(dotenv_path: str | None = None, override: bool = False) -> IntWidth:
    """
    Load settings from a .env file into the environment and return the
    effective default width.
    """
    if dotenv_path:
        logger.debug(f'Loading settings from {dotenv_path}')
    load_dotenv(dotenv_path, override=override)
    width = default_width()
    logger.info(f'Default YearMonth year width is {width}')
    return width
