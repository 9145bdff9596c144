# config_helper/exceptions.py
"""
Error taxonomy for the configuration engine.

Every library error derives from ``ConfigHelperError`` so callers can catch
them collectively, while still subclassing the builtin that best describes
the failure (``ValueError``, ``TypeError``, ``RuntimeError``).
"""

from __future__ import annotations

from typing import Optional


class ConfigHelperError(Exception):
    """Base exception for configuration engine failures."""


class ConfigFormatError(ConfigHelperError, ValueError):
    """Raised when a comment, section or value line is malformed."""


class UnsupportedTypeError(ConfigHelperError, TypeError):
    """Raised when no scalar converter exists for a target type."""


class UnsupportedValueError(ConfigHelperError, ValueError):
    """Raised when a text value is outside the accepted vocabulary of a type."""


class ConfigBindingError(ConfigHelperError, RuntimeError):
    """Raised when an object graph cannot be constructed or bound."""


class CustomParserError(ConfigHelperError):
    """
    Raised by (or on behalf of) a custom value parser.

    Carries the label and the raw value of the entry being converted so the
    failing line can be identified.
    """

    def __init__(
        self,
        label: Optional[str],
        value: Optional[str],
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        if message is None and cause is not None:
            message = str(cause)
        super().__init__(message or "")
        self.label = label or ""
        self.value = value or ""
        self.message = message or ""
        if cause is not None:
            self.__cause__ = cause
