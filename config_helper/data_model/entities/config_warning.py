# config_helper/data_model/entities/config_warning.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigWarning:
    """A line the reader could not place; ``line`` is 1-based."""

    line: int
    value: str
    message: str

    def __str__(self) -> str:
        return f"{self.line}: {self.message}: {self.value}"
