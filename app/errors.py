# app/errors.py

from pathlib import Path
from typing import Optional, Union


class DatasetError(Exception):
    """Base class for failures while loading the cities dataset."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class DatasetReadError(DatasetError):
    """The dataset file could not be read (missing, permissions, not a file)."""


class DatasetParseError(DatasetError):
    """The dataset file is not valid JSON or not shaped as {"data": [...]}."""
