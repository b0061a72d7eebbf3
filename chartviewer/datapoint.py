"""Data points and the interface shared by all data readers."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class DataPoint:
    """One measurement: a moment in time and a value.

    A point whose ``date`` is ``None`` carries no usable moment and is invalid.
    """

    date: Optional[datetime] = field(default_factory=datetime.now)
    value: float = 0.0

    def is_valid(self) -> bool:
        """Return True when the point has a usable date."""
        return self.date is not None


class DataReadError(RuntimeError):
    """Raised when a data source cannot be read or understood."""


class DataReader(ABC):
    """Something that turns a data source into a list of points."""

    @abstractmethod
    def read(self, source: PathLike) -> list[DataPoint]:
        """Read all points from ``source``."""