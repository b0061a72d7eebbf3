"""Reading data points from JSON files."""

from __future__ import annotations

import json
import logging
import math
import os
from datetime import datetime
from numbers import Real
from typing import Any, Optional

from .datapoint import DataPoint, DataReader, DataReadError, PathLike

logger = logging.getLogger(__name__)

# Numeric timestamps above this are taken as milliseconds, below as seconds.
_MILLISECONDS_THRESHOLD = 100000000000


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return int(rounded if value >= 0 else -rounded)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"illegal value {name}")


def _parse_iso(text: str) -> Optional[datetime]:
    candidate = text.strip()
    if candidate.endswith(("Z", "z")):
        candidate = candidate[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(candidate)
    except ValueError:
        return None


def _from_timestamp(raw: Real) -> Optional[datetime]:
    stamp = raw if isinstance(raw, int) else _round_half_away(float(raw))
    try:
        if stamp > _MILLISECONDS_THRESHOLD:
            return datetime.fromtimestamp(stamp / 1000)
        return datetime.fromtimestamp(stamp)
    except (OverflowError, OSError, ValueError):
        return None


def _parse_datetime(raw: Any) -> Optional[datetime]:
    if isinstance(raw, str):
        return _parse_iso(raw)
    if _is_number(raw):
        if isinstance(raw, float) and not math.isfinite(raw):
            return None
        return _from_timestamp(raw)
    return None


class JSONReader(DataReader):
    """Reads an array of objects with ``Datetime`` and ``Value`` fields."""

    def read(self, source: PathLike) -> list[DataPoint]:
        try:
            with open(os.fspath(source), "rb") as handle:
                raw = handle.read()
        except OSError as exc:
            raise DataReadError(
                f"Не удалось открыть файл: {exc.strerror or exc}"
            ) from exc

        try:
            document = json.loads(raw, parse_constant=_reject_constant)
        except ValueError as exc:
            raise DataReadError(f"Ошибка парсинга JSON: {exc}") from exc

        if not isinstance(document, list):
            raise DataReadError(
                "Ошибка формата: корневой элемент не является массивом."
            )

        result = []
        for item in document:
            if not isinstance(item, dict):
                continue
            date = _parse_datetime(item["Datetime"]) if "Datetime" in item else None
            raw_value = item.get("Value")
            value = float(raw_value) if _is_number(raw_value) else 0.0
            if date is None:
                logger.warning("Найдена запись с невалидным timestamp")
                continue
            result.append(DataPoint(date, value))

        if not result and document:
            raise DataReadError(
                "Файл содержит записи, но ни одна из них не была распознана. "
                "Проверьте формат полей 'Datetime' и 'Value'."
            )
        return result