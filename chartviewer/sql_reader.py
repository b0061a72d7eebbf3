"""Reading data points from SQLite databases."""

from __future__ import annotations

import logging
import os
import re
import sqlite3
from contextlib import closing
from datetime import date, datetime, time
from typing import Any, Optional

from .datapoint import DataPoint, DataReader, DataReadError, PathLike

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")
_MINUTES_PER_DAY = 24 * 60


def parse_time(text: str) -> Optional[datetime]:
    """Parse ``dd.MM.yyyy HH:mm`` or ``dd.MM.yyyy <minutes of day>``.

    Returns ``None`` when the text is in neither form.
    """
    if ":" in text:
        try:
            return datetime.strptime(text, "%d.%m.%Y %H:%M")
        except ValueError:
            return None

    parts = text.split(" ")
    if len(parts) != 2:
        return None
    day_text, minutes_text = parts
    try:
        day = datetime.strptime(day_text, "%d.%m.%Y").date()
    except ValueError:
        return None
    if not _INTEGER.fullmatch(minutes_text):
        return None
    minutes = int(minutes_text)
    if not 0 <= minutes < _MINUTES_PER_DAY:
        return None
    return datetime.combine(day, time(minutes // 60, minutes % 60))


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _to_float(value: Any) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return 0.0
    return 0.0


def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def _table_names(connection: sqlite3.Connection) -> list[str]:
    try:
        rows = connection.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table'"
        ).fetchall()
    except sqlite3.DatabaseError:
        return []
    return [name for (name,) in rows]


class SQLReader(DataReader):
    """Reads ``Time`` and ``Value`` columns from the first table of a database."""

    def read(self, source: PathLike) -> list[DataPoint]:
        try:
            connection = sqlite3.connect(os.fspath(source))
        except sqlite3.Error as exc:
            raise DataReadError(f"Ошибка открытия БД: {exc}") from exc

        with closing(connection):
            tables = _table_names(connection)
            if not tables:
                raise DataReadError("Ошибка: в базе данных нет таблиц.")
            table_name = tables[0]
            try:
                rows = connection.execute(
                    f"SELECT Time, Value FROM {_quote_identifier(table_name)}"
                ).fetchall()
            except sqlite3.Error as exc:
                raise DataReadError(f"Ошибка выполнения запроса: {exc}") from exc

        points = []
        for raw_time, raw_value in rows:
            text = _to_text(raw_time)
            moment = parse_time(text)
            if moment is None:
                logger.debug("Не удалось разобрать время: %s", text)
                continue
            points.append(DataPoint(moment, _to_float(raw_value)))

        if not points:
            raise DataReadError(
                "Данные не распознаны. Проверьте имена столбцов ('Time', 'Value') "
                f"и формат данных в таблице '{table_name}'."
            )
        return points