"""A keyed property attached to a metric."""

from __future__ import annotations

import threading
from typing import Any

from metriclib.metrichelper import format_value, parse_value
from metriclib.metrictype import MetricType


class MetricProperty:
    """A key with a typed value stored as text."""

    def __init__(self, key: str = "", value: Any = "") -> None:
        self._lock = threading.RLock()
        self.key = key
        self.data_type = MetricType.String
        self._is_null = False
        self._value = format_value(value)
        self.property_array: list[dict[str, MetricProperty]] = []

    @property
    def is_null(self) -> bool:
        with self._lock:
            return self._is_null

    @is_null.setter
    def is_null(self, is_null: bool) -> None:
        with self._lock:
            self._is_null = bool(is_null)

    @property
    def value(self) -> str:
        """The stored text of the value."""
        with self._lock:
            return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self.set_value(value)

    def set_value(self, value: Any) -> None:
        """Store a value in its text form."""
        text = format_value(value)
        with self._lock:
            self._value = text

    def value_as(self, kind: type) -> Any:
        """Read the value as str, bool, int or float."""
        with self._lock:
            text = self._value
        return parse_value(text, kind)

    def copy(self) -> MetricProperty:
        """Return a copy with the same key, type, null flag and value.

        The property array is not carried over.
        """
        with self._lock:
            duplicate = MetricProperty(self.key, self._value)
            duplicate.data_type = self.data_type
            duplicate._is_null = self._is_null
        return duplicate

    def __repr__(self) -> str:
        return (
            f"MetricProperty(key={self.key!r}, value={self.value!r}, "
            f"data_type={self.data_type.name})"
        )