"""A named value with flags, properties and change tracking."""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Any, Mapping

from metriclib.metrichelper import format_value, parse_value
from metriclib.metricproperty import MetricProperty
from metriclib.metrictype import MetricType

_DESCRIPTION_KEY = "description"
_UNIT_KEY = "unit"


class Metric:
    """A generic value, stored as text, with a set of keyed properties.

    Setting a value marks the metric valid. If the stored text changes, the
    metric is also marked updated.
    """

    def __init__(self, name: str = "") -> None:
        self._lock = threading.RLock()
        self._name = str(name)
        self._group_name = ""
        self._group_identity = 0
        self._value = ""
        self._properties: dict[str, MetricProperty] = {}
        self.identity = 0
        self.timestamp = 0
        self.data_type = MetricType.String
        self.is_historical = False
        self.is_transient = False
        self.is_null = False
        self.is_valid = False
        self.is_read_only = False
        self._updated = False

    @property
    def name(self) -> str:
        with self._lock:
            return self._name

    @name.setter
    def name(self, name: str) -> None:
        with self._lock:
            self._name = name

    @property
    def group_name(self) -> str:
        with self._lock:
            return self._group_name

    @group_name.setter
    def group_name(self, name: str) -> None:
        with self._lock:
            self._group_name = name

    @property
    def group_identity(self) -> int:
        with self._lock:
            return self._group_identity

    @group_identity.setter
    def group_identity(self, identity: int) -> None:
        with self._lock:
            self._group_identity = identity

    @property
    def description(self) -> str:
        """Text of the description property, empty if not set."""
        return self._get_string_property(_DESCRIPTION_KEY)

    @description.setter
    def description(self, desc: str) -> None:
        self._set_string_property(_DESCRIPTION_KEY, desc)

    @property
    def unit(self) -> str:
        """Text of the unit property, empty if not set."""
        return self._get_string_property(_UNIT_KEY)

    @unit.setter
    def unit(self, unit: str) -> None:
        self._set_string_property(_UNIT_KEY, unit)

    @property
    def value(self) -> str:
        """The stored text of the value."""
        with self._lock:
            return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self.set_value(value)

    def set_value(self, value: Any) -> None:
        """Store a value in its text form.

        The metric becomes valid; it is flagged updated if the text changed.
        Raises TypeError for values that have no text form.
        """
        text = format_value(value).replace(",", ".", 1) if isinstance(
            value, float
        ) else format_value(value)
        with self._lock:
            changed = text != self._value
            if changed:
                self._value = text
        self.is_valid = True
        if changed:
            self.set_updated()

    def value_as(self, kind: type) -> Any:
        """Read the value as str, bool, int or float."""
        with self._lock:
            text = self._value
        return parse_value(text, kind)

    @property
    def properties(self) -> Mapping[str, MetricProperty]:
        """Read-only view of the properties, keyed by property key."""
        return MappingProxyType(self._properties)

    def add_property(self, prop: MetricProperty) -> None:
        """Store a copy of ``prop``, replacing any property with the same key."""
        stored = prop.copy()
        with self._lock:
            self._properties[stored.key] = stored

    def create_property(self, key: str) -> MetricProperty:
        """Return the property named ``key``, creating an empty one if absent."""
        with self._lock:
            existing = self._properties.get(key)
            if existing is None:
                existing = MetricProperty(key)
                self._properties[key] = existing
            return existing

    def get_property(self, key: str) -> MetricProperty | None:
        """Return the property named ``key``, or None."""
        with self._lock:
            return self._properties.get(key)

    def delete_property(self, key: str) -> None:
        """Remove the property named ``key`` if it exists."""
        with self._lock:
            self._properties.pop(key, None)

    @property
    def is_updated(self) -> bool:
        return self._updated

    def set_updated(self) -> None:
        self._updated = True

    def reset_updated(self) -> None:
        self._updated = False

    def _set_string_property(self, key: str, value: str) -> None:
        self.add_property(MetricProperty(key, value))

    def _get_string_property(self, key: str) -> str:
        with self._lock:
            prop = self._properties.get(key)
            return prop.value if prop is not None else ""

    def __repr__(self) -> str:
        return (
            f"Metric(name={self.name!r}, group_name={self.group_name!r}, "
            f"value={self.value!r})"
        )