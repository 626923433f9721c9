"""A collection of metric groups and the metrics that belong to them."""

from __future__ import annotations

from enum import IntEnum

from metriclib.metric import Metric
from metriclib.metricgroup import MetricGroup


class TypeOfDatabase(IntEnum):
    """The kind of storage a metric database is read from."""

    Unknown = 0
    Sqlite = 1
    DbcFile = 2
    A2lFile = 3


_TYPE_TEXT: dict[TypeOfDatabase, str] = {
    TypeOfDatabase.Unknown: "Unknown",
    TypeOfDatabase.Sqlite: "SQLite Database",
    TypeOfDatabase.DbcFile: "DBC File",
    TypeOfDatabase.A2lFile: "A2L File",
}


def type_to_string(db_type: TypeOfDatabase | int) -> str:
    """Return the display text of a database type; unknown values give "Unknown"."""
    try:
        member = TypeOfDatabase(db_type)
    except ValueError:
        return _TYPE_TEXT[TypeOfDatabase.Unknown]
    return _TYPE_TEXT[member]


def type_from_string(text: str) -> TypeOfDatabase:
    """Return the database type whose display text is ``text``, else ``Unknown``."""
    for member, member_text in _TYPE_TEXT.items():
        if member_text == text:
            return member
    return TypeOfDatabase.Unknown


class MetricDatabase:
    """Holds metric groups and metrics, with lookup and sorting helpers."""

    def __init__(self) -> None:
        self.name = ""
        self.description = ""
        self.filename = ""
        self._enabled = False
        self._operable = False
        self._type = TypeOfDatabase.Unknown
        self._groups: list[MetricGroup] = []
        self._metrics: list[Metric] = []

    @property
    def type(self) -> TypeOfDatabase:
        return self._type

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    @property
    def is_operable(self) -> bool:
        return self._operable

    def enable(self, enable: bool) -> None:
        """Enable or disable the database; operability follows the same flag."""
        self._enabled = bool(enable)
        self._operable = bool(enable)

    @property
    def groups(self) -> tuple[MetricGroup, ...]:
        """The groups in their current order."""
        return tuple(self._groups)

    @property
    def metrics(self) -> tuple[Metric, ...]:
        """The metrics in their current order."""
        return tuple(self._metrics)

    def create_group(self, name: str, identity: int) -> MetricGroup:
        """Return the group with this name and identity, creating it if absent."""
        for group in self._groups:
            if group.name == name and group.identity == identity:
                return group
        group = MetricGroup(name=name, identity=identity)
        self._groups.append(group)
        return group

    def delete_group(self, name: str, identity: int) -> None:
        """Remove every group with this name and identity."""
        self._groups = [
            group
            for group in self._groups
            if not (group.name == name and group.identity == identity)
        ]

    def get_group_by_name(self, name: str) -> MetricGroup | None:
        """Return the first group with this name, or None."""
        return next((g for g in self._groups if g.name == name), None)

    def get_group_by_identity(self, identity: int) -> MetricGroup | None:
        """Return the first group with this identity, or None."""
        return next((g for g in self._groups if g.identity == identity), None)

    def sort_groups(self) -> None:
        """Order groups by name, then identity."""
        self._groups.sort(key=lambda g: (g.name, g.identity))

    def create_metric(self, group: MetricGroup, name: str) -> Metric:
        """Return the metric of this name in ``group``, creating it if absent."""
        for metric in self._metrics:
            if (
                metric.group_name == group.name
                and metric.group_identity == group.identity
                and metric.name == name
            ):
                return metric
        metric = Metric(name)
        metric.group_name = group.name
        metric.group_identity = group.identity
        self._metrics.append(metric)
        return metric

    def delete_metric(self, group: MetricGroup, name: str) -> None:
        """Remove every metric of this name in ``group``."""
        self._metrics = [
            metric
            for metric in self._metrics
            if not (
                metric.group_name == group.name
                and metric.group_identity == group.identity
                and metric.name == name
            )
        ]

    def metrics_by_name(self) -> list[Metric]:
        """Return all metrics sorted by name."""
        return sorted(self._metrics, key=lambda m: m.name)

    def metrics_by_group_name(self, group_name: str) -> list[Metric]:
        """Return the metrics of the named group, sorted by name."""
        return sorted(
            (m for m in self._metrics if m.group_name == group_name),
            key=lambda m: m.name,
        )

    def metrics_by_group_identity(self, group_identity: int) -> list[Metric]:
        """Return the metrics of the group with this identity, sorted by name."""
        return sorted(
            (m for m in self._metrics if m.group_identity == group_identity),
            key=lambda m: m.name,
        )

    def get_metric_by_group_name(
        self, group_name: str, metric_name: str
    ) -> Metric | None:
        """Return the first metric matching group name and metric name, or None."""
        return next(
            (
                m
                for m in self._metrics
                if m.group_name == group_name and m.name == metric_name
            ),
            None,
        )

    def get_metric_by_group_identity(
        self, group_identity: int, metric_name: str
    ) -> Metric | None:
        """Return the first metric matching group identity and name, or None."""
        return next(
            (
                m
                for m in self._metrics
                if m.group_identity == group_identity and m.name == metric_name
            ),
            None,
        )

    def sort_metrics_by_group(self) -> None:
        """Order metrics by group name, group identity, then name."""
        self._metrics.sort(key=lambda m: (m.group_name, m.group_identity, m.name))

    def sort_metrics_by_name(self) -> None:
        """Order metrics by name."""
        self._metrics.sort(key=lambda m: m.name)

    def __repr__(self) -> str:
        return (
            f"MetricDatabase(name={self.name!r}, groups={len(self._groups)}, "
            f"metrics={len(self._metrics)})"
        )