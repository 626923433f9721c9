import pytest

from metriclib.metricdatabase import (
    MetricDatabase,
    TypeOfDatabase,
    type_from_string,
    type_to_string,
)


def test_properties():
    database = MetricDatabase()

    database.name = "Kaiju World"
    assert database.name == "Kaiju World"

    database.description = "World of monsters"
    assert database.description == "World of monsters"

    database.filename = "King_Kong.db"
    assert database.filename == "King_Kong.db"

    database.enable(True)
    assert database.is_enabled
    assert database.is_operable
    database.enable(False)
    assert not database.is_enabled
    assert not database.is_operable

    group = database.create_group("Godzilla", 1)
    assert group.name == "Godzilla"
    assert group.identity == 1
    assert len(database.groups) == 1
    database.delete_group(group.name, group.identity)
    assert len(database.groups) == 0

    godzilla_group = database.create_group("Godzillas", 123)
    metric = database.create_metric(godzilla_group, "Godzilla")
    assert metric.name == "Godzilla"
    assert metric.group_name == "Godzillas"
    assert metric.group_identity == 123
    assert len(database.metrics) == 1
    database.delete_metric(godzilla_group, "Godzilla")
    assert len(database.metrics) == 0


def test_default_type_is_unknown():
    assert MetricDatabase().type is TypeOfDatabase.Unknown


@pytest.mark.parametrize("db_type", list(TypeOfDatabase))
def test_type_conversion_round_trip(db_type):
    assert type_from_string(type_to_string(db_type)) is db_type


@pytest.mark.parametrize(
    "db_type, text",
    [
        (TypeOfDatabase.Unknown, "Unknown"),
        (TypeOfDatabase.Sqlite, "SQLite Database"),
        (TypeOfDatabase.DbcFile, "DBC File"),
        (TypeOfDatabase.A2lFile, "A2L File"),
    ],
)
def test_type_text(db_type, text):
    assert type_to_string(db_type) == text


def test_type_conversion_unknown_inputs():
    assert type_from_string("Nonsense") is TypeOfDatabase.Unknown
    assert type_to_string(99) == "Unknown"


def test_create_group_twice_returns_same_group():
    database = MetricDatabase()
    first = database.create_group("A", 1)
    database.create_group("B", 2)
    again = database.create_group("A", 1)
    assert again is first
    assert len(database.groups) == 2


def test_create_metric_twice_returns_same_metric():
    database = MetricDatabase()
    group = database.create_group("A", 1)
    first = database.create_metric(group, "m1")
    database.create_metric(group, "m2")
    assert database.create_metric(group, "m1") is first
    assert len(database.metrics) == 2


def test_sorting():
    database = MetricDatabase()
    database.name = "Kaiju World"
    database.description = "World of monsters"

    king_kong_group = database.create_group("King Kongs", 101)
    assert len(database.groups) == 1
    metric1 = database.create_metric(king_kong_group, "King Kong 1")
    metric2 = database.create_metric(king_kong_group, "King Kong 2")
    assert len(database.metrics) == 2

    godzilla_group = database.create_group("Godzillas", 101)
    assert len(database.groups) == 2
    metric3 = database.create_metric(godzilla_group, "Godzilla 2")
    metric4 = database.create_metric(godzilla_group, "Godzilla 1")
    assert len(database.metrics) == 4

    assert database.groups[0].name == king_kong_group.name
    assert database.groups[1].name == godzilla_group.name

    assert [m.name for m in database.metrics] == [
        metric1.name,
        metric2.name,
        metric3.name,
        metric4.name,
    ]

    database.sort_groups()
    assert database.groups[0].name == godzilla_group.name
    assert database.groups[1].name == king_kong_group.name

    database.sort_metrics_by_group()
    assert [m.name for m in database.metrics] == [
        metric4.name,
        metric3.name,
        metric1.name,
        metric2.name,
    ]

    database.sort_metrics_by_name()
    assert [m.name for m in database.metrics] == [
        metric4.name,
        metric3.name,
        metric1.name,
        metric2.name,
    ]


def test_sort_groups_uses_identity_on_equal_names():
    database = MetricDatabase()
    high = database.create_group("Same", 5)
    low = database.create_group("Same", 2)
    database.sort_groups()
    assert database.groups[0] is low
    assert database.groups[1] is high


def test_access():
    database = MetricDatabase()
    database.name = "Kaiju World"
    database.description = "World of monsters"

    king_kong_group = database.create_group("King Kongs", 101)
    metric1 = database.create_metric(king_kong_group, "King Kong 1")
    metric2 = database.create_metric(king_kong_group, "King Kong 2")

    godzilla_group = database.create_group("Godzillas", 102)
    metric3 = database.create_metric(godzilla_group, "Godzilla 2")
    metric4 = database.create_metric(godzilla_group, "Godzilla 1")
    assert len(database.groups) == 2
    assert len(database.metrics) == 4

    assert database.get_group_by_name("Godzillas") is godzilla_group
    assert database.get_group_by_identity(101) is king_kong_group

    assert database.get_metric_by_group_name("Godzillas", "Godzilla 1") is metric4
    assert database.get_metric_by_group_identity(101, "King Kong 1") is metric1

    by_name = database.metrics_by_name()
    assert len(by_name) == 4
    assert by_name[3] is metric2

    godzillas = database.metrics_by_group_name("Godzillas")
    assert len(godzillas) == 2
    assert godzillas[1] is metric3
    assert godzillas[0] is metric4

    by_identity = database.metrics_by_group_identity(102)
    assert len(by_identity) == 2
    assert by_identity[0] is metric4


def test_lookups_return_none_when_missing():
    database = MetricDatabase()
    group = database.create_group("G", 7)
    database.create_metric(group, "m")
    assert database.get_group_by_name("missing") is None
    assert database.get_group_by_identity(8) is None
    assert database.get_metric_by_group_name("G", "other") is None
    assert database.get_metric_by_group_identity(8, "m") is None
    assert database.metrics_by_group_name("missing") == []


def test_delete_missing_leaves_lists_unchanged():
    database = MetricDatabase()
    group = database.create_group("G", 7)
    database.create_metric(group, "m")
    database.delete_group("G", 8)
    database.delete_metric(group, "other")
    assert len(database.groups) == 1
    assert len(database.metrics) == 1