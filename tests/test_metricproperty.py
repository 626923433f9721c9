import pytest

from metriclib.metricproperty import MetricProperty
from metriclib.metrictype import MetricType


def test_properties():
    prop = MetricProperty()
    prop.key = "Donald"
    assert prop.key == "Donald"

    for data_type in MetricType:
        prop.data_type = data_type
        assert prop.data_type is data_type

    prop.is_null = True
    assert prop.is_null is True
    prop.is_null = False
    assert prop.is_null is False


def test_defaults():
    prop = MetricProperty()
    assert prop.key == ""
    assert prop.value == ""
    assert prop.data_type is MetricType.String
    assert prop.is_null is False
    assert prop.property_array == []


def test_key_value_constructor():
    prop = MetricProperty("Partner", "Goofy")
    assert prop.key == "Partner"
    assert prop.value_as(str) == "Goofy"
    assert prop.data_type is MetricType.String


def test_values():
    prop = MetricProperty()

    prop.data_type = MetricType.Boolean
    prop.set_value(True)
    assert prop.value_as(bool) is True
    prop.set_value(False)
    assert prop.value_as(bool) is False

    prop.data_type = MetricType.Int8
    prop.set_value(-9)
    assert prop.value_as(int) == -9

    prop.data_type = MetricType.Int16
    prop.set_value(-99)
    assert prop.value_as(int) == -99

    prop.data_type = MetricType.UInt8
    prop.set_value(9)
    assert prop.value_as(int) == 9

    prop.data_type = MetricType.UInt16
    prop.set_value(99)
    assert prop.value_as(int) == 99

    double_value = 1.0 / 3
    prop.data_type = MetricType.Double
    prop.set_value(double_value)
    assert prop.value_as(float) == double_value

    prop.data_type = MetricType.String
    prop.set_value("Blatter")
    assert prop.value_as(str) == "Blatter"


def test_date_time_value():
    prop = MetricProperty()
    prop.data_type = MetricType.DateTime
    prop.set_value(0)
    assert prop.value_as(int) == 0
    date_string = prop.value_as(str)
    assert len(date_string) > 0
    prop.set_value(date_string)
    assert prop.value_as(int) == 0


def test_value_attribute_setter():
    prop = MetricProperty()
    prop.value = True
    assert prop.value == "1"


def test_none_clears_value():
    prop = MetricProperty("k", "v")
    prop.set_value(None)
    assert prop.value == ""


def test_copy_is_independent():
    prop = MetricProperty("Partner", "Goofy")
    prop.data_type = MetricType.Text
    prop.is_null = True
    prop.property_array.append({"inner": MetricProperty("inner", "x")})

    duplicate = prop.copy()
    assert duplicate is not prop
    assert duplicate.key == "Partner"
    assert duplicate.value == "Goofy"
    assert duplicate.data_type is MetricType.Text
    assert duplicate.is_null is True
    assert duplicate.property_array == []

    duplicate.set_value("Pluto")
    assert prop.value == "Goofy"


def test_bad_kind_raises():
    prop = MetricProperty("k", "1")
    with pytest.raises(TypeError):
        prop.value_as(dict)


def test_bad_value_raises():
    prop = MetricProperty()
    with pytest.raises(TypeError):
        prop.set_value([1, 2])