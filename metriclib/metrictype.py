"""Value types a metric or a metric property can carry."""

from __future__ import annotations

from enum import IntEnum


class MetricType(IntEnum):
    """The kinds of values supported by metrics and properties."""

    Unknown = 0
    # Basic types
    Int8 = 1
    Int16 = 2
    Int32 = 3
    Int64 = 4
    UInt8 = 5
    UInt16 = 6
    UInt32 = 7
    UInt64 = 8
    Float = 9
    Double = 10
    Boolean = 11
    String = 12
    DateTime = 13
    Text = 14
    # Additional metric types
    UUID = 15
    DataSet = 16
    Bytes = 17
    File = 18
    Template = 19
    # Additional property value types
    PropertySet = 20
    PropertySetList = 21
    # Array types
    Int8Array = 22
    Int16Array = 23
    Int32Array = 24
    Int64Array = 25
    UInt8Array = 26
    UInt16Array = 27
    UInt32Array = 28
    UInt64Array = 29
    FloatArray = 30
    DoubleArray = 31
    BooleanArray = 32
    StringArray = 33
    DateTimeArray = 34


_TYPE_TEXT: dict[MetricType, str] = {
    MetricType.Unknown: "Unknown",
    MetricType.Int8: "8-bit Integer",
    MetricType.Int16: "16-bit Integer",
    MetricType.Int32: "32-bit Integer",
    MetricType.Int64: "64-bit Integer",
    MetricType.UInt8: "8-bit Unsigned Integer",
    MetricType.UInt16: "16-bit Unsigned Integer",
    MetricType.UInt32: "32-bit Unsigned Integer",
    MetricType.UInt64: "64-bit Unsigned Integer",
    MetricType.Float: "32-bit Float",
    MetricType.Double: "64-bit Float",
    MetricType.String: "String",
    MetricType.DateTime: "Date and Time",
    MetricType.Text: "Text",
    MetricType.Boolean: "Boolean",
    MetricType.UUID: "UUID",
    MetricType.DataSet: "Data Set",
    MetricType.Bytes: "Byte Array",
    MetricType.File: "File",
    MetricType.Template: "Template",
    MetricType.PropertySet: "Property Set",
    MetricType.PropertySetList: "Property Set List",
    MetricType.Int8Array: "8-bit Integer Array",
    MetricType.Int16Array: "16-bit Integer Array",
    MetricType.Int32Array: "32-bit Integer Array",
    MetricType.Int64Array: "64-bit Integer Array",
    MetricType.UInt8Array: "8-bit Unsigned Integer Array",
    MetricType.UInt16Array: "16-bit Unsigned Integer Array",
    MetricType.UInt32Array: "32-bit Unsigned Integer Array",
    MetricType.UInt64Array: "64-bit Unsigned Integer Array",
    MetricType.FloatArray: "32-bit Float Array",
    MetricType.DoubleArray: "64-bit Float Array",
    MetricType.BooleanArray: "Boolean Array",
    MetricType.StringArray: "StringArray",
    MetricType.DateTimeArray: "Date and Time Array",
}


def data_type_to_string(data_type: MetricType | int) -> str:
    """Return the display text of a data type, or an empty string if unknown."""
    try:
        member = MetricType(data_type)
    except ValueError:
        return ""
    return _TYPE_TEXT.get(member, "")


def string_to_data_type(text: str) -> MetricType:
    """Return the data type whose display text is ``text``, else ``Unknown``."""
    for member, member_text in _TYPE_TEXT.items():
        if member_text == text:
            return member
    return MetricType.Unknown