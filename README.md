# metriclib

A small library for describing metrics: named values with a data type,
free-form properties and membership in groups, all kept together in an
in-memory metric database. Every value is stored as text and can be read
back as `str`, `bool`, `int` or `float`.

## Installation

```
pip install metriclib
```

The library has no dependencies outside the standard library. The extra
`metriclib[test]` installs pytest for the test suite.

## Modules

### `metriclib.metrictype`

- `MetricType` is an `IntEnum` of the supported value types, from
  `Unknown` (0) through the basic types (`Int8` … `Text`), `UUID`,
  `DataSet`, `Bytes`, `File`, `Template`, `PropertySet`,
  `PropertySetList` and the array types up to `DateTimeArray` (34).
- `data_type_to_string(data_type)` returns the display text of a type,
  such as `"32-bit Float"` for `MetricType.Float`. A value outside the
  enum gives an empty string.
- `string_to_data_type(text)` does the reverse and returns
  `MetricType.Unknown` for text it does not recognise.

### `metriclib.metrichelper`

- `float_to_string(value)` rounds the value to single precision and
  writes it with the fewest digits that read back to the same
  single-precision number.
- `double_to_string(value)` does the same for a double-precision value.
  Both choose the fixed or scientific layout, whichever is shorter, and
  write `nan`, `inf`, `-inf`, `0` and `-0` for the special values.
- `format_value(value)` gives the stored text of a value. `None` becomes
  `""`, booleans become `"1"` or `"0"`, integers their decimal text, floats
  their shortest double-precision form and strings stay as they are. Any
  other type raises `TypeError`.
- `parse_value(text, kind)` reads text as `str`, `bool`, `int` or
  `float`. A boolean is true when the text starts with `Y`, `y`, `T`, `t`
  or `1`. Numbers are read from the start of the text, after any leading
  white space, and text that holds no number reads as zero. Any other
  kind raises `TypeError`.

### `metriclib.metricproperty`

`MetricProperty(key="", value="")` is a key with a value stored as text.
It has a `key`, a `data_type` (a `MetricType`, `String` by default), an
`is_null` flag and a `property_array` list of property dictionaries. The
`value` attribute is the stored text. Assigning to it, or calling
`set_value(value)`, stores a value through `format_value`.
`value_as(kind)` reads it back through `parse_value`. `copy()` returns a
new property with the same key, type, null flag and value. The property
array is not copied.

### `metriclib.metricgroup`

`MetricGroup` is a dataclass with `name`, `description`, `type` (a
`TypeOfGroup`: `General`, `CanMessage` or `Device`) and `identity`.
Groups compare by identity of the object, not by field values.

### `metriclib.metric`

`Metric(name="")` is a named value with:

- `name`, `group_name` and `group_identity`.
- `identity`, `timestamp` and `data_type` (`MetricType.String` by
  default).
- The flags `is_historical`, `is_transient`, `is_null`, `is_valid` and
  `is_read_only`.
- `description` and `unit`, which are kept as properties under the keys
  `"description"` and `"unit"`.
- `properties`, a read-only mapping from key to `MetricProperty`.

Use the property methods as follows:

- `add_property(prop)` stores a copy of `prop` and replaces any property
  that has the same key.
- `create_property(key)` returns the stored property for `key` and creates
  an empty one if there is none.
- `get_property(key)` returns the property for `key`, or `None`.
- `delete_property(key)` removes the property for `key`.

`set_value(value)`, or assigning to `value`, stores the text form of the
value and marks the metric valid. If the stored text changed, the metric
is also marked updated. `is_updated` reports that mark, and
`set_updated()` and `reset_updated()` set and clear it. `value_as(kind)`
reads the value as `str`, `bool`, `int` or `float`.

### `metriclib.metricdatabase`

- `TypeOfDatabase` has the members `Unknown`, `Sqlite`, `DbcFile` and
  `A2lFile`.
- `type_to_string` and `type_from_string` convert between a member and
  its display text (`"Unknown"`, `"SQLite Database"`, `"DBC File"`,
  `"A2L File"`). Unrecognised input maps to `Unknown`.

`MetricDatabase` holds groups and metrics. It has:

- Attributes `name`, `description` and `filename`.
- A read-only `type`.
- `enable(flag)`, which sets both `is_enabled` and `is_operable`.

The group and metric methods are:

- `create_group(name, identity)` returns the existing group with that
  name and identity, or appends a new one.
- `delete_group(name, identity)` removes every matching group.
- `get_group_by_name` and `get_group_by_identity` return the first
  matching group, or `None`.
- `sort_groups()` orders groups by name, then identity.
- `create_metric(group, name)` returns the metric of that name in the
  group, or appends a new one.
- `delete_metric(group, name)` removes every matching metric.
- `get_metric_by_group_name` and `get_metric_by_group_identity` look up a
  single metric.
- `metrics_by_name()`, `metrics_by_group_name(group_name)` and
  `metrics_by_group_identity(group_identity)` return new lists sorted by
  metric name.
- `sort_metrics_by_group()` orders the stored metrics by group name,
  group identity and name. `sort_metrics_by_name()` orders them by name.

`groups` and `metrics` give the current contents, in order, as tuples.

## Example

```python
from metriclib.metricdatabase import MetricDatabase

db = MetricDatabase()
db.name = "Plant"
group = db.create_group("Boiler", 101)
temperature = db.create_metric(group, "Temperature")
temperature.unit = "degC"

temperature.set_value(21.5)
assert temperature.value == "21.5"
assert temperature.value_as(float) == 21.5
assert temperature.is_updated
temperature.reset_updated()

found = db.get_metric_by_group_name("Boiler", "Temperature")
assert found is temperature
print([m.name for m in db.metrics_by_group_identity(101)])
```

## What it does not do

`MetricDatabase` lives only in memory. Nothing in the package reads or
writes a file or a database. The `filename` attribute and the
`TypeOfDatabase` members (SQLite, DBC, A2L) are recorded as given, but no
loader or saver exists for any of them. The database type of a
`MetricDatabase` is always `TypeOfDatabase.Unknown`. There is also no
command-line tool.