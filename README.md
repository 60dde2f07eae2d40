# layeredconf

A small configuration store for Python applications. Values are gathered
from one or more sources (JSON or YAML files, environment variables,
in-code defaults), merged into a single thread-safe key/value store, and
checked with validators.

## Installation

```
pip install layeredconf
```

## Usage

```python
from layeredconf.config import ConfigManager
from layeredconf.loader import DefaultSource, EnvSource, FileSource
from layeredconf.validator import RangeValidator, RequiredValidator

config = ConfigManager()

# Later sources override earlier ones, key by key.
config.load(DefaultSource({"port": 8080, "debug": False}))
config.load(FileSource("settings.yaml"))
config.load(EnvSource("MYAPP_"))   # MYAPP_DB_HOST -> "db.host"

config.add_validator(RequiredValidator(["port"]))
config.add_validator(RangeValidator("port", 1, 65535, is_int=True))
config.validate()                  # raises ValidationError on failure

port = config.get_int("port")
debug = config.get_bool("debug")
```

## The store: `layeredconf.config`

`ConfigManager` holds the values behind a lock, so it can be shared
between threads.

- `set(key, value)` stores a value.
- `get(key, default=None)` returns the stored value as is, or `default`.
- `get_string(key)` and `get_bool(key)` return the value when it is a
  `str` or `bool`, otherwise `None`.
- `get_int(key)` returns an `int` value, or a finite `float` truncated to
  `int`; booleans are not treated as numbers. Otherwise `None`.
- `get_float(key)` returns a `float` value, or an `int` converted to
  `float`; booleans are not treated as numbers. Otherwise `None`.
- `get_string_slice(key)` returns a list or tuple as a new `list` when
  every item is a string, otherwise `None`.
- `load(source)` calls `source.load()` and merges the result in,
  overriding existing keys. Any exception raised by the source is
  re-raised as `ConfigLoadError`, chained to the original.
- `add_validator(validator)` registers a validator; `validate()` runs them
  in the order added, against a read-only view of the values, and lets the
  first failure propagate.

## Sources: `layeredconf.loader`

Each source subclasses `Source` and implements `load()`, returning a
dictionary. Any object with such a `load()` method can be passed to
`ConfigManager.load`.

- `FileSource(path)` reads a file and picks the format by its extension
  (case-insensitive): `.json`, `.yaml` or `.yml`. JSON numbers are all read
  as floats; YAML keeps integers as integers. An empty YAML document gives
  an empty mapping. An unreadable file, a parse failure, a top level that
  is not a mapping, or any other extension raises `SourceError`.
- `EnvSource(prefix="", environ=None)` reads environment variables whose
  names start with the upper-cased prefix (from `os.environ`, or from the
  `environ` mapping if given). The prefix is removed, the rest is
  lower-cased and underscores become dots, so `MYAPP_DB_HOST` gives
  `"db.host"`. Values go through `parse_env_value`.
- `DefaultSource(values)` returns the given dictionary.

`parse_env_value(text)` turns `"true"` and `"false"` into booleans; else it
takes a leading integer (so `"3.5"` reads as `3` and `"42abc"` as `42`),
else a leading float (`".5"`, `"inf"`), and failing both keeps the text.

## Validators: `layeredconf.validator`

Validators subclass `Validator` and implement `validate(values)`, raising
`ValidationError` on failure.

- `RequiredValidator(keys)` — every key must be present.
- `TypeValidator(key, expected)` — the value, when present, must be of
  exactly that type (subclasses do not count, so `True` is not an `int`).
- `RangeValidator(key, minimum, maximum, is_int=False)` — the value, when
  present, must be an `int` or `float` (not a `bool`) between the bounds
  inclusive, and a whole number when `is_int` is set.

## What it does not do

- Keys are flat strings. `"db.host"` is a key of its own; nested mappings
  read from a file are stored as dictionary values and are not searched
  by dotted keys.
- There is no way to write a configuration back to a file.
- There is no command-line tool; the package is used as a library.

## Running the tests

```
pip install -e ".[test]"
pytest
```