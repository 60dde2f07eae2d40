import pytest

from layeredconf.config import ConfigLoadError, ConfigManager
from layeredconf.loader import DefaultSource, Source
from layeredconf.validator import RequiredValidator, ValidationError, Validator


class MockSource(Source):
    def __init__(self, values=None, error=None):
        self.values = values
        self.error = error

    def load(self):
        if self.error is not None:
            raise self.error
        return self.values


class MockValidator(Validator):
    def __init__(self, should_fail):
        self.should_fail = should_fail

    def validate(self, values):
        if self.should_fail:
            raise ValidationError("validation failed")


def test_basic_operations():
    cfg = ConfigManager()

    cfg.set("string_key", "test_value")
    assert cfg.get_string("string_key") == "test_value"

    cfg.set("int_key", 42)
    assert cfg.get_int("int_key") == 42

    cfg.set("bool_key", True)
    assert cfg.get_bool("bool_key") is True

    cfg.set("float_key", 3.14)
    assert cfg.get_float("float_key") == 3.14

    cfg.set("slice_key", ["one", "two", "three"])
    assert cfg.get_string_slice("slice_key") == ["one", "two", "three"]


def test_type_conversion():
    cfg = ConfigManager()

    cfg.set("number", 42)
    assert cfg.get_float("number") == 42.0

    cfg.set("float", 42.7)
    assert cfg.get_int("float") == 42


def test_load():
    cfg = ConfigManager()
    cfg.load(MockSource(values={"key1": "value1", "key2": 42}))
    assert cfg.get_string("key1") == "value1"
    assert cfg.get_int("key2") == 42

    with pytest.raises(ConfigLoadError, match="failed to load configuration: load error"):
        cfg.load(MockSource(error=RuntimeError("load error")))


def test_load_error_keeps_cause():
    cfg = ConfigManager()
    cause = RuntimeError("load error")
    with pytest.raises(ConfigLoadError) as info:
        cfg.load(MockSource(error=cause))
    assert info.value.__cause__ is cause


def test_load_overrides_existing_values():
    cfg = ConfigManager()
    cfg.set("key1", "old")
    cfg.set("keep", "kept")
    cfg.load(DefaultSource({"key1": "new"}))
    assert cfg.get("key1") == "new"
    assert cfg.get("keep") == "kept"


def test_load_of_empty_source_changes_nothing():
    cfg = ConfigManager()
    cfg.set("key1", "value1")
    cfg.load(MockSource(values=None))
    assert cfg.get("key1") == "value1"


def test_validation():
    cfg = ConfigManager()
    cfg.add_validator(MockValidator(should_fail=False))
    assert cfg.validate() is None

    cfg.add_validator(MockValidator(should_fail=True))
    with pytest.raises(ValidationError, match="validation failed"):
        cfg.validate()


def test_validation_sees_current_values():
    cfg = ConfigManager()
    cfg.add_validator(RequiredValidator(keys=["host"]))
    with pytest.raises(ValidationError, match="host"):
        cfg.validate()
    cfg.set("host", "localhost")
    assert cfg.validate() is None


def test_non_existent_keys():
    cfg = ConfigManager()
    assert cfg.get_string("nonexistent") is None
    assert cfg.get_int("nonexistent") is None
    assert cfg.get_bool("nonexistent") is None
    assert cfg.get_float("nonexistent") is None
    assert cfg.get_string_slice("nonexistent") is None


def test_get_returns_default_for_missing_key():
    cfg = ConfigManager()
    assert cfg.get("nonexistent") is None
    assert cfg.get("nonexistent", "fallback") == "fallback"
    cfg.set("present", 0)
    assert cfg.get("present", "fallback") == 0


def test_typed_getters_reject_wrong_types():
    cfg = ConfigManager()
    cfg.set("text", "test_value")
    cfg.set("flag", True)
    assert cfg.get_int("text") is None
    assert cfg.get_float("text") is None
    assert cfg.get_bool("text") is None
    assert cfg.get_string("flag") is None
    assert cfg.get_int("flag") is None
    assert cfg.get_float("flag") is None


def test_string_slice_requires_all_strings():
    cfg = ConfigManager()
    cfg.set("mixed", ["one", 2])
    cfg.set("tuple", ("one", "two"))
    cfg.set("empty", [])
    cfg.set("text", "one")
    assert cfg.get_string_slice("mixed") is None
    assert cfg.get_string_slice("tuple") == ["one", "two"]
    assert cfg.get_string_slice("empty") == []
    assert cfg.get_string_slice("text") is None