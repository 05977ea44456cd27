"""Tests for the generic Settings registry: set/get, checked reads, bulk merge."""
import logging

import pytest

from provider_config.settings import NULL_VALUE_MESSAGE, Settings


def test_set_setting_returns_self():
    """set_setting returns the same registry so calls can be chained."""
    s = Settings()
    assert s.set_setting("a", 1) is s


def test_defaults_copied_in():
    """Later changes to the defaults mapping do not leak into the registry."""
    defaults = {"a": "x"}
    s = Settings(defaults)
    defaults["a"] = "changed"
    assert s.setting("a") == "x"


def test_none_default_rejected():
    with pytest.raises(ValueError, match=NULL_VALUE_MESSAGE):
        Settings({"a": None})


def test_set_setting_none_leaves_existing_value():
    """A None write raises and neither overwrites nor inserts."""
    s = Settings({"a": "x"})
    with pytest.raises(ValueError, match=NULL_VALUE_MESSAGE):
        s.set_setting("a", None)
    assert s.setting("a") == "x"
    with pytest.raises(ValueError, match=NULL_VALUE_MESSAGE):
        s.set_setting("b", None)
    assert "b" not in s


def test_falsy_values_are_allowed():
    """Only None is rejected: False, 0 and empty string are stored."""
    s = Settings().set_setting("flag", False).set_setting("count", 0).set_setting("path", "")
    assert s.setting("flag") is False
    assert s.setting("count") == 0
    assert s.setting("path") == ""
    assert len(s) == 3


def test_setting_with_expected_type():
    s = Settings({"port": 9000, "enabled": True})
    assert s.setting("port", int) == 9000
    assert s.setting("enabled", bool) is True


def test_bool_does_not_satisfy_int(caplog):
    """A flag read as int is a type mismatch: logged and returned as None."""
    s = Settings({"enabled": True})
    with caplog.at_level(logging.WARNING, logger="provider_config.settings"):
        assert s.setting("enabled", int) is None
    assert "enabled" in caplog.text


def test_settings_view_is_read_only_and_live():
    """The settings view rejects writes and reflects later set/merge calls."""
    s = Settings({"a": 1})
    view = s.settings
    with pytest.raises(TypeError):
        view["b"] = 2
    s.set_setting("b", 2)
    s.merge_settings(lambda settings: settings.update({"c": 3}))
    assert dict(view) == {"a": 1, "b": 2, "c": 3}


def test_merge_settings_adds_and_removes():
    """The mutator may add and delete keys; the result is committed."""
    s = Settings({"a": 1, "b": 2})

    def mutate(settings):
        settings["c"] = 3
        del settings["a"]

    assert s.merge_settings(mutate) is s
    assert dict(s.settings) == {"b": 2, "c": 3}


def test_merge_settings_accepts_non_str_names(caplog):
    """Names of any hashable type merge like they set, with debug logging on."""
    s = Settings({"a": 1})
    with caplog.at_level(logging.DEBUG, logger="provider_config.settings"):
        s.merge_settings(lambda settings: settings.update({1: "x"}))
        s.merge_settings(lambda settings: settings.pop("a"))
    assert dict(s.settings) == {1: "x"}
    assert "Merged new settings" in caplog.text
    assert "Merge removed settings" in caplog.text
    assert repr(s) == "Settings([1])"


def test_merge_settings_none_value_rejected_atomically():
    """One None value in the batch rejects the whole batch."""
    s = Settings({"a": 1})

    def mutate(settings):
        settings["b"] = 2
        settings["a"] = None

    with pytest.raises(ValueError, match=NULL_VALUE_MESSAGE):
        s.merge_settings(mutate)
    assert dict(s.settings) == {"a": 1}


def test_merge_settings_mutator_error_propagates():
    """An exception from the mutator propagates and nothing is committed."""
    s = Settings({"a": 1})

    def mutate(settings):
        settings["b"] = 2
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        s.merge_settings(mutate)
    assert "b" not in s


def test_repr_lists_names():
    assert repr(Settings({"b": 1, "a": 2})) == "Settings(['a', 'b'])"
