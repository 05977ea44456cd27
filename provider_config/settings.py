"""
Generic settings registry: name -> value, non-null on every write.
Storage is untyped; reads take an optional expected type and are checked.
"""
import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

NULL_VALUE_MESSAGE = "value cannot be null"


def _require_value(value: Any) -> None:
    if value is None:
        raise ValueError(NULL_VALUE_MESSAGE)


def _matches(value: Any, expected_type: type) -> bool:
    # bool is an int subclass; a flag must not satisfy an int read
    if expected_type is int and isinstance(value, bool):
        return False
    return isinstance(value, expected_type)


class Settings:
    """Mutable, validated key-value settings. Not thread-safe; configure once, then read."""

    def __init__(self, defaults: Mapping[str, Any] | None = None):
        self._settings: dict[str, Any] = {}
        for name, value in (defaults or {}).items():
            self.set_setting(name, value)

    def set_setting(self, name: str, value: Any) -> "Settings":
        """Store value under name (insert or overwrite). Raises ValueError if value is None."""
        _require_value(value)
        self._settings[name] = value
        return self

    def setting(self, name: str, expected_type: type | None = None) -> Any:
        """
        Return the value stored under name, or None if never set.
        With expected_type, a stored value of another type is logged and read as None.
        """
        value = self._settings.get(name)
        if value is None or expected_type is None:
            return value
        if not _matches(value, expected_type):
            logger.warning(
                "Setting %s holds %s, expected %s; treating as unset",
                name,
                type(value).__name__,
                expected_type.__name__,
            )
            return None
        return value

    @property
    def settings(self) -> Mapping[str, Any]:
        """Read-only live view of every stored setting (defaults included)."""
        return MappingProxyType(self._settings)

    def merge_settings(self, mutator: Callable[[dict[str, Any]], None]) -> "Settings":
        """
        Apply a bulk mutation to a copy of the stored map; the copy replaces the
        stored map only if no value in it is None.
        """
        staged = dict(self._settings)
        mutator(staged)
        for value in staged.values():
            _require_value(value)
        added = staged.keys() - self._settings.keys()
        removed = self._settings.keys() - staged.keys()
        if added:
            logger.debug("Merged new settings: %s", added)
        if removed:
            logger.debug("Merge removed settings: %s", removed)
        # in place, so views handed out by `settings` stay live
        self._settings.clear()
        self._settings.update(staged)
        return self

    def __contains__(self, name: object) -> bool:
        return name in self._settings

    def __len__(self) -> int:
        return len(self._settings)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._settings, key=str)!r})"
