# uiauto_electron/config.py
"""
@file config.py
@brief Centralized timeout, polling and settle-delay configuration.
"""

from __future__ import annotations

import copy
import threading
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Dict, Generator, Mapping, Optional

import yaml

from .exceptions import ConfigError
from .timings import PAUSE_FIELDS, TIMEOUT_FIELDS, build_preset_values, list_presets


@dataclass(frozen=True)
class TimeoutSettings:
    """Budget and polling interval of one kind of wait."""
    timeout: float
    interval: float

    def with_overrides(
        self,
        timeout: Optional[float] = None,
        interval: Optional[float] = None,
    ) -> TimeoutSettings:
        changes = {}
        if timeout is not None:
            changes["timeout"] = float(timeout)
        if interval is not None:
            changes["interval"] = float(interval)
        return replace(self, **changes)


class TimeConfig:
    """
    Timing of every wait and settle pause in the page objects.

    Each wait reads its budget from ``TimeConfig.current()`` when it starts,
    so a run can pick a preset or pin values for a block:

        with TimeConfig.override(after_select_pause=0, menu_settle={"timeout": 2}):
            menu.get_item("Copy").select()

    Lookup order: thread-local override, then thread-local run config, then
    the process default.

    Fields are listed in ``timings.TIMEOUT_FIELDS`` (TimeoutSettings) and
    ``timings.PAUSE_FIELDS`` (seconds).
    """

    _default_instance: Optional[TimeConfig] = None
    _lock = threading.Lock()
    _local = threading.local()

    def __init__(self, preset: str = "default"):
        values = build_preset_values(preset)
        for name in TIMEOUT_FIELDS:
            setattr(self, name, TimeoutSettings(
                timeout=float(values[name]["timeout"]),
                interval=float(values[name]["interval"]),
            ))
        for name in PAUSE_FIELDS:
            setattr(self, name, float(values[name]))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            name: {"timeout": s.timeout, "interval": s.interval}
            for name, s in ((n, self.settings(n)) for n in TIMEOUT_FIELDS)
        }
        data.update({name: getattr(self, name) for name in PAUSE_FIELDS})
        return data

    def clone(self) -> TimeConfig:
        # TimeoutSettings are frozen, a shallow copy is independent
        return copy.copy(self)

    def settings(self, name: str) -> TimeoutSettings:
        if name not in TIMEOUT_FIELDS:
            raise ValueError(f"Unknown timeout field: {name}")
        return getattr(self, name)

    def update(self, overrides: Mapping[str, Any]) -> TimeConfig:
        """
        Apply overrides in place and return self.

        A timeout field accepts a TimeoutSettings, a dict with ``timeout``
        and/or ``interval``, or a number (the timeout). A pause accepts a number.

        @throws ValueError for unknown fields or unusable values
        """
        for key, value in overrides.items():
            if key in TIMEOUT_FIELDS:
                current = self.settings(key)
                if isinstance(value, TimeoutSettings):
                    setting = value
                elif isinstance(value, Mapping):
                    setting = current.with_overrides(value.get("timeout"), value.get("interval"))
                elif isinstance(value, (int, float)) and not isinstance(value, bool):
                    setting = current.with_overrides(timeout=value)
                else:
                    raise ValueError(f"Invalid override for {key}: {value!r}")
                setattr(self, key, setting)
            elif key in PAUSE_FIELDS:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValueError(f"Invalid pause for {key}: {value!r}")
                setattr(self, key, float(value))
            else:
                raise ValueError(f"Unknown TimeConfig field: {key}")
        return self

    # --- Construction ---

    @classmethod
    def build_from(
        cls,
        *,
        preset: str = "default",
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> TimeConfig:
        """Preset first, then overrides."""
        return cls(preset).update(overrides or {})

    @classmethod
    def from_yaml(cls, path: str) -> TimeConfig:
        """
        Load a timings file:

            preset: ci
            overrides:
              menu_settle: {timeout: 2.0}
              after_select_pause: 0.8

        @throws ConfigError if the file is unreadable or names unknown fields
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read timings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Timings file must be a mapping at root: {path}")
        try:
            return cls.build_from(
                preset=data.get("preset", "default"),
                overrides=data.get("overrides") or {},
            )
        except (ValueError, AttributeError) as e:
            raise ConfigError(f"Invalid timings file {path}: {e}") from e

    # --- Scopes ---

    @classmethod
    def default(cls) -> TimeConfig:
        if cls._default_instance is None:
            with cls._lock:
                if cls._default_instance is None:
                    cls._default_instance = cls()
        return cls._default_instance

    @classmethod
    def current(cls) -> TimeConfig:
        for scope in ("override", "run_config"):
            config = getattr(cls._local, scope, None)
            if config is not None:
                return config
        return cls.default()

    @classmethod
    def install_run_config(cls, config: TimeConfig) -> None:
        cls._local.run_config = config

    @classmethod
    def clear_run_config(cls) -> None:
        cls._local.run_config = None

    @classmethod
    def apply_preset(cls, preset: str) -> None:
        """Make ``preset`` the run config of this thread."""
        cls.install_run_config(cls(preset))

    @classmethod
    def apply_overrides(cls, overrides: Mapping[str, Any]) -> None:
        """Layer overrides on the current config and make that the run config."""
        cls.install_run_config(cls.current().clone().update(overrides))

    @classmethod
    @contextmanager
    def override(cls, **kwargs: Any) -> Generator[TimeConfig, None, None]:
        """Overrides visible to this thread for the duration of the block."""
        previous = getattr(cls._local, "override", None)
        cls._local.override = cls.current().clone().update(kwargs)
        try:
            yield cls._local.override
        finally:
            cls._local.override = previous

    @classmethod
    def reset_to_defaults(cls) -> None:
        with cls._lock:
            cls._default_instance = cls()
        cls._local.override = None
        cls._local.run_config = None


def configure_for_ci() -> None:
    """Use the CI preset for the current run scope."""
    TimeConfig.apply_preset("ci")


def configure_for_slow() -> None:
    """Use the slow preset for the current run scope."""
    TimeConfig.apply_preset("slow")


def available_presets() -> Dict[str, Dict[str, Any]]:
    return list_presets()
