# uiauto_electron/repository.py
"""
@file repository.py
@brief Versioned locator tables loaded from YAML.

A locator file maps page-object component names to symbolic locators:

    version: "1.61.0"
    components:
      ContextMenu:
        elem: ".monaco-menu-container"
        itemElement: ".action-item"
      CustomTreeSection:
        labelledNode: ".//*[@aria-label]"

``{placeholders}`` in a locator are filled when a page object looks it up.
"""

from __future__ import annotations
import json
import logging
import os
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

import jsonschema
import yaml

from .exceptions import ConfigError

_LOGGER = logging.getLogger(__name__)

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_LOCATORS_DIR = os.path.join(PACKAGE_DIR, "locators")
SCHEMA_PATH = os.path.join(PACKAGE_DIR, "schemas", "locators.schema.json")


def parse_version(version: str) -> Tuple[int, ...]:
    """'1.61.0' -> (1, 61, 0). Pre-release suffixes after '-' are ignored."""
    core = str(version).strip().split("-", 1)[0]
    try:
        return tuple(int(part) for part in core.split("."))
    except ValueError as e:
        raise ConfigError(f"Invalid version string: {version!r}") from e


def _load_schema() -> Dict[str, Any]:
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


class LocatorMap:
    """
    Immutable locator table for one application version.
    """

    def __init__(self, version: str, components: Mapping[str, Mapping[str, str]]):
        self.version = str(version)
        self._components = MappingProxyType({
            name: MappingProxyType(dict(entries)) for name, entries in components.items()
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LocatorMap:
        """Validate a raw ``{version, components}`` mapping and build a table."""
        try:
            jsonschema.validate(instance=data, schema=_load_schema())
        except jsonschema.ValidationError as e:
            where = "/".join(str(p) for p in e.absolute_path) or "<root>"
            raise ConfigError(f"Invalid locator table at {where}: {e.message}") from e
        return cls(data["version"], data["components"])

    @property
    def components(self) -> Mapping[str, Mapping[str, str]]:
        return self._components

    def section(self, component: str) -> Mapping[str, str]:
        if component not in self._components:
            raise ConfigError(
                f"Locator table {self.version} has no component '{component}'. "
                f"Available: {sorted(self._components)}"
            )
        return self._components[component]

    def get(self, component: str, name: str, /, **params: Any) -> str:
        """
        Look up a locator and fill its placeholders.

        @throws ConfigError for unknown names or missing placeholder values
        """
        section = self.section(component)
        if name not in section:
            raise ConfigError(f"Unknown locator: {component}.{name}")
        template = section[name]
        if not params:
            return template
        try:
            return template.format(**params)
        except KeyError as e:
            raise ConfigError(f"Locator {component}.{name} needs parameter {e}") from e

    def __repr__(self) -> str:
        return f"LocatorMap(version={self.version!r}, components={len(self._components)})"


class LocatorRepository:
    """
    Loads every ``*.yaml`` locator table in a directory and picks the table
    matching a target application version.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = os.path.abspath(path or DEFAULT_LOCATORS_DIR)
        if not os.path.isdir(self.path):
            raise ConfigError(f"Locator directory not found: {self.path}")
        self._tables: Dict[Tuple[int, ...], LocatorMap] = {}
        for filename in sorted(os.listdir(self.path)):
            if filename.endswith((".yaml", ".yml")):
                table = LocatorMap.from_dict(self._load_yaml(os.path.join(self.path, filename)))
                self._tables[parse_version(table.version)] = table
        if not self._tables:
            raise ConfigError(f"No locator tables in {self.path}")
        _LOGGER.debug("Loaded locator tables %s from %s", self.list_versions(), self.path)

    @staticmethod
    def _load_yaml(path: str) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Locator YAML must be a mapping at root: {path}")
        return data

    def list_versions(self) -> List[str]:
        return [self._tables[key].version for key in sorted(self._tables)]

    def for_version(self, version: str) -> LocatorMap:
        """
        Table of the newest version that is not newer than ``version``.

        @throws ConfigError if every table is newer than the requested version
        """
        wanted = parse_version(version)
        candidates = [key for key in self._tables if key <= wanted]
        if not candidates:
            raise ConfigError(
                f"No locator table for version {version}; available: {self.list_versions()}"
            )
        return self._tables[max(candidates)]

    def latest(self) -> LocatorMap:
        return self._tables[max(self._tables)]
