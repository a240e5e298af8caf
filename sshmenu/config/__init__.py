"""Configuration models and loading helpers for sshmenu."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

__all__ = ["ConfigError", "MenuConfig", "Project", "Server", "load_config"]


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or understood."""


def _string_field(payload: dict[str, Any], key: str, where: str) -> str:
    """Read an optional scalar field as a string."""

    value = payload.get(key)
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        msg = f"{where}: field '{key}' must be a string"
        raise ConfigError(msg)
    return str(value)


def _list_field(payload: dict[str, Any], key: str, where: str) -> list[Any]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"{where}: field '{key}' must be a list"
        raise ConfigError(msg)
    return value


@dataclass(frozen=True, slots=True)
class Server:
    """A single connectable target shown in the menu."""

    name: str
    description: str = ""
    command: str = ""

    @property
    def label(self) -> str:
        """Text displayed for this server in selection lists."""

        return f"{self.name} - {self.description}"

    @classmethod
    def from_payload(cls, payload: Any, where: str = "server") -> Server:
        """Build a server from a parsed YAML mapping."""

        if not isinstance(payload, dict):
            msg = f"{where}: expected a mapping"
            raise ConfigError(msg)
        return cls(
            name=_string_field(payload, "name", where),
            description=_string_field(payload, "description", where),
            command=_string_field(payload, "command", where),
        )


@dataclass(frozen=True, slots=True)
class Project:
    """A named group of servers."""

    name: str
    servers: tuple[Server, ...] = ()

    @classmethod
    def from_payload(cls, payload: Any, where: str = "project") -> Project:
        """Build a project and its servers from a parsed YAML mapping."""

        if not isinstance(payload, dict):
            msg = f"{where}: expected a mapping"
            raise ConfigError(msg)
        servers = tuple(
            Server.from_payload(item, f"{where}.servers[{index}]")
            for index, item in enumerate(_list_field(payload, "servers", where))
        )
        return cls(name=_string_field(payload, "name", where), servers=servers)


@dataclass(frozen=True, slots=True)
class MenuConfig:
    """Root configuration document."""

    global_command: str = ""
    projects: tuple[Project, ...] = ()

    @classmethod
    def from_payload(cls, payload: Any) -> MenuConfig:
        """Create a configuration instance from a parsed YAML document."""

        if not isinstance(payload, dict):
            msg = "configuration root must be a mapping"
            raise ConfigError(msg)
        projects = tuple(
            Project.from_payload(item, f"projects[{index}]")
            for index, item in enumerate(_list_field(payload, "projects", "configuration"))
        )
        return cls(
            global_command=_string_field(payload, "global_command", "configuration"),
            projects=projects,
        )


def load_config(path: Path) -> MenuConfig:
    """Parse the YAML file at ``path`` into a :class:`MenuConfig`."""

    try:
        with path.open(encoding="utf-8") as handle:
            payload = yaml.safe_load(handle)
    except OSError as exc:
        msg = f"unable to read {path}: {exc.strerror or exc}"
        raise ConfigError(msg) from exc
    except yaml.YAMLError as exc:
        msg = f"invalid YAML in {path}: {exc}"
        raise ConfigError(msg) from exc

    if payload is None:
        msg = f"{path} is empty"
        raise ConfigError(msg)
    return MenuConfig.from_payload(payload)
