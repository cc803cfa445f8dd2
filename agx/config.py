"""Loading of the TOML configuration file and turning it into pane specs."""

from __future__ import annotations

import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import platformdirs

from agx.colors import parse_color
from agx.input import KeyBinding
from agx.pane import PaneSpec
from agx.registry import AgentDefinition
from agx.split import SplitDirection

DEFAULT_PREFIX = "Ctrl-a"


class ConfigError(ValueError):
    """Raised when the configuration cannot be read or holds invalid values."""


def default_shell() -> str:
    """The shell a pane runs when nothing else is configured."""
    if sys.platform == "win32":
        return "powershell.exe"
    return "/bin/bash"


def normalize_pattern(pattern: str | None) -> str | None:
    """Trim an idle pattern; a blank pattern becomes None."""
    if pattern is None:
        return None
    trimmed = pattern.strip()
    return trimmed or None


@dataclass
class KeybindConfig:
    """The ``[keybind]`` table."""

    prefix: str = DEFAULT_PREFIX


@dataclass
class DefaultsConfig:
    """The ``[defaults]`` table."""

    shell: str | None = None
    split: str | None = None


@dataclass
class AgentConfig:
    """One ``[[agent]]`` entry."""

    name: str
    command: str
    detect_idle: str | None = None
    color: str | None = None


def _table(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"`{key}` must be a table")
    return value


def _string(table: dict[str, Any], key: str, where: str, *, required: bool = False) -> str | None:
    if key not in table:
        if required:
            raise ConfigError(f"missing field `{key}` in {where}")
        return None
    value = table[key]
    if not isinstance(value, str):
        raise ConfigError(f"`{where}.{key}` must be a string")
    return value


def _parse_agents(data: dict[str, Any]) -> list[AgentConfig]:
    entries = data.get("agent", [])
    if not isinstance(entries, list):
        raise ConfigError("`agent` must be an array of tables")
    agents = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ConfigError("`agent` must be an array of tables")
        agents.append(
            AgentConfig(
                name=_string(entry, "name", "agent", required=True),
                command=_string(entry, "command", "agent", required=True),
                detect_idle=_string(entry, "detect_idle", "agent"),
                color=_string(entry, "color", "agent"),
            )
        )
    return agents


@dataclass
class Config:
    """The whole configuration file."""

    keybind: KeybindConfig = field(default_factory=KeybindConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    agents: list[AgentConfig] = field(default_factory=list)

    @classmethod
    def path(cls) -> Path:
        """Where the configuration file lives."""
        return Path(platformdirs.user_config_dir()) / "agx" / "config.toml"

    @classmethod
    def load(cls) -> Config:
        """Load the configuration from its usual place."""
        return cls.load_from_path(cls.path())

    @classmethod
    def load_from_path(cls, path: str | Path) -> Config:
        """Load a configuration file; a missing file gives the defaults."""
        path = Path(path)
        if not path.exists():
            return cls()
        try:
            contents = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"failed to read config file at {path}") from exc
        return cls.load_from_str(contents)

    @classmethod
    def load_from_str(cls, contents: str) -> Config:
        """Parse configuration text; blank text gives the defaults."""
        if not contents.strip():
            return cls()
        try:
            data = tomllib.loads(contents)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError("failed to parse config contents") from exc

        keybind = _table(data, "keybind")
        defaults = _table(data, "defaults")
        prefix = _string(keybind, "prefix", "keybind")
        return cls(
            keybind=KeybindConfig(prefix=DEFAULT_PREFIX if prefix is None else prefix),
            defaults=DefaultsConfig(
                shell=_string(defaults, "shell", "defaults"),
                split=_string(defaults, "split", "defaults"),
            ),
            agents=_parse_agents(data),
        )

    def prefix_binding(self) -> KeyBinding:
        """The parsed prefix key."""
        return KeyBinding.parse(self.keybind.prefix)

    def default_split(self) -> SplitDirection:
        """The configured split direction, vertical if unset."""
        value = self.defaults.split
        if value is None:
            return SplitDirection.VERTICAL
        direction = SplitDirection.from_config_value(value)
        if direction is None:
            raise ConfigError(f"invalid defaults.split value `{value}`")
        return direction

    def default_pane_spec(self) -> PaneSpec:
        """The spec of a pane opened without naming a command."""
        shell = self.defaults.shell if self.defaults.shell is not None else default_shell()
        return self.resolve_pane_spec(shell)

    def resolve_pane_spec(self, spec: str) -> PaneSpec:
        """A registered agent by name, or else the text run as a command."""
        agent = next((candidate for candidate in self.agents if candidate.name == spec), None)
        if agent is None:
            return PaneSpec(label=spec, command=spec)
        accent_color = parse_color(agent.color) if agent.color is not None else None
        return PaneSpec(
            label=agent.name,
            command=agent.command,
            detect_idle=normalize_pattern(agent.detect_idle),
            accent_color=accent_color,
        )

    def agent_definitions(self) -> list[AgentDefinition]:
        """The configured agents as registry entries."""
        return [
            AgentDefinition(
                name=agent.name,
                command=agent.command,
                detect_idle=normalize_pattern(agent.detect_idle),
                color=agent.color,
            )
            for agent in self.agents
        ]