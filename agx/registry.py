"""A lookup table of known agents by name."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class DuplicateAgentError(ValueError):
    """Raised when an agent name is registered twice."""


@dataclass(frozen=True)
class AgentDefinition:
    """How to start an agent and recognise when it is idle."""

    name: str
    command: str
    detect_idle: str | None = None
    color: str | None = None


class AgentRegistry:
    """Agents keyed by name, iterated in name order."""

    def __init__(self) -> None:
        self._agents: dict[str, AgentDefinition] = {}

    def register(self, definition: AgentDefinition) -> None:
        """Add an agent; raise DuplicateAgentError if the name is taken."""
        if definition.name in self._agents:
            raise DuplicateAgentError(
                f"duplicate agent registration for `{definition.name}`"
            )
        self._agents[definition.name] = definition

    def get(self, name: str) -> AgentDefinition | None:
        """The agent with this name, or None."""
        return self._agents.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._agents

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[AgentDefinition]:
        return (self._agents[name] for name in sorted(self._agents))