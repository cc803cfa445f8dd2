"""Guessing whether an agent is idle, working or gone from its output."""

from __future__ import annotations

from enum import Enum


class AgentState(Enum):
    """What an agent pane is doing."""

    IDLE = "idle"
    WORKING = "working"
    DEAD = "dead"


def detect_state(output: str, idle_pattern: str | None, exited: bool) -> AgentState:
    """Classify a pane from its screen contents and whether its process exited."""
    if exited:
        return AgentState.DEAD
    if idle_pattern is not None and idle_pattern in output:
        return AgentState.IDLE
    return AgentState.WORKING