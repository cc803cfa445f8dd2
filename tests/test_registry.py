import pytest

from agx.registry import AgentDefinition, AgentRegistry, DuplicateAgentError


def sample_agent():
    return AgentDefinition(name="claude", command="claude", detect_idle=None, color="cyan")


def test_register_and_lookup():
    registry = AgentRegistry()
    registry.register(sample_agent())
    assert registry.get("claude") == sample_agent()


def test_lookup_missing():
    registry = AgentRegistry()
    assert registry.get("missing") is None


def test_reject_duplicate():
    registry = AgentRegistry()
    registry.register(sample_agent())
    with pytest.raises(DuplicateAgentError):
        registry.register(sample_agent())
    assert len(registry) == 1


def test_iteration_sorted_by_name():
    registry = AgentRegistry()
    registry.register(AgentDefinition(name="codex", command="codex"))
    registry.register(sample_agent())
    assert [agent.name for agent in registry] == ["claude", "codex"]
    assert "codex" in registry