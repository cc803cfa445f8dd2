from agx.detector import AgentState, detect_state


def test_detect_idle_by_prompt():
    assert detect_state("user@host:~$ ", "$ ", False) is AgentState.IDLE


def test_detect_working_no_match():
    assert detect_state("Thinking...", "$ ", False) is AgentState.WORKING


def test_detect_dead_on_empty():
    assert detect_state("", "$ ", True) is AgentState.DEAD


def test_detect_custom_pattern():
    assert detect_state(" ", "", False) is AgentState.IDLE


def test_no_pattern_is_working():
    assert detect_state("anything $ ", None, False) is AgentState.WORKING


def test_exited_wins_over_match():
    assert detect_state("user@host:~$ ", "$ ", True) is AgentState.DEAD