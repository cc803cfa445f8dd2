# agx

Core pieces of a terminal multiplexer for running several AI agents (or
plain shells) side by side, each in its own pane, grouped into workspaces.

The package holds the logic that needs no terminal of its own:

- `agx.config` loads `config.toml` (by default from
  `<user config dir>/agx/config.toml`, found with `platformdirs`) and turns
  agent names into `PaneSpec` objects. `Config.load()` falls back to the
  defaults when the file is missing; bad TOML or bad values raise
  `ConfigError`, a `ValueError`.
- `agx.input` has `KeyEvent`, `KeyCode` and `KeyModifiers`, parses prefix
  bindings such as `Ctrl-a` with `KeyBinding.parse`, and routes key presses
  with `PrefixRouter` either to the focused pane or to a `PrefixCommand`.
- `agx.layout` splits a `Rect` into equal pane areas above a one-row status
  bar with `compute_layout`; `pane_inners` are the areas inside a one-cell
  border.
- `agx.workspace` keeps the panes of a `Workspace` and which one has focus.
- `agx.detector` decides with `detect_state` whether an agent is
  `AgentState.IDLE`, `WORKING` or `DEAD`.
- `agx.pane` holds `PaneSpec` and `encode_key`, which turns a key event into
  the bytes a terminal program expects.
- `agx.registry` keeps `AgentDefinition` entries by name; registering a name
  twice raises `DuplicateAgentError`.
- `agx.colors` has `Color` and `parse_color`, which accepts colour names and
  `#rrggbb` values.
- `agx.split` has `SplitDirection` (`VERTICAL`, `HORIZONTAL`).

## Installation

```
pip install .
```

## Configuration

```toml
[keybind]
prefix = "Ctrl-a"

[defaults]
shell = "/bin/bash"
split = "vertical"      # or "horizontal"

[[agent]]
name = "claude"
command = "claude"
detect_idle = "> "
color = "cyan"          # a colour name or "#rrggbb"
```

Without a `shell`, panes run `/bin/bash` (`powershell.exe` on Windows).
Without a `split`, panes sit side by side (`vertical`).

## Example

```python
from agx.config import Config
from agx.input import KeyCode, KeyEvent, KeyModifiers, PrefixRouter
from agx.layout import Rect, compute_layout
from agx.pane import encode_key
from agx.split import SplitDirection

config = Config.load_from_path("config.toml")
spec = config.resolve_pane_spec("claude")
print(spec.label, spec.command, spec.accent_color)

router = PrefixRouter(config.prefix_binding(), 2.0)
router.route_key(KeyEvent("a", KeyModifiers.CONTROL), 0.0)  # enter prefix mode
action = router.route_key(KeyEvent("n"), 0.5)
print(action.command)                                       # new_pane

print(encode_key(KeyEvent("c", KeyModifiers.CONTROL)))      # b'\x03'
print(encode_key(KeyEvent(KeyCode.UP)))                     # b'\x1b[A'

layout = compute_layout(Rect(0, 0, 120, 40), 2, SplitDirection.VERTICAL)
print([area.width for area in layout.pane_areas])           # [60, 60]
```

Character keys are given to `KeyEvent` as one-character strings; other keys
as `KeyCode` members.

After the prefix key, `PrefixRouter` maps these keys to commands:

| Key            | Command                 |
|----------------|-------------------------|
| Left / Up      | focus previous pane     |
| Right / Down   | focus next pane         |
| N              | new pane                |
| X              | close pane              |
| C              | new workspace           |
| 1–9            | switch to workspace     |
| Q              | quit                    |

Any other key after the prefix gives `InputAction.NOOP`. Prefix mode lapses
once its timeout has passed (`PrefixRouter.expire`).

## What this package does not do

There is no command to run and no screen: the package draws nothing, reads
no keys from a terminal, and starts no processes. It does not open
pseudo-terminals or interpret terminal output. A `Workspace` holds whatever
pane objects it is given, needing only `poll()` and `send_key(key)` from
them; running the programs behind the panes and showing their output is left
to the caller.

## Tests

```
pip install ".[test]"
pytest
```