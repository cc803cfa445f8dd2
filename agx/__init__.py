"""Configuration, key routing, layout, workspaces and pane state for an AI agent terminal multiplexer."""

__version__ = "0.1.0"

__all__ = [
    "colors",
    "config",
    "detector",
    "input",
    "layout",
    "pane",
    "registry",
    "split",
    "workspace",
]