# helpgrid/ui/theming/theme_definitions.py
# Theme palettes mapping help style roles to Rich style definitions

from __future__ import annotations


# theme definitions keyed by name; each maps a help.* role to a Rich style string
THEMES: dict[str, dict[str, str]] = {
    "classic": {
        "help.title.usage": "bold reverse green",
        "help.title.arguments": "bold reverse cyan",
        "help.title.options": "bold reverse yellow",
        "help.title.examples": "bold reverse magenta",
        "help.prompt": "dim",
        "help.command": "green",
        "help.command.name": "bold green",
        "help.option": "yellow",
        "help.argument": "cyan",
        "help.required": "red",
        "help.default.label": "dim",
        "help.default.value": "yellow",
        "help.group": "dim yellow",
        "help.description": "none",
    },
    "ocean": {
        "help.title.usage": "bold reverse #4a90e2",
        "help.title.arguments": "bold reverse #0891b2",
        "help.title.options": "bold reverse #2563eb",
        "help.title.examples": "bold reverse #1e40af",
        "help.prompt": "dim",
        "help.command": "#4a90e2",
        "help.command.name": "bold #4a90e2",
        "help.option": "#2563eb",
        "help.argument": "#0891b2",
        "help.required": "#ff4444",
        "help.default.label": "dim",
        "help.default.value": "#357abd",
        "help.group": "dim #357abd",
        "help.description": "none",
    },
    "mono": {
        "help.title.usage": "bold reverse",
        "help.title.arguments": "bold reverse",
        "help.title.options": "bold reverse",
        "help.title.examples": "bold reverse",
        "help.prompt": "dim",
        "help.command": "bold",
        "help.command.name": "bold",
        "help.option": "bold",
        "help.argument": "underline",
        "help.required": "bold",
        "help.default.label": "dim",
        "help.default.value": "none",
        "help.group": "dim",
        "help.description": "none",
    },
}

DEFAULT_THEME = "classic"
