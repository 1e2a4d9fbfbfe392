"""ANSI color codes (256-color palette) used by the component logger."""

RESET = "\033[0m"

# Levels
GREEN = "\033[38;5;82m"  # installed / enabled
RED = "\033[38;5;196m"  # errors
YELLOW = "\033[38;5;226m"  # warnings
LIGHT_BLUE = "\033[38;5;153m"  # debug and context payloads
CYAN = "\033[38;5;51m"  # info

# Components
ORANGE = "\033[38;5;208m"  # edition
MAGENTA = "\033[38;5;201m"  # registry
VIOLET = "\033[38;5;141m"  # flags

COMPONENT_COLORS = {
    "edition": ORANGE,
    "registry": MAGENTA,
    "flags": VIOLET,
    "capability": GREEN,
}

__all__ = [
    "RESET",
    "GREEN",
    "RED",
    "YELLOW",
    "LIGHT_BLUE",
    "CYAN",
    "ORANGE",
    "MAGENTA",
    "VIOLET",
    "COMPONENT_COLORS",
]
