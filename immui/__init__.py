"""Immediate-mode UI toolkit: a movable window of buttons and text, drawn through backend callbacks."""

__version__ = "0.1.0"

__all__ = ["__version__"]