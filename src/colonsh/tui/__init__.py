"""Public API for the colonsh TUI package."""

from .picker import Picker, TuiPicker, confirm, pick_many, pick_one

__all__ = ["Picker", "TuiPicker", "confirm", "pick_many", "pick_one"]
