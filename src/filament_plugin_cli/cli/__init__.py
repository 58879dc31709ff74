"""CLI helpers exposed for other modules."""

from .ui import StepTracker, press_enter, select_with_arrows

__all__ = ["StepTracker", "press_enter", "select_with_arrows"]
