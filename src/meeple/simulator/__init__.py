"""pygame desktop host for MEEPLE CATCHER."""

from meeple.simulator.window import SimulatorWindow, WindowConfig

__all__ = ["SimulatorWindow", "WindowConfig"]
