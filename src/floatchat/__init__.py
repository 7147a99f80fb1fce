"""FloatChat: a floating, frameless chat window with simulated replies."""

__version__ = "0.1.0"
