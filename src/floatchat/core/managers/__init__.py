# src/floatchat/core/managers/__init__.py
from .window_manager import WindowManager, centered_geometry

__all__ = ["WindowManager", "centered_geometry"]
