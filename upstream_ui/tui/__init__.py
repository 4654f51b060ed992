"""TUI (Terminal User Interface) module for upstream_ui.

Renders the navigation's current view with rich and questionary.
"""
from .router import Router, build_navigation
from .state import UIState

__all__ = ["Router", "UIState", "build_navigation"]
