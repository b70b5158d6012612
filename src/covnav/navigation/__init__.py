"""Navigation state machine."""

from covnav.navigation.state import (
    DetailView,
    LineView,
    ListView,
    Mode,
    NavigationState,
    build_line_views,
)

__all__ = [
    "DetailView",
    "LineView",
    "ListView",
    "Mode",
    "NavigationState",
    "build_line_views",
]
