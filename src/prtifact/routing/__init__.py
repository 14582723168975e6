"""Fan-out of generated reports to their destinations."""

from .router import Route, Router

__all__ = ["Route", "Router"]
