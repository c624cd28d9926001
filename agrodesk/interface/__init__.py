"""Mini README: Browser interface for Agrodesk.

Exports the FastAPI application factory serving the tabbed farm page and
the tab shell that tracks which panel is active.
"""

from .tabs import DEFAULT_TABS, Tab, TabShell
from .web_app import create_application

__all__ = ["DEFAULT_TABS", "Tab", "TabShell", "create_application"]
