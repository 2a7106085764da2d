"""Interactive command-line task list with a fixed-width table view."""

__version__ = "0.1.0"
