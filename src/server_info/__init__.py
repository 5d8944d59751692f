"""server-info: hosting environment diagnostics for an admin dashboard."""

__version__ = "0.0.1"
