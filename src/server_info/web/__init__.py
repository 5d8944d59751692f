"""Web package - FastAPI host for the widget and settings page."""
