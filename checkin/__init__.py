"""Front-desk check-in dashboard: volunteers, guests and staff clock events."""

__version__ = "1.0.0"
