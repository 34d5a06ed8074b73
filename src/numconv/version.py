"""Single source of truth for the numconv version string."""

__version__: str = "1.0.0"
