"""personcheck: fail-fast field validation for person records."""

__version__ = "0.1.0"
