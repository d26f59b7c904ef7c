"""Docker generator package exports."""
from dockergen import logging_utils as _logging_utils  # import registers the session log buffer

__version__ = "0.1.0"

_logging_utils.ensure_configured()

__all__ = ["__version__"]
