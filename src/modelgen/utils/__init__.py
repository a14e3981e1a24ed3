"""Utility functions for common operations."""

from .file_writer import create_file, write_files
from .error_logging import log_error

__all__ = ["create_file", "write_files", "log_error"]
