"""Pytest configuration for test logging."""
import os

from exprtree.logging_config import configure_logging

configure_logging(os.getenv("EXPRTREE_LOG_LEVEL", "WARNING"))
