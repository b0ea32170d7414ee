"""
Core utilities and configuration for Acme Dashboard.

This package provides core functionality including logging configuration,
database setup, the dashboard query functions and shared helpers.
"""

from acme_dashboard.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
