"""Layered configuration from files, environment variables and defaults, with validation."""

__version__ = "0.1.0"
__all__ = ["config", "loader", "validator"]