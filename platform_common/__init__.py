"""Shared backend utilities: layered configuration, typed errors and small helpers."""

__version__ = "0.1.0"
