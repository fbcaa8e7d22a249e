"""Kernel utilities shared across platform services.

Rules:
- Kernel code must not import from the configuration or validator layers.
- Kernel utilities should stay small and stable; avoid business logic here.
"""
