"""
Boundary module.

Adapters for external services the application depends on.
"""
