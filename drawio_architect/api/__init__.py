"""
API module.

FastAPI application, routers and dependency wiring.
"""
