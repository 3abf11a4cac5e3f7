"""
Application layer.

Services coordinating API requests with core business logic.
"""
