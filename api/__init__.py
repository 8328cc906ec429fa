"""
API Package.

FastAPI application factory, shared dependencies and routers.
"""
