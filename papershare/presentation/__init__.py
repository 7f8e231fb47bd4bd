"""Presentation layer: FastAPI routers, middleware and error responses."""
