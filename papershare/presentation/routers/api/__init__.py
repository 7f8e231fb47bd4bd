"""REST API routers and request dependencies."""
