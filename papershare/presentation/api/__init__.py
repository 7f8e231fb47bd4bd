"""API-level (cross-router) presentation components."""
