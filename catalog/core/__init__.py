"""Core infrastructure: configuration, metrics, middleware, dependencies."""
