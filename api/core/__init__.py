"""
Core utilities shared across the loyalty API.

This package hosts:
- configuration helpers (env vars, secrets, database URL)
- cross-cutting concerns: logging setup, the error taxonomy and its HTTP mapping,
  and the session cookie codec.

Routers and services depend on these primitives instead of reading os.environ
or building responses for failures themselves.
"""
