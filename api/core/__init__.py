"""
Core utilities shared across the Talker API.

This package hosts configuration (env vars, paths), logging setup and the
token helpers used by the login gate. Routers and services depend on these
primitives instead of reading the environment themselves.
"""
