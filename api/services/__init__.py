"""
High-level use cases for the Talker API.

Routers (FastAPI endpoints) call these services instead of manipulating the
JSON document or the database directly.
"""
