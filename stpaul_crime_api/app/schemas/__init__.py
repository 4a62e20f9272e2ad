"""
Pydantic schema definitions for API payloads.

Each resource (codes, neighborhoods, incidents) defines its own
models.  Response schemas use the public field names; the services
translate from the column names used by the store.
"""
