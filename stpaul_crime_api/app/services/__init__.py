"""
Service layer.

Each service encapsulates the queries for one resource: it builds the
SQL through ``query_builder``, executes it on the shared
:class:`~stpaul_crime_api.app.core.db.Database` handle and reshapes
rows into response schemas.  Store faults propagate as
``sqlite3.Error``; business‑rule violations raise ``ValueError`` with
the message meant for the client.
"""
