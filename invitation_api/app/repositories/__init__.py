"""
Repository layer.

Each repository wraps one MongoDB collection and is constructed with
the :class:`~invitation_api.app.core.db.Database` handle owned by the
application.  Repositories raise the exceptions from ``core.exceptions``
and return schema instances; they know nothing about HTTP.
"""
