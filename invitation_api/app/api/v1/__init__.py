"""
Version 1 of the API.

Bundles the client, guest and health endpoints.  The routes are
mounted under ``settings.api_prefix``, which is empty by default.
"""
