"""
Application package initializer.

The API is organised into small layers: ``core`` holds configuration,
logging, the document store adapter and the error taxonomy;
``schemas`` defines the request and response payloads;
``repositories`` wraps the ``clients`` and ``guests`` collections; and
``api/v1`` binds the HTTP routes to the repositories.
"""

from .main import app  # noqa: F401
