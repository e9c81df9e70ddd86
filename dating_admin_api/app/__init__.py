"""
Application package initializer.

The back-office API is split by concern: ``core`` holds configuration,
logging, security and the in-memory repository store; ``services``
wraps store operations per domain; ``schemas`` defines the JSON
payloads; ``api/v1`` exposes one router per resource.  Routers are
mounted under ``/api`` and, for versioned clients, ``/api/v1``.
"""

from .main import app  # noqa: F401
