"""
FastAPI dependencies shared by the routers.

The store is built by ``create_app`` and kept on ``app.state``; routes
receive it through ``get_store`` instead of importing a module-level
instance, so each application (and each test) owns its own data.
"""

from fastapi import Request

from .core.store import MemStore


def get_store(request: Request) -> MemStore:
    """Return the store attached to the running application."""
    return request.app.state.store
