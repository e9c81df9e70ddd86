"""HTTP layer: FastAPI routers grouped by API version."""
