"""
Service layer abstraction.

Each service wraps the repository store for one domain: it performs a
single store operation, validates status transitions, logs mutations
and converts raw records into response schemas.  Services receive the
store explicitly, so they never depend on a global instance.
"""
