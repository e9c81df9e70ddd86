"""
Pydantic schema definitions for API payloads.

Each domain defines its own models for request and response bodies.
Schemas are separated from the store's plain dict records; wire names
keep the dashboard's camelCase (``isActive``, ``userId``) through
field aliases while Python code uses snake_case.
"""
