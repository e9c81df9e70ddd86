"""
Version 1 of the API.

This subpackage bundles all endpoints consumed by the admin dashboard.
Breaking changes should go into a new version subpackage (e.g. ``v2``).
"""
