# varnam\core\domain\__init__.py
"""
Domain Values and Errors.

Immutable records returned to callers (scheme details, corpus snapshots,
learn outcomes), the engine status catalogue and the exception hierarchy.
None of these carry a live native resource, so they are safe to retain.
"""
