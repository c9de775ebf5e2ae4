# tests\__init__.py
"""
Test Suite for the varnam binding.

Organization:
- `core`: Sessions, use cases, domain models and status translation against an in-memory engine.
- `adapters`: ctypes marshalling of LibVarnamEngine against a fake C library.
- `integration`: Live tests against an installed libvarnam (skipped when absent).
"""
