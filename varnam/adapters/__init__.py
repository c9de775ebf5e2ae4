# varnam\adapters\__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the core ports. Only this package touches the
native library.
"""
