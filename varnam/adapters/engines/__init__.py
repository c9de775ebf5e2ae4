# varnam\adapters\engines\__init__.py
"""
Native Engine Adapters.

LibVarnamEngine implements the `INativeEngine` port on top of the libvarnam
shared library using ctypes.
"""

from .libvarnam import LibVarnamEngine, load_library

__all__ = [
    "LibVarnamEngine",
    "load_library",
]
