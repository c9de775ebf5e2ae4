# varnam\core\ports\__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocol that native engine adapters must
implement. The session and the use cases talk to libvarnam only through
this interface, which lets the test-suite substitute an in-memory engine.
"""

from .native_engine import INativeEngine, NativeHandle, RawLearnStatus, RawSchemeDetails

__all__ = [
    "INativeEngine",
    "NativeHandle",
    "RawLearnStatus",
    "RawSchemeDetails",
]
