# varnam\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

- OpenSession: resolves a scheme identifier into a VarnamSession that owns
  a fresh native handle.
- ListSchemes: enumerates installed schemes into plain SchemeDetails values,
  releasing every transient native handle on the way.
"""

from .list_schemes import ListSchemes
from .open_session import OpenSession

__all__ = [
    "OpenSession",
    "ListSchemes",
]
