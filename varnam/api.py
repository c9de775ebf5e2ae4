# varnam\api.py
"""
Module-level entry points backed by the global container.

These are what `import varnam` exposes; tests and embedders that need a
different engine override `container.native_engine` instead of calling the
use cases directly.
"""

from typing import List

from varnam.core.domain.models import SchemeDetails
from varnam.core.session import VarnamSession
from varnam.shared.container import container


def open_session(scheme_id: str) -> VarnamSession:
    """
    Opens a session for an installed scheme.

    Raises:
        InitializationError: The scheme could not be resolved.
        LibraryNotFoundError: libvarnam could not be loaded.
    """
    return container.open_session().execute(scheme_id)


def list_schemes() -> List[SchemeDetails]:
    """Details of every installed scheme (empty list if none, or if listing failed)."""
    return container.list_schemes().execute()
