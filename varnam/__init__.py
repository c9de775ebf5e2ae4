# varnam\__init__.py
"""
varnam - Python binding for the libvarnam transliteration engine.

The package follows the same Ports & Adapters split as the rest of our
services: the core owns sessions, use cases and the error taxonomy, while
the ctypes adapter is the only code that touches the native library.

Usage:
    import varnam

    with varnam.open_session("ml") as session:
        session.transliterate("namaskaaram")   # ["നമസ്കാരം", ...]

    varnam.list_schemes()                      # [SchemeDetails(...), ...]
"""

__version__ = "1.0.0"

from varnam.api import list_schemes, open_session
from varnam.core.domain.exceptions import (
    EngineError,
    EnumerationError,
    InitializationError,
    LibraryNotFoundError,
    MisuseError,
    OperationError,
    SessionClosedError,
    VarnamError,
)
from varnam.core.domain.models import CorpusDetails, LearnStatus, SchemeDetails
from varnam.core.session import VarnamSession

__all__ = [
    "open_session",
    "list_schemes",
    "VarnamSession",
    "SchemeDetails",
    "CorpusDetails",
    "LearnStatus",
    "VarnamError",
    "EngineError",
    "InitializationError",
    "OperationError",
    "EnumerationError",
    "MisuseError",
    "SessionClosedError",
    "LibraryNotFoundError",
]
