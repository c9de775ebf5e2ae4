# varnam/core/domain/exceptions.py
from typing import Optional


class VarnamError(Exception):
    """Base class for all errors raised by the binding."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Engine Errors (status code + last-error text) ---

class EngineError(VarnamError):
    """
    A non-success status reported by the native engine.

    `code` is the raw engine status and `message` the engine's text captured
    at the failing call. str() keeps the "<code>:<text>" form used by the
    other libvarnam bindings.
    """
    def __init__(self, code: int, message: str):
        self.code = int(code)
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.code}:{self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class InitializationError(EngineError):
    """Raised when a scheme identifier cannot be resolved into a session."""
    def __init__(self, code: int, message: str, scheme_id: Optional[str] = None):
        self.scheme_id = scheme_id
        super().__init__(code, message)


class OperationError(EngineError):
    """
    Raised when an in-session call fails.
    The failure is scoped to that call; the session stays usable.
    """
    def __init__(self, code: int, message: str, operation: Optional[str] = None):
        self.operation = operation
        super().__init__(code, message)


class EnumerationError(EngineError):
    """Raised by strict scheme listing when describing an entry fails."""
    def __init__(self, code: int, message: str, index: Optional[int] = None):
        self.index = index
        super().__init__(code, message)

# --- Misuse Errors ---

class MisuseError(VarnamError):
    """Raised when the API is used in a way that would touch a released handle."""


class SessionClosedError(MisuseError):
    """Raised when an operation is requested on a session that was closed."""
    def __init__(self, scheme_id: str, operation: str):
        self.scheme_id = scheme_id
        self.operation = operation
        super().__init__(f"Cannot call '{operation}': session for scheme '{scheme_id}' is closed.")

# --- Infrastructure Errors ---

class LibraryNotFoundError(VarnamError):
    """Raised when the native libvarnam shared library cannot be loaded."""
    def __init__(self, candidates, details: Optional[str] = None):
        self.candidates = list(candidates)
        msg = f"Could not load libvarnam (tried: {', '.join(self.candidates) or 'nothing'})."
        if details:
            msg += f" Detail: {details}"
        super().__init__(msg)


__all__ = [
    "VarnamError",
    "EngineError",
    "InitializationError",
    "OperationError",
    "EnumerationError",
    "MisuseError",
    "SessionClosedError",
    "LibraryNotFoundError",
]
