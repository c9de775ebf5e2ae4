# varnam\core\domain\status.py
"""
Engine status codes and their translation into exceptions.

libvarnam reports failures out of band: the call returns a status code and
the human-readable text sits in a per-handle "last error" slot that the next
call on the same handle overwrites. translate_status() must therefore run
immediately after the failing call, before anything else touches the handle.
"""

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Optional, Type

from varnam.core.domain.exceptions import EngineError, OperationError

if TYPE_CHECKING:
    from varnam.core.ports.native_engine import INativeEngine


class VarnamStatus(IntEnum):
    """Return codes of the libvarnam C API (varnam.h)."""
    SUCCESS = 0
    MISUSE = 1
    MEMORY_ERROR = 2
    ERROR = 3
    PARTIAL_RENDERING = 4
    STORAGE_ERROR = 5
    INVALID_CONFIG = 6
    ARGS_ERROR = 7

    @classmethod
    def describe(cls, code: int) -> str:
        """Name of a known status code, or 'UNKNOWN_<code>' for anything else."""
        try:
            return cls(code).name
        except ValueError:
            return f"UNKNOWN_{code}"


def is_success(code: int) -> bool:
    return code == VarnamStatus.SUCCESS


def translate_status(
    engine: "INativeEngine",
    handle: Any,
    code: int,
    init_message: Optional[str] = None,
    error_cls: Type[EngineError] = OperationError,
    **context: Any,
) -> EngineError:
    """
    Builds the structured error for a non-success status.

    Args:
        engine: The native engine that produced the status.
        handle: The handle the failing call ran against, or None when there
            is no handle yet (initialization).
        code: The raw status code.
        init_message: Text from the init call's out-parameter. Only used
            when `handle` is None.
        error_cls: The EngineError subclass to build.
        **context: Extra keyword arguments for `error_cls`
            (operation, scheme_id, index).

    Returns:
        An EngineError instance; the caller raises it.
    """
    if handle is None:
        text = init_message or ""
    else:
        text = engine.get_last_error(handle) or ""

    if not text:
        # Engine gave no text; keep the message non-empty.
        text = VarnamStatus.describe(code)

    return error_cls(int(code), text, **context)


def check_native_text(
    value: Any,
    error_cls: Type[EngineError] = OperationError,
    **context: Any,
) -> str:
    """
    Validates a string before it crosses into C as a NUL-terminated UTF-8 buffer.

    Rejected values would otherwise be silently truncated (embedded NUL) or
    fail while encoding (lone surrogates), so they are reported the way the
    engine reports bad arguments: ARGS_ERROR, before any native call.

    Returns:
        The value, unchanged.

    Raises:
        error_cls: With code ARGS_ERROR.
    """
    if not isinstance(value, str):
        reason = f"Expected str, got {type(value).__name__}."
    elif "\x00" in value:
        reason = "Text must not contain NUL characters."
    else:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            reason = f"Text is not encodable as UTF-8: {e.reason} at position {e.start}."
        else:
            return value
    raise error_cls(int(VarnamStatus.ARGS_ERROR), reason, **context)
