# varnam\core\session.py
import os
import weakref
from typing import List, Union

from pydantic import ValidationError

from varnam.core.domain.exceptions import OperationError, SessionClosedError
from varnam.core.domain.models import CorpusDetails, LearnStatus
from varnam.core.domain.status import VarnamStatus, check_native_text, is_success, translate_status
from varnam.core.ports.native_engine import INativeEngine, NativeHandle
from varnam.shared.logging_config import get_logger

logger = get_logger(__name__)


def _release(engine: INativeEngine, handle: NativeHandle, scheme_id: str) -> None:
    # Runs at most once per handle: weakref.finalize disarms itself after the first call.
    engine.destroy(handle)
    logger.info("session_closed", scheme=scheme_id)


class VarnamSession:
    """
    An open libvarnam handle for one scheme.

    The session is the only owner of its handle. The handle is released by
    close(), by leaving a `with` block, or, if the caller forgets both, when
    the session is garbage collected. Release happens exactly once; calling
    close() again is a no-op. Any other operation on a closed session raises
    SessionClosedError.

    Thread safety: none. libvarnam mutates per-handle state (including the
    last-error slot) in place, so callers must serialise access to a session
    themselves or open one session per thread.
    """

    def __init__(self, engine: INativeEngine, handle: NativeHandle, scheme_id: str):
        self._engine = engine
        self._handle = handle
        self.scheme_id = scheme_id
        self._finalizer = weakref.finalize(self, _release, engine, handle, scheme_id)

    # --- Lifecycle ---

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def close(self) -> None:
        """Releases the native handle. Safe to call more than once."""
        if not self._finalizer.alive:
            logger.debug("session_close_ignored", scheme=self.scheme_id, reason="already_closed")
            return
        self._handle = None
        self._finalizer()

    def __enter__(self) -> "VarnamSession":
        self._live_handle("__enter__")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __copy__(self):
        raise TypeError("VarnamSession owns a native handle and cannot be copied.")

    def __deepcopy__(self, memo):
        raise TypeError("VarnamSession owns a native handle and cannot be copied.")

    def __reduce__(self):
        raise TypeError("VarnamSession owns a native handle and cannot be pickled.")

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<VarnamSession scheme={self.scheme_id!r} {state}>"

    # --- Queries ---

    def get_suggestions_file_path(self) -> str:
        handle = self._live_handle("get_suggestions_file_path")
        return self._engine.get_suggestions_file(handle)

    def get_corpus_details(self) -> CorpusDetails:
        handle = self._live_handle("get_corpus_details")
        rc, words_count = self._engine.get_corpus_details(handle)
        if not is_success(rc):
            raise self._failure(handle, rc, "get_corpus_details")
        try:
            return CorpusDetails(words_count=words_count)
        except ValidationError as e:
            raise self._invalid_result("get_corpus_details", e) from e

    # --- Transliteration ---

    def transliterate(self, text: str) -> List[str]:
        """
        Converts source-script text into ranked target-script suggestions.

        Returns:
            A new list; index 0 is the engine's primary suggestion.

        Raises:
            OperationError: The input is not passable to C (ARGS_ERROR), the
                engine rejected it or failed, or it succeeded with no suggestions.
            SessionClosedError: The session was closed.
        """
        handle = self._live_handle("transliterate")
        check_native_text(text, operation="transliterate")
        rc, suggestions = self._engine.transliterate(handle, text)
        if not is_success(rc):
            raise self._failure(handle, rc, "transliterate")
        if not suggestions:
            raise self._invalid_result("transliterate", "engine returned no suggestions")
        return list(suggestions)

    def reverse_transliterate(self, text: str) -> str:
        """
        Best-effort conversion of target-script text back to the source script.
        Transliteration is many-to-one, so this is not an inverse of transliterate().
        """
        handle = self._live_handle("reverse_transliterate")
        check_native_text(text, operation="reverse_transliterate")
        rc, output = self._engine.reverse_transliterate(handle, text)
        if not is_success(rc):
            raise self._failure(handle, rc, "reverse_transliterate")
        return output

    # --- Learning ---

    def learn(self, text: str) -> None:
        handle = self._live_handle("learn")
        check_native_text(text, operation="learn")
        rc = self._engine.learn(handle, text)
        if not is_success(rc):
            raise self._failure(handle, rc, "learn")

    def learn_from_file(self, file_path: Union[str, "os.PathLike[str]"]) -> LearnStatus:
        handle = self._live_handle("learn_from_file")
        path = check_native_text(os.fspath(file_path), operation="learn_from_file")
        rc, status = self._engine.learn_from_file(handle, path)
        if not is_success(rc):
            raise self._failure(handle, rc, "learn_from_file")

        try:
            result = LearnStatus(total_words=status.total_words, failed_words=status.failed)
        except ValidationError as e:
            raise self._invalid_result("learn_from_file", e) from e
        logger.info(
            "learn_from_file_finished",
            scheme=self.scheme_id,
            total_words=result.total_words,
            failed_words=result.failed_words,
        )
        return result

    # --- Internals ---

    def _live_handle(self, operation: str) -> NativeHandle:
        if not self._finalizer.alive:
            raise SessionClosedError(self.scheme_id, operation)
        return self._handle

    def _failure(self, handle: NativeHandle, rc: int, operation: str):
        # Read the last-error slot now, before any other call can overwrite it.
        error = translate_status(self._engine, handle, rc, operation=operation)
        logger.warning(
            "session_operation_failed",
            scheme=self.scheme_id,
            operation=operation,
            code=error.code,
            error=error.message,
        )
        return error

    def _invalid_result(self, operation: str, reason) -> OperationError:
        # The call succeeded but its output breaks the result model's invariants.
        error = OperationError(
            VarnamStatus.ERROR,
            f"Engine returned an invalid result: {reason}",
            operation=operation,
        )
        logger.warning(
            "session_invalid_result",
            scheme=self.scheme_id,
            operation=operation,
            error=error.message,
        )
        return error
