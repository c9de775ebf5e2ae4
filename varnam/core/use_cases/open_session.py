# varnam/core/use_cases/open_session.py

from varnam.core.domain.exceptions import InitializationError
from varnam.core.domain.status import VarnamStatus, check_native_text, is_success, translate_status
from varnam.core.ports.native_engine import INativeEngine
from varnam.core.session import VarnamSession
from varnam.shared.logging_config import get_logger

logger = get_logger(__name__)


class OpenSession:
    """
    Use Case: Acquires a native handle for a scheme and wraps it in a session.

    The caller owns the returned session and is responsible for closing it
    (preferably with a `with` block).
    """

    def __init__(self, engine: INativeEngine):
        self.engine = engine

    def execute(self, scheme_id: str) -> VarnamSession:
        """
        Args:
            scheme_id: Identifier of an installed scheme (e.g., 'ml').

        Returns:
            VarnamSession: A live session owning the new handle.

        Raises:
            InitializationError: The identifier is empty or not passable to C,
                or the engine could not resolve it.
        """
        check_native_text(scheme_id, error_cls=InitializationError, scheme_id=scheme_id)
        if not scheme_id.strip():
            raise InitializationError(
                VarnamStatus.ARGS_ERROR,
                "Scheme identifier must be a non-empty string.",
                scheme_id=scheme_id,
            )

        rc, handle, message = self.engine.init_from_id(scheme_id)
        if not is_success(rc):
            # No handle exists yet: the text comes from the init out-parameter.
            error = translate_status(
                self.engine,
                None,
                rc,
                init_message=message,
                error_cls=InitializationError,
                scheme_id=scheme_id,
            )
            logger.warning("session_open_failed", scheme=scheme_id, code=error.code, error=error.message)
            raise error

        if handle is None:
            # A SUCCESS without a handle would yield a session that passes NULL on every call.
            logger.warning("session_open_failed", scheme=scheme_id, code=int(VarnamStatus.ERROR), error="no handle")
            raise InitializationError(
                VarnamStatus.ERROR,
                "Engine reported success but returned no handle.",
                scheme_id=scheme_id,
            )

        logger.info("session_opened", scheme=scheme_id)
        return VarnamSession(self.engine, handle, scheme_id)
