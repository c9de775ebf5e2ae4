# varnam/core/use_cases/list_schemes.py
from typing import List, Optional

from varnam.core.domain.exceptions import EngineError, EnumerationError
from varnam.core.domain.models import SchemeDetails
from varnam.core.domain.status import is_success, translate_status
from varnam.core.ports.native_engine import INativeEngine, NativeHandle
from varnam.shared.logging_config import get_logger

logger = get_logger(__name__)


class ListSchemes:
    """
    Use Case: Describes every scheme installed for the engine.

    The engine hands back one transient handle per scheme. Each handle is
    described and then destroyed before the next one is touched, so no
    handle outlives this call.

    Failure policy:
    - Default: if any entry cannot be described, the remaining handles are
      released and an empty list is returned (a partial list is never
      returned). Callers cannot tell this apart from "nothing installed",
      which is why the abort is logged as a warning.
    - strict=True: the same abort raises EnumerationError instead.
    """

    def __init__(self, engine: INativeEngine, strict: bool = False):
        self.engine = engine
        self.strict = strict

    def execute(self) -> List[SchemeDetails]:
        handles = self.engine.get_all_handles()
        if not handles:
            logger.debug("scheme_listing_empty")
            return []

        handles = list(handles)
        schemes: List[SchemeDetails] = []

        for index, handle in enumerate(handles):
            failure: Optional[EngineError] = None
            try:
                rc, raw = self.engine.get_scheme_details(handle)
                if not is_success(rc):
                    failure = translate_status(
                        self.engine, handle, rc, error_cls=EnumerationError, index=index
                    )
                else:
                    schemes.append(
                        SchemeDetails(
                            lang_code=raw.lang_code,
                            identifier=raw.identifier,
                            display_name=raw.display_name,
                            author=raw.author,
                            compiled_date=raw.compiled_date,
                            is_stable=raw.is_stable > 0,
                        )
                    )
            except BaseException:
                self._release_all(handles[index + 1:])
                raise
            finally:
                self.engine.destroy(handle)

            if failure is not None:
                self._release_all(handles[index + 1:])
                logger.warning(
                    "scheme_listing_aborted",
                    index=index,
                    total=len(handles),
                    code=failure.code,
                    error=failure.message,
                    strict=self.strict,
                )
                if self.strict:
                    raise failure
                return []

        logger.debug("scheme_listing_finished", count=len(schemes))
        return schemes

    def _release_all(self, handles: List[NativeHandle]) -> None:
        for handle in handles:
            self.engine.destroy(handle)
