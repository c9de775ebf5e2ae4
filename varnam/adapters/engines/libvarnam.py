# varnam\adapters\engines\libvarnam.py
import ctypes
import ctypes.util
from ctypes import POINTER, byref, c_char_p, c_int, c_void_p
from typing import Iterable, List, Optional, Tuple

from varnam.core.domain.exceptions import LibraryNotFoundError
from varnam.core.domain.status import VarnamStatus
from varnam.core.ports.native_engine import INativeEngine, NativeHandle, RawLearnStatus, RawSchemeDetails
from varnam.shared.logging_config import get_logger

logger = get_logger(__name__)

ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# C structures (varnam.h)
# -----------------------------------------------------------------------------

class VWord(ctypes.Structure):
    _fields_ = [
        ("text", c_char_p),
        ("confidence", c_int),
    ]


class VSchemeDetails(ctypes.Structure):
    _fields_ = [
        ("langCode", c_char_p),
        ("identifier", c_char_p),
        ("displayName", c_char_p),
        ("author", c_char_p),
        ("compiledDate", c_char_p),
        ("isStable", c_int),
    ]


class VLearnStatus(ctypes.Structure):
    _fields_ = [
        ("total_words", c_int),
        ("failed", c_int),
    ]


class VCorpusDetails(ctypes.Structure):
    _fields_ = [
        ("wordsCount", c_int),
    ]


# name -> (restype, argtypes)
_SIGNATURES = {
    "varnam_init_from_id": (c_int, [c_char_p, POINTER(c_void_p), POINTER(c_char_p)]),
    "varnam_get_last_error": (c_char_p, [c_void_p]),
    "varnam_get_suggestions_file": (c_char_p, [c_void_p]),
    "varnam_get_corpus_details": (c_int, [c_void_p, POINTER(POINTER(VCorpusDetails))]),
    "varnam_transliterate": (c_int, [c_void_p, c_char_p, POINTER(c_void_p)]),
    "varnam_reverse_transliterate": (c_int, [c_void_p, c_char_p, POINTER(c_char_p)]),
    "varnam_learn": (c_int, [c_void_p, c_char_p]),
    "varnam_learn_from_file": (c_int, [c_void_p, c_char_p, POINTER(VLearnStatus), c_void_p, c_void_p]),
    "varnam_get_all_handles": (c_void_p, []),
    "varnam_get_scheme_details": (c_int, [c_void_p, POINTER(POINTER(VSchemeDetails))]),
    "varnam_destroy": (c_int, [c_void_p]),
    "varray_length": (c_int, [c_void_p]),
    "varray_get": (c_void_p, [c_void_p, c_int]),
}


def load_library(path: Optional[str] = None, names: Iterable[str] = ("varnam", "govarnam")):
    """
    Loads the libvarnam shared library.

    An explicit path wins; otherwise each name is resolved through
    ctypes.util.find_library in order.
    """
    if path:
        candidates = [path]
    else:
        candidates = [found for found in (ctypes.util.find_library(n) for n in names) if found]

    last_error = None
    for candidate in candidates:
        try:
            lib = ctypes.CDLL(candidate)
        except OSError as e:
            last_error = str(e)
            logger.debug("varnam_library_candidate_failed", candidate=candidate, error=last_error)
            continue
        logger.info("varnam_library_loaded", path=candidate)
        return lib

    raise LibraryNotFoundError(candidates or list(names), last_error)


def _encode(text: str) -> bytes:
    return text.encode(ENCODING)


def _decode(raw: Optional[bytes]) -> str:
    if raw is None:
        return ""
    return raw.decode(ENCODING, errors="replace")


class LibVarnamEngine(INativeEngine):
    """
    Adapter implementation for INativeEngine over the libvarnam C API via ctypes.

    Output strings and structs are owned by libvarnam and are only valid
    until the next call on the same handle, so everything is copied into
    Python objects before returning.
    """

    def __init__(self, library_path: Optional[str] = None, library_names: Iterable[str] = ("varnam", "govarnam"), lib=None):
        self._lib = lib if lib is not None else load_library(library_path, library_names)
        self._bind()

    def _bind(self) -> None:
        for name, (restype, argtypes) in _SIGNATURES.items():
            func = getattr(self._lib, name)
            func.restype = restype
            func.argtypes = argtypes

    # --- Session lifecycle ---

    def init_from_id(self, scheme_id: str) -> Tuple[int, Optional[NativeHandle], str]:
        handle = c_void_p()
        msg = c_char_p()
        rc = self._lib.varnam_init_from_id(_encode(scheme_id), byref(handle), byref(msg))
        return rc, handle.value, _decode(msg.value)

    def destroy(self, handle: NativeHandle) -> None:
        self._lib.varnam_destroy(handle)

    def get_last_error(self, handle: NativeHandle) -> str:
        return _decode(self._lib.varnam_get_last_error(handle))

    # --- Queries ---

    def get_suggestions_file(self, handle: NativeHandle) -> str:
        return _decode(self._lib.varnam_get_suggestions_file(handle))

    def get_corpus_details(self, handle: NativeHandle) -> Tuple[int, Optional[int]]:
        details = POINTER(VCorpusDetails)()
        rc = self._lib.varnam_get_corpus_details(handle, byref(details))
        if rc != 0:
            return rc, None
        return rc, int(details.contents.wordsCount) if details else 0

    # --- Transliteration ---

    def transliterate(self, handle: NativeHandle, text: str) -> Tuple[int, List[str]]:
        varray = c_void_p()
        rc = self._lib.varnam_transliterate(handle, _encode(text), byref(varray))
        if rc != 0:
            return rc, []
        return rc, self._words(varray.value)

    def reverse_transliterate(self, handle: NativeHandle, text: str) -> Tuple[int, Optional[str]]:
        output = c_char_p()
        rc = self._lib.varnam_reverse_transliterate(handle, _encode(text), byref(output))
        if rc != 0:
            return rc, None
        return rc, _decode(output.value)

    # --- Learning ---

    def learn(self, handle: NativeHandle, text: str) -> int:
        return self._lib.varnam_learn(handle, _encode(text))

    def learn_from_file(self, handle: NativeHandle, path: str) -> Tuple[int, Optional[RawLearnStatus]]:
        status = VLearnStatus()
        # Per-line progress callbacks are not exposed.
        rc = self._lib.varnam_learn_from_file(handle, _encode(path), byref(status), None, None)
        if rc != 0:
            return rc, None
        return rc, RawLearnStatus(total_words=status.total_words, failed=status.failed)

    # --- Scheme enumeration ---

    def get_all_handles(self) -> Optional[List[NativeHandle]]:
        varray = self._lib.varnam_get_all_handles()
        if not varray:
            return None
        length = self._lib.varray_length(varray)
        return [self._lib.varray_get(varray, i) for i in range(length)]

    def get_scheme_details(self, handle: NativeHandle) -> Tuple[int, Optional[RawSchemeDetails]]:
        details = POINTER(VSchemeDetails)()
        rc = self._lib.varnam_get_scheme_details(handle, byref(details))
        if rc != 0:
            return rc, None
        if not details:
            return VarnamStatus.ERROR, None
        d = details.contents
        return rc, RawSchemeDetails(
            lang_code=_decode(d.langCode),
            identifier=_decode(d.identifier),
            display_name=_decode(d.displayName),
            author=_decode(d.author),
            compiled_date=_decode(d.compiledDate),
            is_stable=int(d.isStable),
        )

    def _words(self, varray: Optional[int]) -> List[str]:
        if not varray:
            return []
        words = []
        for i in range(self._lib.varray_length(varray)):
            word = ctypes.cast(self._lib.varray_get(varray, i), POINTER(VWord)).contents
            words.append(_decode(word.text))
        return words
