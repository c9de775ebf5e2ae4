# varnam\core\ports\native_engine.py
from typing import Any, List, NamedTuple, Optional, Protocol, Tuple

# Opaque, pointer-sized reference into the engine.
NativeHandle = Any


class RawSchemeDetails(NamedTuple):
    lang_code: str
    identifier: str
    display_name: str
    author: str
    compiled_date: str
    is_stable: int


class RawLearnStatus(NamedTuple):
    total_words: int
    failed: int


class INativeEngine(Protocol):
    """
    Port for the native transliteration engine.

    Methods mirror the libvarnam C API one-to-one. They return raw status
    codes alongside any output and never raise for engine failures; turning
    a status into an exception is the caller's job (see translate_status).

    Implementations:
    - LibVarnamEngine (ctypes over the libvarnam shared library)
    - FakeNativeEngine (tests)
    """

    def init_from_id(self, scheme_id: str) -> Tuple[int, Optional[NativeHandle], str]:
        """
        Resolves a scheme identifier into a new handle.

        Returns:
            (status, handle, message). `handle` is only meaningful on success;
            `message` is the init out-parameter text on failure.
        """
        ...

    def get_last_error(self, handle: NativeHandle) -> str:
        """Current content of the handle's last-error slot."""
        ...

    def get_suggestions_file(self, handle: NativeHandle) -> str:
        """Path of the suggestions/corpus store behind the handle."""
        ...

    def get_corpus_details(self, handle: NativeHandle) -> Tuple[int, Optional[int]]:
        """Returns (status, words_count)."""
        ...

    def transliterate(self, handle: NativeHandle, text: str) -> Tuple[int, List[str]]:
        """Returns (status, suggestions) with the engine's ranking preserved."""
        ...

    def reverse_transliterate(self, handle: NativeHandle, text: str) -> Tuple[int, Optional[str]]:
        ...

    def learn(self, handle: NativeHandle, text: str) -> int:
        ...

    def learn_from_file(self, handle: NativeHandle, path: str) -> Tuple[int, Optional[RawLearnStatus]]:
        ...

    def get_all_handles(self) -> Optional[List[NativeHandle]]:
        """
        One transient handle per installed scheme, or None.
        Every returned handle must be passed to destroy() exactly once.
        """
        ...

    def get_scheme_details(self, handle: NativeHandle) -> Tuple[int, Optional[RawSchemeDetails]]:
        ...

    def destroy(self, handle: NativeHandle) -> None:
        """Releases a handle. Must be called at most once per handle."""
        ...
