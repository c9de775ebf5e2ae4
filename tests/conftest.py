# tests\conftest.py
import itertools
from pathlib import Path

import pytest

from varnam.core.domain.status import VarnamStatus
from varnam.core.ports.native_engine import RawLearnStatus, RawSchemeDetails
from varnam.shared.container import Container


DEFAULT_SCHEMES = {
    "ml": RawSchemeDetails("ml", "ml", "Malayalam", "Varnam Project", "2021-06-01", 1),
    "hi": RawSchemeDetails("hi", "hi", "Hindi", "Varnam Project", "2021-06-02", 0),
    "ta": RawSchemeDetails("ta", "ta", "Tamil", "Varnam Project", "2021-06-03", 1),
}

DEFAULT_SUGGESTIONS = {
    "namaskaaram": ["നമസ്കാരം", "നമസ്കാരമ്", "നമസ്കരം"],
    "varnam": ["വർണം", "വർണ്ണം"],
}

DEFAULT_REVERSE = {
    "നമസ്കാരം": "namaskaaram",
}


class FakeNativeEngine:
    """
    In-memory stand-in for libvarnam implementing the INativeEngine port.

    Like the real engine, every call on a handle overwrites its last-error
    slot (cleared on success), so tests can prove errors are read right away.
    Handle bookkeeping records double releases and use-after-release.
    """

    def __init__(self, schemes=None, suggestions=None, reverse=None):
        self.schemes = dict(DEFAULT_SCHEMES if schemes is None else schemes)
        self.suggestions = dict(DEFAULT_SUGGESTIONS if suggestions is None else suggestions)
        self.reverse = dict(DEFAULT_REVERSE if reverse is None else reverse)
        self.fail_details_for = set()
        self.return_no_handles = False

        self._ids = itertools.count(1000)
        self.live = {}            # handle -> scheme id
        self.last_errors = {}     # handle -> text
        self.corpora = {}         # scheme id -> set of learned words
        self.destroyed = []
        self.double_releases = []
        self.use_after_release = []

    # --- bookkeeping helpers ---

    def _new_handle(self, scheme_id):
        handle = next(self._ids)
        self.live[handle] = scheme_id
        self.last_errors[handle] = ""
        return handle

    def _touch(self, handle):
        if handle not in self.live:
            self.use_after_release.append(handle)
            raise RuntimeError(f"handle {handle} used after release")
        self.last_errors[handle] = ""

    def _fail(self, handle, code, message):
        self.last_errors[handle] = message
        return code

    @property
    def live_handles(self):
        return set(self.live)

    # --- INativeEngine ---

    def init_from_id(self, scheme_id):
        if scheme_id not in self.schemes:
            return VarnamStatus.ERROR, None, f"Failed to find scheme with identifier '{scheme_id}'"
        return VarnamStatus.SUCCESS, self._new_handle(scheme_id), ""

    def get_last_error(self, handle):
        return self.last_errors.get(handle, "")

    def get_suggestions_file(self, handle):
        self._touch(handle)
        return f"/var/lib/varnam/{self.live[handle]}.vst.learnings"

    def get_corpus_details(self, handle):
        self._touch(handle)
        return VarnamStatus.SUCCESS, len(self.corpora.get(self.live[handle], set()))

    def transliterate(self, handle, text):
        self._touch(handle)
        if not text:
            return self._fail(handle, VarnamStatus.ARGS_ERROR, "Input text is empty"), []
        if text.startswith("!"):
            return self._fail(handle, VarnamStatus.ERROR, f"Tokenization failed for '{text}'"), []
        return VarnamStatus.SUCCESS, list(self.suggestions.get(text, [f"<{text}>"]))

    def reverse_transliterate(self, handle, text):
        self._touch(handle)
        if not text:
            return self._fail(handle, VarnamStatus.ARGS_ERROR, "Input text is empty"), None
        return VarnamStatus.SUCCESS, self.reverse.get(text, text)

    def learn(self, handle, text):
        self._touch(handle)
        if not text or not text.strip():
            return self._fail(handle, VarnamStatus.ARGS_ERROR, "Nothing to learn")
        self.corpora.setdefault(self.live[handle], set()).add(text)
        return VarnamStatus.SUCCESS

    def learn_from_file(self, handle, path):
        self._touch(handle)
        file = Path(path)
        if not file.is_file():
            return self._fail(handle, VarnamStatus.STORAGE_ERROR, f"Couldn't open file '{path}'"), None

        total = failed = 0
        corpus = self.corpora.setdefault(self.live[handle], set())
        for line in file.read_text(encoding="utf-8").splitlines():
            word = line.strip()
            if not word:
                continue
            total += 1
            if any(ch.isdigit() for ch in word):
                failed += 1
                continue
            corpus.add(word)
        return VarnamStatus.SUCCESS, RawLearnStatus(total_words=total, failed=failed)

    def get_all_handles(self):
        if self.return_no_handles:
            return None
        return [self._new_handle(scheme_id) for scheme_id in self.schemes]

    def get_scheme_details(self, handle):
        self._touch(handle)
        scheme_id = self.live[handle]
        if scheme_id in self.fail_details_for:
            return self._fail(handle, VarnamStatus.STORAGE_ERROR, f"Failed to read metadata for '{scheme_id}'"), None
        return VarnamStatus.SUCCESS, self.schemes[scheme_id]

    def destroy(self, handle):
        if handle not in self.live:
            self.double_releases.append(handle)
            return
        del self.live[handle]
        self.destroyed.append(handle)


@pytest.fixture(scope="function")
def fake_engine():
    """Returns a fresh in-memory engine with three schemes installed."""
    return FakeNativeEngine()


@pytest.fixture(scope="function")
def container(fake_engine):
    """
    Sets up the Dependency Injection Container for testing.
    The native engine provider is overridden with the in-memory fake.
    """
    container = Container()
    container.native_engine.override(fake_engine)

    yield container

    container.native_engine.reset_override()


@pytest.fixture(scope="function")
def global_container(fake_engine):
    """Same override, applied to the module-level container used by varnam.api and the CLI."""
    from varnam.shared.container import container

    container.native_engine.override(fake_engine)

    yield container

    container.native_engine.reset_override()


@pytest.fixture
def session(container):
    """An open 'ml' session, closed after the test."""
    session = container.open_session().execute("ml")
    yield session
    session.close()


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("നമസ്കാരം\nവർണം\n\nമലയാളം\n", encoding="utf-8")
    return path
