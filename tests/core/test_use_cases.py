# tests\core\test_use_cases.py
from unittest.mock import MagicMock

import pytest

from varnam.core.domain.exceptions import EnumerationError, InitializationError
from varnam.core.domain.models import SchemeDetails
from varnam.core.domain.status import VarnamStatus
from varnam.core.session import VarnamSession
from varnam.core.use_cases import ListSchemes, OpenSession
from varnam.shared.config import Settings


class TestOpenSession:

    def test_execute_success(self, container, fake_engine):
        """
        Scenario: A known scheme identifier is opened.
        Expected: A live session owning exactly one new handle.
        """
        use_case = container.open_session()

        session = use_case.execute("ml")

        assert isinstance(session, VarnamSession)
        assert not session.closed
        assert session.scheme_id == "ml"
        assert session.get_suggestions_file_path()
        assert len(fake_engine.live_handles) == 1
        session.close()

    def test_execute_unknown_scheme(self, container, fake_engine):
        """
        Scenario: The engine cannot resolve the identifier.
        Expected: InitializationError with the init out-parameter text; no handle leaks.
        """
        use_case = container.open_session()

        with pytest.raises(InitializationError) as excinfo:
            use_case.execute("klingon")

        assert excinfo.value.code == VarnamStatus.ERROR
        assert excinfo.value.scheme_id == "klingon"
        assert "klingon" in excinfo.value.message
        assert fake_engine.live_handles == set()

    @pytest.mark.parametrize("scheme_id", ["", "   "])
    def test_execute_empty_identifier(self, scheme_id):
        """
        Scenario: An empty identifier is passed.
        Expected: Rejected before the engine is called.
        """
        engine = MagicMock()
        use_case = OpenSession(engine)

        with pytest.raises(InitializationError) as excinfo:
            use_case.execute(scheme_id)

        assert excinfo.value.code == VarnamStatus.ARGS_ERROR
        assert excinfo.value.message
        engine.init_from_id.assert_not_called()

    def test_init_failure_without_text_still_has_message(self):
        engine = MagicMock()
        engine.init_from_id.return_value = (VarnamStatus.INVALID_CONFIG, None, "")

        with pytest.raises(InitializationError) as excinfo:
            OpenSession(engine).execute("ml")

        assert str(excinfo.value) == "6:INVALID_CONFIG"
        engine.get_last_error.assert_not_called()

    def test_success_without_handle_is_rejected(self):
        """
        Scenario: The engine reports SUCCESS but the handle out-parameter stays NULL.
        Expected: InitializationError; no session wrapping a null handle is returned.
        """
        engine = MagicMock()
        engine.init_from_id.return_value = (VarnamStatus.SUCCESS, None, "")

        with pytest.raises(InitializationError) as excinfo:
            OpenSession(engine).execute("ml")

        assert excinfo.value.code == VarnamStatus.ERROR
        assert excinfo.value.scheme_id == "ml"
        engine.destroy.assert_not_called()

    @pytest.mark.parametrize("scheme_id", ["m\x00l", "\ud800", b"ml", None])
    def test_identifier_not_passable_to_c(self, scheme_id):
        engine = MagicMock()

        with pytest.raises(InitializationError) as excinfo:
            OpenSession(engine).execute(scheme_id)

        assert excinfo.value.code == VarnamStatus.ARGS_ERROR
        engine.init_from_id.assert_not_called()


class TestListSchemes:

    def test_execute_success(self, container, fake_engine):
        """
        Scenario: Three schemes are installed.
        Expected: Descriptors in engine order; every transient handle released.
        """
        schemes = container.list_schemes().execute()

        assert [s.identifier for s in schemes] == ["ml", "hi", "ta"]
        assert all(isinstance(s, SchemeDetails) for s in schemes)
        assert schemes[0].display_name == "Malayalam"
        assert schemes[0].is_stable is True
        assert schemes[1].is_stable is False
        assert fake_engine.live_handles == set()
        assert len(fake_engine.destroyed) == 3
        assert fake_engine.double_releases == []

    def test_no_schemes_installed(self, fake_engine):
        fake_engine.schemes = {}
        assert ListSchemes(fake_engine).execute() == []

    def test_engine_returns_no_array(self, fake_engine):
        fake_engine.return_no_handles = True
        assert ListSchemes(fake_engine).execute() == []

    def test_failure_returns_empty_and_releases_everything(self, fake_engine):
        """
        Scenario: The second entry cannot be described.
        Expected: Empty list (never partial), and all three handles destroyed once.
        """
        fake_engine.fail_details_for = {"hi"}

        schemes = ListSchemes(fake_engine).execute()

        assert schemes == []
        assert fake_engine.live_handles == set()
        assert len(fake_engine.destroyed) == 3
        assert fake_engine.double_releases == []

    def test_strict_mode_raises(self, fake_engine):
        fake_engine.fail_details_for = {"ta"}

        with pytest.raises(EnumerationError) as excinfo:
            ListSchemes(fake_engine, strict=True).execute()

        assert excinfo.value.index == 2
        assert excinfo.value.code == VarnamStatus.STORAGE_ERROR
        assert excinfo.value.message == "Failed to read metadata for 'ta'"
        assert fake_engine.live_handles == set()

    def test_strict_mode_from_settings(self, container, fake_engine):
        container.config.override(Settings(STRICT_SCHEME_LISTING=True))
        fake_engine.fail_details_for = {"ml"}
        try:
            with pytest.raises(EnumerationError):
                container.list_schemes().execute()
        finally:
            container.config.reset_override()

        assert fake_engine.live_handles == set()

    def test_unexpected_exception_still_releases(self):
        """
        Scenario: The adapter itself blows up while describing an entry.
        Expected: The exception propagates after every handle is released.
        """
        engine = MagicMock()
        engine.get_all_handles.return_value = [1, 2, 3]
        engine.get_scheme_details.side_effect = RuntimeError("segfault averted")

        with pytest.raises(RuntimeError):
            ListSchemes(engine).execute()

        released = sorted(call.args[0] for call in engine.destroy.call_args_list)
        assert released == [1, 2, 3]

    def test_listing_does_not_touch_open_sessions(self, container, fake_engine):
        with container.open_session().execute("ml") as session:
            container.list_schemes().execute()
            assert session.transliterate("namaskaaram")[0] == "നമസ്കാരം"
            assert fake_engine.live_handles == {session._handle}
