"""Tests for the client-side analysis session."""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from vani.client.exceptions import AnalysisInProgressError, AnalysisRequestError
from vani.client.session import AnalysisSession, SessionState
from vani.intake.models import Severity, UploadedFile

MakeFile = Callable[..., UploadedFile]


def _session(api_client: MagicMock | None = None) -> AnalysisSession:
    return AnalysisSession(api_client or MagicMock())


class TestOffer:
    def test_stages_valid_files(self, make_file: MakeFile) -> None:
        session = _session()
        session.offer([make_file("a.txt"), make_file("b.exe")])
        assert [f.name for f in session.files] == ["a.txt"]
        assert [d.severity for d in session.last_diagnostics] == [Severity.ERROR]

    def test_accumulates_across_offers(self, make_file: MakeFile) -> None:
        session = _session()
        session.offer([make_file("a.txt")])
        session.offer([make_file("b.pdf")])
        assert [f.name for f in session.files] == ["a.txt", "b.pdf"]

    def test_capacity_flags(self, make_file: MakeFile) -> None:
        session = _session()
        session.offer([make_file(f"f{i}.txt") for i in range(5)])
        assert not session.can_add_files
        assert not session.exceeds_limit

    def test_remove(self, make_file: MakeFile) -> None:
        session = _session()
        session.offer([make_file("a.txt"), make_file("b.txt")])
        assert session.remove("a.txt")
        assert not session.remove("zzz.txt")
        assert [f.name for f in session.files] == ["b.txt"]


class TestAnalyze:
    def test_no_files_makes_no_request(self) -> None:
        api_client = MagicMock()
        session = _session(api_client)
        assert session.analyze() is None
        api_client.analyze.assert_not_called()
        assert session.state is SessionState.IDLE
        assert session.last_diagnostics[0].title == "No files selected"

    def test_success_sets_result(self, make_file: MakeFile) -> None:
        api_client = MagicMock()
        api_client.analyze.return_value = {"overall_style_summary": "x"}
        session = _session(api_client)
        session.offer([make_file("a.txt")])
        assert session.analyze() == {"overall_style_summary": "x"}
        assert session.state is SessionState.SUCCESS
        assert session.error is None
        api_client.analyze.assert_called_once_with(session.files)

    def test_failure_sets_error(self, make_file: MakeFile) -> None:
        api_client = MagicMock()
        api_client.analyze.side_effect = AnalysisRequestError("Server error occurred")
        session = _session(api_client)
        session.offer([make_file("a.txt")])
        assert session.analyze() is None
        assert session.state is SessionState.ERROR
        assert session.error == "Server error occurred"
        assert session.result is None
        assert session.last_diagnostics[0].title == "Analysis failed"

    def test_unexpected_failure_leaves_loading_state(self, make_file: MakeFile) -> None:
        api_client = MagicMock()
        api_client.analyze.side_effect = TypeError("bad multipart")
        session = _session(api_client)
        session.offer([make_file("a.txt")])
        session.analyze()
        assert session.state is SessionState.ERROR
        assert not session.is_loading

    def test_new_attempt_clears_previous_error(self, make_file: MakeFile) -> None:
        api_client = MagicMock()
        api_client.analyze.side_effect = [AnalysisRequestError("boom"), {"a": 1}]
        session = _session(api_client)
        session.offer([make_file("a.txt")])
        session.analyze()
        session.analyze()
        assert session.error is None
        assert session.result == {"a": 1}

    def test_new_attempt_clears_previous_result(self, make_file: MakeFile) -> None:
        api_client = MagicMock()
        api_client.analyze.side_effect = [{"a": 1}, AnalysisRequestError("boom")]
        session = _session(api_client)
        session.offer([make_file("a.txt")])
        session.analyze()
        session.analyze()
        assert session.result is None
        assert session.error == "boom"

    def test_rejects_concurrent_analysis(self, make_file: MakeFile) -> None:
        api_client = MagicMock()
        session = _session(api_client)
        session.offer([make_file("a.txt")])

        def reenter(files: object) -> dict[str, object]:
            assert session.is_loading
            assert session.result is None and session.error is None
            with pytest.raises(AnalysisInProgressError):
                session.analyze()
            return {"a": 1}

        api_client.analyze.side_effect = reenter
        assert session.analyze() == {"a": 1}
        assert api_client.analyze.call_count == 1


class TestCopyJson:
    def test_none_without_result(self) -> None:
        assert _session().copy_json() is None

    def test_pretty_json_of_result(self, make_file: MakeFile) -> None:
        api_client = MagicMock()
        api_client.analyze.return_value = {"tone": {"overall_tone": "wry"}}
        session = _session(api_client)
        session.offer([make_file("a.txt")])
        session.analyze()
        assert session.copy_json() == '{\n  "tone": {\n    "overall_tone": "wry"\n  }\n}'
