from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from vani.analysis.exceptions import AnalysisError, AnalysisNetworkError
from vani.analysis.models import DocumentPart
from vani.analysis.openai_client_adapter import OpenAIClientAdapter

_DOCUMENTS = [DocumentPart(name="essay.pdf", mime_type="application/pdf", data=b"%PDF")]


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _generate(mock_client: MagicMock) -> str:
    with patch(
        "vani.analysis.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
        return adapter.generate_content(
            model="m",
            temperature=0.1,
            prompt="Analyze",
            documents=_DOCUMENTS,
        )


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response('{"ok": true}')
        assert _generate(mock_client) == '{"ok": true}'

    def test_sends_files_as_base64_data_urls(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        _generate(mock_client)
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        content = messages[0]["content"]
        assert content[0] == {
            "type": "file",
            "file": {"filename": "essay.pdf", "file_data": "data:application/pdf;base64,JVBERg=="},
        }
        assert content[-1] == {"type": "text", "text": "Analyze"}

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with pytest.raises(AnalysisError, match="empty response"):
            _generate(mock_client)

    def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        response = MagicMock()
        response.choices = []
        mock_client.chat.completions.create.return_value = response
        with pytest.raises(AnalysisError, match="no choices"):
            _generate(mock_client)

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(AnalysisNetworkError, match="network error"):
            _generate(mock_client)

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(AnalysisNetworkError, match="network error"):
            _generate(mock_client)

    def test_raises_network_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(AnalysisNetworkError, match="API error"):
            _generate(mock_client)
