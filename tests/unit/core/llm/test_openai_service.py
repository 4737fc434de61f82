"""
Unit tests for OpenAIService JSON handling.

Tests verify:
- Markdown code fences are stripped before parsing
- Invalid or non-object JSON raises LLMResponseError
- The request asks for JSON output with the configured model
"""
import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from core.exceptions import LLMResponseError
from core.llm.openai_service import OpenAIService, strip_code_fences


def _completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def service():
    svc = OpenAIService(api_key="test-key", base_url="http://localhost:9999/v1", model="test-model")
    svc.client = MagicMock()
    return svc


class TestStripCodeFences:

    def test_json_fence(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence(self):
        assert strip_code_fences('```\n{"a": 1}```') == '{"a": 1}'

    def test_plain_text_untouched(self):
        assert strip_code_fences('  {"a": 1} ') == '{"a": 1}'


class TestGenerateJson:

    def test_parses_fenced_object(self, service):
        service.client.chat.completions.create.return_value = _completion(
            '```json\n{"skills": ["Python"]}\n```'
        )

        assert service.generate_json("system", "prompt") == {"skills": ["Python"]}

        kwargs = service.client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}

    def test_invalid_json_raises(self, service):
        service.client.chat.completions.create.return_value = _completion("I think they are great")

        with pytest.raises(LLMResponseError):
            service.generate_json("system", "prompt")

    def test_non_object_raises(self, service):
        service.client.chat.completions.create.return_value = _completion('["Python"]')

        with pytest.raises(LLMResponseError, match="JSON object"):
            service.generate_json("system", "prompt")

    def test_empty_content_raises(self, service):
        service.client.chat.completions.create.return_value = _completion(None)

        with pytest.raises(LLMResponseError):
            service.generate_json("system", "prompt")
