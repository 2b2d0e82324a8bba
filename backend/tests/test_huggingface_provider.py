import asyncio
import json

import httpx
import pytest

from backend.companion.config import Settings
from backend.companion.providers import (
    HuggingFaceProvider,
    SentimentProviderError,
    create_provider_from_settings,
)


def _provider(handler, api_key=None):
    return HuggingFaceProvider(
        api_url="https://hf.test/models/emotion",
        api_key=api_key,
        transport=httpx.MockTransport(handler),
    )


def test_parses_nested_scores_and_sends_inputs():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json=[[{"label": "joy", "score": 0.9}, {"label": "sadness", "score": 0.1}]])

    scores = asyncio.run(_provider(handler, api_key="hf_testtoken123").classify("great day"))
    assert [s.label for s in scores] == ["joy", "sadness"]
    assert scores[0].score == pytest.approx(0.9)
    assert seen["body"] == {"inputs": "great day"}
    assert seen["auth"] == "Bearer hf_testtoken123"


def test_accepts_flat_score_list_without_key():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json=[{"label": "Anger", "score": 0.6}])

    scores = asyncio.run(_provider(handler).classify("grr"))
    assert scores[0].label == "anger"
    assert seen["auth"] is None


def test_timeout_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(SentimentProviderError) as exc_info:
        asyncio.run(_provider(handler).classify("hi"))
    assert exc_info.value.provider == "huggingface"
    assert isinstance(exc_info.value.original_error, httpx.TimeoutException)


def _slow_provider(delay_seconds, timeout_seconds):
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(delay_seconds)
        return httpx.Response(200, json=[{"label": "joy", "score": 0.9}])

    return HuggingFaceProvider(
        api_url="https://hf.test/models/emotion",
        timeout_seconds=timeout_seconds,
        transport=httpx.MockTransport(handler),
    )


def test_total_budget_covers_the_whole_call():
    with pytest.raises(SentimentProviderError) as exc_info:
        asyncio.run(_slow_provider(delay_seconds=0.5, timeout_seconds=0.05).classify("hi"))
    assert exc_info.value.provider == "huggingface"
    assert isinstance(exc_info.value.original_error, asyncio.TimeoutError)


def test_slow_provider_falls_back_to_rules():
    from backend.companion.emotion import analyze_emotion

    result = asyncio.run(analyze_emotion("I am so angry", _slow_provider(delay_seconds=0.5, timeout_seconds=0.05)))
    assert result.method == "rule-based"
    assert result.primary == "anger"


def test_http_status_error_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "Model is loading"})

    with pytest.raises(SentimentProviderError):
        asyncio.run(_provider(handler).classify("hi"))


def test_invalid_json_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"not json")

    with pytest.raises(SentimentProviderError):
        asyncio.run(_provider(handler).classify("hi"))


@pytest.mark.parametrize("payload", [[], {"error": "bad"}, [[{"label": "joy"}]]])
def test_unexpected_shapes_are_wrapped(payload):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(SentimentProviderError):
        asyncio.run(_provider(handler).classify("hi"))


def test_factory_builds_huggingface_provider(monkeypatch):
    monkeypatch.setenv("SENTIMENT_PROVIDER", "huggingface")
    monkeypatch.setenv("HUGGINGFACE_API_KEY", "hf_abcdefghij")
    monkeypatch.setenv("SENTIMENT_TIMEOUT_SECONDS", "10")
    provider = create_provider_from_settings(Settings(_env_file=None))
    assert isinstance(provider, HuggingFaceProvider)
    assert provider.api_key == "hf_abcdefghij"
    assert provider.timeout_seconds == 10.0


def test_factory_disabled_returns_none(monkeypatch):
    monkeypatch.setenv("SENTIMENT_PROVIDER", "none")
    assert create_provider_from_settings(Settings(_env_file=None)) is None


def test_factory_rejects_unknown_provider(monkeypatch):
    monkeypatch.setenv("SENTIMENT_PROVIDER", "mystery")
    with pytest.raises(ValueError):
        create_provider_from_settings(Settings(_env_file=None))
