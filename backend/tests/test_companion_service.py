import asyncio
import random

from backend.companion.service import FALLBACK_MESSAGE, WellnessCompanionService


def test_stressed_and_cant_sleep_end_to_end():
    service = WellnessCompanionService(provider=None, rng=random.Random(0))
    result = asyncio.run(service.analyze_message("I feel stressed and can't sleep"))
    assert result.success is True
    assert result.emotion == "stress"
    assert result.method == "rule-based"
    assert {"stressRelief", "sleepIssues"} <= set(result.intents)
    ids = [a.id for a in result.activities]
    assert ids[0] == "sleep-routine"
    assert ids[1:] == ["box-breathing", "body-scan-meditation", "stress-journal"]


def test_unexpected_error_returns_empathetic_fallback(monkeypatch):
    def boom(text):
        raise RuntimeError("secret internals")

    monkeypatch.setattr("backend.companion.service.detect_intents", boom)
    service = WellnessCompanionService(provider=None)
    result = asyncio.run(service.analyze_message("hello"))
    assert result.success is False
    assert result.message == FALLBACK_MESSAGE
    assert result.emotion == "neutral"
    assert result.activities == []
    assert result.method == "fallback"
    assert "secret internals" not in result.model_dump_json()
