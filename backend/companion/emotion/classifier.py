"""Emotion classification.

The hosted model is tried first; any provider failure falls through to a
keyword scorer so callers always get a result.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Tuple

from backend.companion.config import safe_error_detail
from backend.companion.providers import SentimentProvider, SentimentProviderError
from backend.companion.schemas import EmotionResult, EmotionScore

logger = logging.getLogger(__name__)

NEUTRAL = "neutral"

# Declaration order is the tie-break: the first category reaching the top count wins.
EMOTION_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "stress": ("stress", "overwhelm", "pressure", "anxious", "worried", "tense", "frantic", "rushed"),
    "anxiety": ("anxiety", "nervous", "scared", "panic", "worry", "fear", "uneasy"),
    "sadness": ("sad", "depressed", "down", "unhappy", "miserable", "gloomy", "blue", "crying"),
    "anger": ("angry", "mad", "furious", "annoyed", "frustrated", "irritated", "rage"),
    "joy": ("happy", "excited", "great", "amazing", "wonderful", "fantastic", "awesome", "love", "joy"),
    "fatigue": ("tired", "exhausted", "drained", "sleepy", "fatigued", "worn out", "weary"),
    "motivation": ("motivated", "pumped", "ready", "determined", "focused", "driven", "energized"),
    "unmotivated": ("unmotivated", "lazy", "don't feel like", "don't want", "skip", "give up", "quit"),
}

EMOTION_LABELS: Tuple[str, ...] = tuple(EMOTION_KEYWORDS) + (NEUTRAL,)

NO_MATCH_CONFIDENCE = 0.3
MAX_RULE_CONFIDENCE = 0.95


def _keyword_hits(lower_text: str, keywords: Tuple[str, ...]) -> int:
    return sum(1 for keyword in keywords if keyword in lower_text)


_WHITESPACE = re.compile(r"\s+")


def analyze_emotion_rule_based(text: str) -> EmotionResult:
    lower_text = text.lower()
    hits = {emotion: _keyword_hits(lower_text, keywords) for emotion, keywords in EMOTION_KEYWORDS.items()}

    primary = NEUTRAL
    best = 0
    for emotion, count in hits.items():
        if count > best:
            best = count
            primary = emotion

    # Leading or trailing whitespace yields empty tokens; they count as words.
    word_count = len(_WHITESPACE.split(lower_text))
    if best > 0:
        confidence = min(0.5 + (best / word_count) * 2, MAX_RULE_CONFIDENCE)
    else:
        confidence = NO_MATCH_CONFIDENCE

    scores = [
        EmotionScore(label=emotion, score=hits[emotion] / (len(keywords) + 1))
        for emotion, keywords in EMOTION_KEYWORDS.items()
    ]
    return EmotionResult(primary=primary, confidence=confidence, all=scores, method="rule-based")


def _top_score(scores: List[EmotionScore]) -> EmotionScore:
    top = scores[0]
    for entry in scores[1:]:
        if entry.score > top.score:
            top = entry
    return top


async def analyze_emotion(text: str, provider: Optional[SentimentProvider] = None) -> EmotionResult:
    """Classify text with the hosted model, falling back to keyword scoring."""
    if provider is None:
        return analyze_emotion_rule_based(text)

    try:
        scores = await provider.classify(text)
        if not scores:
            raise SentimentProviderError("provider returned no scores", provider=provider.name)
    except SentimentProviderError as exc:
        logger.warning(
            "[EMOTION] remote classifier unavailable, using rule-based fallback",
            extra={"provider": exc.provider, "detail": safe_error_detail(exc)},
        )
        return analyze_emotion_rule_based(text)

    top = _top_score(scores)
    return EmotionResult(
        primary=top.label,
        confidence=max(0.0, min(1.0, top.score)),
        all=scores,
        method="huggingface",
    )


__all__ = [
    "EMOTION_KEYWORDS",
    "EMOTION_LABELS",
    "NEUTRAL",
    "NO_MATCH_CONFIDENCE",
    "analyze_emotion",
    "analyze_emotion_rule_based",
]
