import pytest

from backend.companion.emotion.intents import detect_intents
from backend.companion.emotion.mapper import ACTIVITY_MAP, get_wellness_activities


def test_stressed_and_cant_sleep_intents():
    intents = detect_intents("I feel stressed and can't sleep")
    assert "stressRelief" in intents
    assert "sleepIssues" in intents


@pytest.mark.parametrize(
    "text,intent",
    [
        ("I want to skip today", "skipWorkout"),
        ("I need help staying on track", "seekMotivation"),
        ("Should I run or lift?", "askAdvice"),
        ("I finished my workout!", "reportSuccess"),
        ("Thanks so much", "expressGratitude"),
        ("I have insomnia", "sleepIssues"),
        ("I need to relax", "stressRelief"),
    ],
)
def test_each_intent_pattern(text, intent):
    assert intent in detect_intents(text)


def test_intents_are_not_exclusive_and_ordered():
    assert detect_intents("Thanks, I did it but I'm too tired") == ["skipWorkout", "reportSuccess", "expressGratitude", "sleepIssues"]


def test_no_intents():
    assert detect_intents("hello") == []


def test_never_more_than_four():
    for emotion in list(ACTIVITY_MAP) + ["neutral", "motivation"]:
        for intents in ([], ["sleepIssues"], ["skipWorkout"], ["sleepIssues", "skipWorkout"]):
            assert len(get_wellness_activities(emotion, intents)) <= 4


def test_stress_with_sleep_issues():
    activities = get_wellness_activities("stress", ["stressRelief", "sleepIssues"])
    assert [a.id for a in activities] == [
        "sleep-routine",
        "box-breathing",
        "body-scan-meditation",
        "stress-journal",
    ]
    assert activities[0].priority == 0
    assert activities[1].priority == 1


def test_sleep_issues_goes_first():
    for emotion in ACTIVITY_MAP:
        assert get_wellness_activities(emotion, ["sleepIssues"])[0].id == "sleep-routine"


def test_skip_workout_goes_in_front_of_sleep_routine():
    ids = [a.id for a in get_wellness_activities("joy", ["sleepIssues", "skipWorkout"])]
    assert ids == ["micro-workout", "sleep-routine", "celebrate-wins", "gratitude-practice"]


def test_unmapped_emotion_uses_stress_table():
    ids = [a.id for a in get_wellness_activities("neutral")]
    assert ids == list(ACTIVITY_MAP["stress"][:4])
    assert [a.id for a in get_wellness_activities("surprise")] == ids


def test_table_not_mutated_between_calls():
    get_wellness_activities("anger", ["sleepIssues", "skipWorkout"])
    ids = [a.id for a in get_wellness_activities("anger")]
    assert ids == ["anger-release-breathing", "physical-release", "perspective-shift"]
