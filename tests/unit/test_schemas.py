"""
Unit tests for study guide and quiz models.
"""

import json

import pydantic
import pytest

from medstudy.core.exceptions import ValidationError
from medstudy.schemas import Difficulty, MatchingPair, Question, QuizSession, StudyGuide, coerce_difficulty

STUDY_GUIDE_JSON = json.dumps({
    "topic": "Brachial Plexus",
    "overview": "Roots, trunks, divisions, cords, branches.",
    "sections": [{
        "title": "Upper Trunk Injury",
        "foundational": "C5-C6 roots join to form the upper trunk.",
        "clinical": "Erb palsy: waiter's tip posture.",
        "mermaidChart": 'graph TD\n A["C5"] --> C["Upper trunk"]\n B["C6"] --> C',
        "keyPoints": ["Suprascapular nerve arises from the upper trunk"],
        "mnemonics": ["Randy Travis Drinks Cold Beer"],
        "matchingPairs": [{"term": "Erb palsy", "definition": "Upper trunk lesion"}],
    }],
    "relatedTopics": ["Rotator Cuff", "Axillary Artery"],
})


def test_study_guide_parses_wire_names():
    guide = StudyGuide.model_validate_json(STUDY_GUIDE_JSON)

    section = guide.sections[0]
    assert section.mermaid_chart.startswith("graph TD")
    assert section.key_points == ["Suprascapular nerve arises from the upper trunk"]
    assert section.matching_pairs == [MatchingPair(term="Erb palsy", definition="Upper trunk lesion")]
    assert guide.related_topics == ["Rotator Cuff", "Axillary Artery"]


def test_study_guide_serialises_wire_names():
    guide = StudyGuide.model_validate_json(STUDY_GUIDE_JSON)

    dumped = guide.model_dump(by_alias=True)

    assert set(dumped) == {"topic", "overview", "sections", "relatedTopics"}
    assert set(dumped["sections"][0]) == {
        "title", "foundational", "clinical", "mermaidChart", "keyPoints", "mnemonics", "matchingPairs",
    }


def test_study_guide_missing_section_fields_rejected():
    with pytest.raises(pydantic.ValidationError):
        StudyGuide.model_validate_json(
            '{"topic": "Heart", "overview": "x", "relatedTopics": [], "sections": [{"title": "Valves"}]}'
        )


def test_models_are_immutable():
    question = Question(question="Q?", options=["a", "b", "c", "d"], correct_answer=1, explanation="e")

    with pytest.raises(pydantic.ValidationError):
        question.correct_answer = 2


def test_negative_correct_answer_rejected():
    with pytest.raises(pydantic.ValidationError):
        QuizSession.model_validate({
            "questions": [{"question": "Q?", "options": ["a", "b"], "correctAnswer": -1, "explanation": "e"}]
        })


def test_difficulty_values():
    assert [d.value for d in Difficulty] == ["Easy", "Medium", "Hard"]
    assert Difficulty("Hard") is Difficulty.HARD


def _question(options, correct_answer):
    return {"question": "Q?", "options": options, "correctAnswer": correct_answer, "explanation": "e"}


@pytest.mark.parametrize("count", [4, 5])
def test_four_or_five_options_accepted(count):
    options = [f"option {i}" for i in range(count)]

    question = Question.model_validate(_question(options, count - 1))

    assert question.correct_answer == count - 1


@pytest.mark.parametrize("count", [0, 1, 3, 6])
def test_option_count_outside_four_to_five_rejected(count):
    with pytest.raises(pydantic.ValidationError):
        Question.model_validate(_question([f"option {i}" for i in range(count)], 0))


def test_single_option_with_out_of_range_answer_rejected():
    with pytest.raises(pydantic.ValidationError):
        QuizSession.model_validate({"questions": [_question(["only"], 7)]})


@pytest.mark.parametrize("correct_answer", [4, 7])
def test_correct_answer_must_index_an_option(correct_answer):
    with pytest.raises(pydantic.ValidationError, match="out of range"):
        Question.model_validate(_question(["a", "b", "c", "d"], correct_answer))


def test_coerce_difficulty():
    assert coerce_difficulty("Easy") is Difficulty.EASY
    assert coerce_difficulty(Difficulty.HARD) is Difficulty.HARD

    with pytest.raises(ValidationError, match="Unknown difficulty"):
        coerce_difficulty("easy")
