from enum import Enum
from typing import List, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator

from medstudy.core.exceptions import ValidationError


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


def coerce_difficulty(difficulty: Union[Difficulty, str]) -> Difficulty:
    """Difficulty from an enum member or its value; unknown levels raise ValidationError"""
    try:
        return Difficulty(difficulty)
    except ValueError as e:
        raise ValidationError(
            f"Unknown difficulty: {difficulty!r}",
            {"allowed": [d.value for d in Difficulty]}
        ) from e


# ======================= Study Guide Schemas =======================

class _ContentModel(BaseModel):
    # Wire names are camelCase; either name is accepted on input
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MatchingPair(_ContentModel):
    term: str
    definition: str


class Section(_ContentModel):
    title: str
    foundational: str
    clinical: str
    mermaid_chart: str = Field(alias="mermaidChart")
    key_points: List[str] = Field(alias="keyPoints")
    mnemonics: List[str]
    matching_pairs: List[MatchingPair] = Field(alias="matchingPairs")


class StudyGuide(_ContentModel):
    topic: str
    overview: str
    sections: List[Section]
    related_topics: List[str] = Field(alias="relatedTopics")


# ======================= Quiz Schemas =======================

class Question(_ContentModel):
    question: str
    options: List[str] = Field(min_length=4, max_length=5)
    correct_answer: int = Field(alias="correctAnswer", ge=0)
    explanation: str

    @model_validator(mode="after")
    def check_correct_answer_in_range(self):
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correctAnswer {self.correct_answer} is out of range for {len(self.options)} options"
            )
        return self


class QuizSession(_ContentModel):
    questions: List[Question]
