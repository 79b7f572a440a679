from enum import Enum
from typing import Annotated, Literal, Optional

from pydantic import StrictInt, StrictStr

from .base import FormModel
from ..fields import AnswerValue, PermissiveImage, PositiveInt, PositiveNumber, item_count, min_length


class QuestionType(str, Enum):
    MCQ = "MCQ"
    TEXT = "TEXT"


class _QuizQuestionBase(FormModel):
    id: StrictInt
    question: Annotated[StrictStr, min_length(1, "Question cannot be empty")]
    image: Optional[PermissiveImage] = None
    points: PositiveNumber


class McqQuizQuestion(_QuizQuestionBase):
    question_type: Literal["MCQ"]
    options: Annotated[list[StrictStr], item_count(2, 5, "Only 2-5 options are allowed")]
    answer: PositiveInt  # index into options


class TextQuizQuestion(_QuizQuestionBase):
    question_type: Literal["TEXT"]
    answer: Annotated[StrictStr, min_length(1, "Answer cannot be empty")]


class QuizAnswer(FormModel):
    question_id: StrictInt
    answer: AnswerValue
