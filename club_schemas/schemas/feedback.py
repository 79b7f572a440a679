from typing import Annotated, Literal, Optional

from pydantic import StrictInt, StrictStr

from .base import FormModel
from ..fields import AnswerValue, PositiveInt, Url, item_count


class _FeedbackQuestionBase(FormModel):
    id: StrictInt
    question: StrictStr
    image: Optional[Url] = None


class McqFeedbackQuestion(_FeedbackQuestionBase):
    question_type: Literal["MCQ"]
    options: Annotated[list[StrictStr], item_count(5, None, "At least 5 options are required")]
    answer: PositiveInt


class TextFeedbackQuestion(_FeedbackQuestionBase):
    question_type: Literal["TEXT"]
    answer: StrictStr


class FeedbackAnswer(FormModel):
    question_id: StrictInt
    answer: AnswerValue
