from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any, Optional, Protocol

from pydantic import BaseModel, ValidationError

from .config import configure
from .errors import SchemaValidationError, collect_errors
from .schemas import (
    AddUserLink, BlogImage, DeleteUserLink, EditUser, EditUserImage,
    FeedbackAnswer, GalleryItem, GetUser, McqFeedbackQuestion, McqQuizQuestion,
    MembershipRegistration, QuestionType, QuizAnswer, TextFeedbackQuestion, TextQuizQuestion,
)
from .unions import Resolution, TaggedUnion


class SchemaId(str, Enum):
    QUIZ_QUESTION = "quiz_question"
    QUIZ_ANSWER = "quiz_answer"
    FEEDBACK_QUESTION = "feedback_question"
    FEEDBACK_ANSWER = "feedback_answer"
    GALLERY_ITEM = "gallery_item"
    BLOG_IMAGE = "blog_image"
    GET_USER = "get_user"
    EDIT_USER = "edit_user"
    EDIT_USER_IMAGE = "edit_user_image"
    ADD_USER_LINK = "add_user_link"
    DELETE_USER_LINK = "delete_user_link"
    MEMBERSHIP_REGISTRATION = "membership_registration"


class Schema(Protocol):
    def parse(self, raw: Any) -> Optional[BaseModel]: ...


class ModelSchema:
    """A single FormModel; optional=True lets the whole payload be None."""

    def __init__(self, model: type[BaseModel], *, optional: bool = False) -> None:
        self.model = model
        self.optional = optional

    def parse(self, raw: Any) -> Optional[BaseModel]:
        if raw is None and self.optional:
            return None
        try:
            return self.model.model_validate(raw)
        except ValidationError as exc:
            raise SchemaValidationError(collect_errors(exc)) from exc


QUESTION_TYPE_FIELD = "questionType"


def build_registry(feedback: Resolution) -> dict[SchemaId, Schema]:
    return {
        SchemaId.QUIZ_QUESTION: TaggedUnion(QUESTION_TYPE_FIELD, {
            QuestionType.MCQ.value: McqQuizQuestion,
            QuestionType.TEXT.value: TextQuizQuestion,
        }),
        SchemaId.QUIZ_ANSWER: ModelSchema(QuizAnswer),
        # MCQ first: ORDERED resolution tries variants in this order
        SchemaId.FEEDBACK_QUESTION: TaggedUnion(QUESTION_TYPE_FIELD, {
            QuestionType.MCQ.value: McqFeedbackQuestion,
            QuestionType.TEXT.value: TextFeedbackQuestion,
        }, resolution=feedback),
        SchemaId.FEEDBACK_ANSWER: ModelSchema(FeedbackAnswer),
        SchemaId.GALLERY_ITEM: ModelSchema(GalleryItem),
        SchemaId.BLOG_IMAGE: ModelSchema(BlogImage),
        SchemaId.GET_USER: ModelSchema(GetUser, optional=True),
        SchemaId.EDIT_USER: ModelSchema(EditUser),
        SchemaId.EDIT_USER_IMAGE: ModelSchema(EditUserImage),
        SchemaId.ADD_USER_LINK: ModelSchema(AddUserLink),
        SchemaId.DELETE_USER_LINK: ModelSchema(DeleteUserLink),
        SchemaId.MEMBERSHIP_REGISTRATION: ModelSchema(MembershipRegistration),
    }


@lru_cache(maxsize=1)
def get_registry() -> dict[SchemaId, Schema]:
    return build_registry(configure())
