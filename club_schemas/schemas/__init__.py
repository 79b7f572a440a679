from .base import FormModel
from .feedback import FeedbackAnswer, McqFeedbackQuestion, TextFeedbackQuestion
from .gallery import BlogImage, GalleryItem
from .membership import MembershipRegistration
from .quiz import McqQuizQuestion, QuestionType, QuizAnswer, TextQuizQuestion
from .user import AddUserLink, DeleteUserLink, EditUser, EditUserImage, GetUser

__all__ = [
    "FormModel",
    "QuestionType",
    "McqQuizQuestion",
    "TextQuizQuestion",
    "QuizAnswer",
    "McqFeedbackQuestion",
    "TextFeedbackQuestion",
    "FeedbackAnswer",
    "GalleryItem",
    "BlogImage",
    "GetUser",
    "EditUser",
    "EditUserImage",
    "AddUserLink",
    "DeleteUserLink",
    "MembershipRegistration",
]
