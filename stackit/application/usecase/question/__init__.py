"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    QuestionMutationResponse,
)
from .delete_question import DeleteQuestionRequest, DeleteQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .popular_tags import PopularTagsRequest, PopularTagsUseCase, TagUsageResponse
from .update_question import UpdateQuestionRequest, UpdateQuestionUseCase

__all__ = [
    "CreateQuestionRequest",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "PopularTagsRequest",
    "PopularTagsUseCase",
    "QuestionMutationResponse",
    "TagUsageResponse",
    "UpdateQuestionRequest",
    "UpdateQuestionUseCase",
]
