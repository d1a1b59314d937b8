"""Answer use cases."""

from .accept_answer import (
    AcceptanceRequest,
    AcceptanceResponse,
    AcceptAnswerUseCase,
    UnacceptAnswerUseCase,
)
from .create_answer import (
    AnswerMutationResponse,
    CreateAnswerRequest,
    CreateAnswerUseCase,
)
from .delete_answer import DeleteAnswerRequest, DeleteAnswerUseCase
from .update_answer import UpdateAnswerRequest, UpdateAnswerUseCase

__all__ = [
    "AcceptAnswerUseCase",
    "AcceptanceRequest",
    "AcceptanceResponse",
    "AnswerMutationResponse",
    "CreateAnswerRequest",
    "CreateAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerUseCase",
    "UnacceptAnswerUseCase",
    "UpdateAnswerRequest",
    "UpdateAnswerUseCase",
]
