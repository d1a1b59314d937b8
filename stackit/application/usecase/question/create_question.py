"""Create question use case."""

from pydantic import BaseModel

from stackit.application.usecase.common import CamelModel, QuestionResponse
from stackit.domain.error import FieldError, ValidationError
from stackit.domain.service import AccessService, QuestionService
from stackit.domain.value import TagName


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    token: str | None
    title: str
    description: str
    tags: list[str]


class QuestionMutationResponse(CamelModel):
    """Question returned from a write."""

    message: str
    question: QuestionResponse


def parse_tags(raw: list[str]) -> list[TagName]:
    """Normalize raw tags and check the 1-5 bound.

    Raises:
        ValidationError: If a tag is malformed or the count is out of range
    """
    try:
        tags = TagName.normalize_all(raw)
    except ValueError as e:
        raise ValidationError(
            "Invalid tags", [FieldError(field="tags", message=_first_error(e))]
        )
    if not 1 <= len(tags) <= 5:
        raise ValidationError.for_field("tags", "Questions need 1 to 5 tags")
    return tags


def _first_error(error: ValueError) -> str:
    errors = getattr(error, "errors", None)
    if callable(errors):
        return errors()[0]["msg"]
    return str(error)


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(
        self, access_service: AccessService, question_service: QuestionService
    ) -> None:
        """Initialize create question use case.

        Args:
            access_service: Access control gate
            question_service: Question domain service
        """
        self.access_service = access_service
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionMutationResponse:
        """Execute create question flow.

        Raises:
            AuthenticationError: If the caller is not authenticated
            NotAuthorizedError: If the caller is banned
            ValidationError: If the tags are invalid
        """
        user = await self.access_service.authenticate(request.token)
        question = await self.question_service.create_question(
            author_id=user.id,
            title=request.title,
            description=request.description,
            tags=parse_tags(request.tags),
        )
        return QuestionMutationResponse(
            message="Question created successfully",
            question=QuestionResponse.build(question, {user.id: user}),
        )
