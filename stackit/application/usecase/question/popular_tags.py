"""Popular tags use case."""

from pydantic import BaseModel, Field

from stackit.application.usecase.common import CamelModel
from stackit.domain.service import QuestionService


class PopularTagsRequest(BaseModel):
    """Popular tags request."""

    limit: int = Field(default=20, ge=1)


class TagUsageResponse(CamelModel):
    tag: str
    count: int


class PopularTagsUseCase:
    """Use case for the most used tags."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: PopularTagsRequest) -> list[TagUsageResponse]:
        usage = await self.question_service.popular_tags(request.limit)
        return [TagUsageResponse(tag=u.tag, count=u.count) for u in usage]
