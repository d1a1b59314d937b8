"""Answer acceptance domain service.

A question has at most one accepted answer. Every transition locks the
question row first, so concurrent accept/unaccept calls on the same
question run one after the other inside the request transaction.
"""

from datetime import datetime

import logfire

from stackit.domain.error import InvalidStateError, NotAuthorizedError, NotFoundError
from stackit.domain.model import Answer, Question, User
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.value import AnswerId, UserId

from .base import Service
from .notification_service import NotificationService


class AcceptanceService(Service):
    """Domain service for accepting and unaccepting answers."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize acceptance service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            notification_service: Notification fan-out
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.notification_service = notification_service

    async def _load_locked(self, answer_id: AnswerId) -> tuple[Question, Answer]:
        """Lock the answer's question and load both records.

        The answer is read again after the lock is taken so that its
        acceptance fields reflect any transition that finished meanwhile.

        Raises:
            NotFoundError: If the answer or its question is missing or deleted
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer or answer.is_deleted:
            raise NotFoundError("Answer", str(answer_id))

        question = await self.question_repository.find_by_id_for_update(
            answer.question_id
        )
        if not question or question.is_deleted:
            raise NotFoundError("Question", str(answer.question_id))

        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer or answer.is_deleted:
            raise NotFoundError("Answer", str(answer_id))

        return question, answer

    @staticmethod
    def _ensure_question_owner(question: Question, user_id: UserId, verb: str) -> None:
        if question.author_id != user_id:
            logfire.warn(
                "Acceptance by non-owner rejected",
                question_id=str(question.id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError(f"Only the question author can {verb} answers")

    async def accept(
        self, answer_id: AnswerId, requester: User
    ) -> tuple[Question, Answer]:
        """Accept an answer, replacing any previously accepted one.

        Args:
            answer_id: Answer to accept
            requester: Acting user (must own the question)

        Returns:
            Tuple of (updated question, accepted answer)

        Raises:
            NotFoundError: If the answer or question does not exist
            NotAuthorizedError: If the requester does not own the question
        """
        with logfire.span(
            "acceptance_service.accept",
            answer_id=str(answer_id),
            requester_id=str(requester.id),
        ):
            question, answer = await self._load_locked(answer_id)
            self._ensure_question_owner(question, requester.id, "accept")

            if question.accepted_answer_id == answer.id and answer.is_accepted:
                logfire.info("Answer already accepted", answer_id=str(answer.id))
                return question, answer

            previous_id = question.accepted_answer_id
            if previous_id and previous_id != answer.id:
                previous = await self.answer_repository.find_by_id(previous_id)
                if previous:
                    await self.answer_repository.save(_cleared(previous))
                    logfire.info(
                        "Previous answer unaccepted", answer_id=str(previous_id)
                    )

            now = datetime.now()
            answer = await self.answer_repository.save(
                answer.model_copy(
                    update={
                        "is_accepted": True,
                        "accepted_at": now,
                        "accepted_by": requester.id,
                    }
                )
            )
            question = await self.question_repository.save(
                question.model_copy(
                    update={"is_answered": True, "accepted_answer_id": answer.id}
                )
            )
            logfire.info(
                "Answer accepted",
                question_id=str(question.id),
                answer_id=str(answer.id),
            )

            await self.notification_service.answer_accepted(question, answer, requester)
            return question, answer

    async def unaccept(
        self, answer_id: AnswerId, requester: User
    ) -> tuple[Question, Answer]:
        """Withdraw the acceptance of the question's accepted answer.

        Args:
            answer_id: Currently accepted answer
            requester: Acting user (must own the question)

        Returns:
            Tuple of (updated question, unaccepted answer)

        Raises:
            NotFoundError: If the answer or question does not exist
            NotAuthorizedError: If the requester does not own the question
            InvalidStateError: If the answer is not the accepted one
        """
        with logfire.span(
            "acceptance_service.unaccept",
            answer_id=str(answer_id),
            requester_id=str(requester.id),
        ):
            question, answer = await self._load_locked(answer_id)
            self._ensure_question_owner(question, requester.id, "unaccept")

            if question.accepted_answer_id != answer.id:
                logfire.warn(
                    "Unaccept of non-accepted answer", answer_id=str(answer.id)
                )
                raise InvalidStateError("This answer is not accepted")

            answer = await self.answer_repository.save(_cleared(answer))
            question = await self.question_repository.save(_unanswered(question))
            logfire.info(
                "Answer unaccepted",
                question_id=str(question.id),
                answer_id=str(answer.id),
            )

            await self.notification_service.answer_unaccepted(
                question, answer, requester
            )
            return question, answer

    async def release(self, answer: Answer) -> Answer:
        """Withdraw acceptance from an answer that is about to be deleted.

        Called before the answer is soft-deleted, inside the same
        transaction. The question becomes unanswered if this answer was its
        accepted one.

        Returns:
            The answer with its acceptance fields cleared
        """
        with logfire.span("acceptance_service.release", answer_id=str(answer.id)):
            question = await self.question_repository.find_by_id_for_update(
                answer.question_id
            )
            if question and question.accepted_answer_id == answer.id:
                await self.question_repository.save(_unanswered(question))
                logfire.info(
                    "Acceptance released for deleted answer",
                    question_id=str(question.id),
                )

            if not answer.is_accepted:
                return answer
            return await self.answer_repository.save(_cleared(answer))


def _cleared(answer: Answer) -> Answer:
    return answer.model_copy(
        update={"is_accepted": False, "accepted_at": None, "accepted_by": None}
    )


def _unanswered(question: Question) -> Question:
    return question.model_copy(
        update={"is_answered": False, "accepted_answer_id": None}
    )
