"""Request helpers for end-to-end tests."""

from uuid import UUID

from fastapi.testclient import TestClient

from stackit.domain.repository import UserRepository
from stackit.domain.value import UserId, UserRole

PASSWORD = "secret123"


def bearer(token: str) -> dict[str, str]:
    """Authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}


def register(client: TestClient, username: str) -> tuple[str, str]:
    """Register a member and return its ID and token.

    The auth cookie is cleared so later requests authenticate only through
    the headers a test passes.
    """
    response = client.post(
        "/auth/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": PASSWORD,
        },
    )
    assert response.status_code == 201, response.text
    client.cookies.clear()
    body = response.json()
    return body["user"]["id"], body["token"]


def promote_to_admin(client: TestClient, container, user_id: str) -> None:
    """Give a registered user the admin role."""

    async def _promote() -> None:
        user_repository = await container.get(UserRepository)
        user = await user_repository.find_by_id(UserId(UUID(user_id)))
        await user_repository.save(user.model_copy(update={"role": UserRole.ADMIN}))

    client.portal.call(_promote)


def ask_question(client: TestClient, token: str, **overrides) -> dict:
    """Create a question and return its payload."""
    payload = {
        "title": "How do I center a div?",
        "description": "I have tried flexbox and grid but nothing works.",
        "tags": ["css", "html"],
    }
    payload.update(overrides)
    response = client.post("/questions", json=payload, headers=bearer(token))
    assert response.status_code == 201, response.text
    return response.json()["question"]


def post_answer(client: TestClient, token: str, question_id: str) -> dict:
    """Answer a question and return the answer payload."""
    response = client.post(
        "/answers",
        json={
            "questionId": question_id,
            "content": "Use display: flex with justify-content: center.",
        },
        headers=bearer(token),
    )
    assert response.status_code == 201, response.text
    return response.json()["answer"]
