"""End-to-end tests for questions, answers, votes and comments."""

from uuid import uuid4

from tests.e2e.helpers import ask_question, bearer, post_answer, register


class TestQuestionEndpoints:
    """End-to-end tests for /questions."""

    def test_create_and_get_question(self, client):
        """A created question should be readable and count views."""
        # Arrange
        _, token = register(client, "asker")
        created = ask_question(client, token, tags=["CSS", " html ", "css"])

        # Act
        first = client.get(f"/questions/{created['id']}")
        second = client.get(f"/questions/{created['id']}")

        # Assert
        assert created["tags"] == ["css", "html"]
        assert created["author"]["username"] == "asker"
        assert first.status_code == 200
        assert first.json()["answers"] == []
        assert second.json()["views"] == first.json()["views"] + 1

    def test_create_requires_login(self, client):
        """Anonymous users cannot ask questions."""
        # Act
        response = client.post(
            "/questions",
            json={
                "title": "How do I center a div?",
                "description": "I have tried flexbox and grid but nothing works.",
                "tags": ["css"],
            },
        )

        # Assert
        assert response.status_code == 401

    def test_create_validation_error(self, client):
        """Short titles should be reported as field errors."""
        # Arrange
        _, token = register(client, "asker")

        # Act
        response = client.post(
            "/questions",
            json={
                "title": "Short",
                "description": "I have tried flexbox and grid but nothing works.",
                "tags": ["css"],
            },
            headers=bearer(token),
        )

        # Assert
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert [error["field"] for error in body["errors"]] == ["title"]

    def test_unknown_question(self, client):
        """Unknown question IDs should return 404."""
        # Act
        response = client.get(f"/questions/{uuid4()}")

        # Assert
        assert response.status_code == 404
        assert "message" in response.json()

    def test_only_owner_can_edit(self, client):
        """Strangers get 403, the owner can edit and history is kept."""
        # Arrange
        _, owner_token = register(client, "asker")
        _, stranger_token = register(client, "stranger")
        question = ask_question(client, owner_token)

        # Act
        forbidden = client.put(
            f"/questions/{question['id']}",
            json={"title": "A stranger rewrote this title"},
            headers=bearer(stranger_token),
        )
        edited = client.put(
            f"/questions/{question['id']}",
            json={"title": "How do I center a div vertically?", "reason": "Clarify"},
            headers=bearer(owner_token),
        )

        # Assert
        assert forbidden.status_code == 403
        assert edited.status_code == 200
        body = edited.json()["question"]
        assert body["title"] == "How do I center a div vertically?"
        assert body["isEdited"] is True
        assert body["editHistory"][0]["previousContent"]["title"] == (
            "How do I center a div?"
        )

    def test_delete_hides_question(self, client):
        """Deleted questions should disappear from reads and listings."""
        # Arrange
        _, token = register(client, "asker")
        question = ask_question(client, token)

        # Act
        deleted = client.delete(f"/questions/{question['id']}", headers=bearer(token))
        read = client.get(f"/questions/{question['id']}")
        listing = client.get("/questions")

        # Assert
        assert deleted.json()["message"] == "Question deleted successfully"
        assert read.status_code == 404
        assert listing.json()["questions"] == []

    def test_list_filters_by_tag(self, client):
        """The tag filter and popular tags should reflect live questions."""
        # Arrange
        _, token = register(client, "asker")
        ask_question(client, token, tags=["python"])
        ask_question(client, token, title="Flexbox gap is not working", tags=["css"])
        ask_question(client, token, title="Grid template areas are ignored")

        # Act
        listing = client.get("/questions", params={"tag": "css", "limit": 1})
        tags = client.get("/questions/tags/popular")

        # Assert
        body = listing.json()
        assert len(body["questions"]) == 1
        assert body["pagination"]["totalQuestions"] == 2
        assert body["pagination"]["hasNextPage"] is True
        assert tags.json()[0] == {"tag": "css", "count": 2}

    def test_guest_and_stale_token_reads(self, client):
        """Public reads work without a token and with an unusable one."""
        # Arrange
        _, token = register(client, "asker")
        question = ask_question(client, token)

        # Act
        listing = client.get("/questions")
        detail = client.get(f"/questions/{question['id']}")
        comments = client.get(f"/questions/{question['id']}/comments")
        stale = client.get("/questions", headers=bearer("not-a-token"))

        # Assert
        assert listing.status_code == 200
        assert listing.json()["questions"][0]["id"] == question["id"]
        assert detail.status_code == 200
        assert detail.json()["userVote"] is None
        assert comments.status_code == 200
        assert stale.status_code == 200


class TestAnswerAndVoteEndpoints:
    """End-to-end tests for answers, acceptance and voting."""

    def test_vote_on_question(self, client):
        """Voting should update the ledger and switch direction."""
        # Arrange
        _, asker_token = register(client, "asker")
        _, voter_token = register(client, "voter")
        question = ask_question(client, asker_token)
        url = f"/questions/{question['id']}/vote"

        # Act
        upvote = client.post(
            url, json={"voteType": "upvote"}, headers=bearer(voter_token)
        )
        downvote = client.post(
            url, json={"voteType": "downvote"}, headers=bearer(voter_token)
        )
        read = client.get(
            f"/questions/{question['id']}", headers=bearer(voter_token)
        )

        # Assert
        assert upvote.json()["voteCount"] == 1
        assert upvote.json()["userVote"] == "up"
        assert downvote.json()["voteCount"] == -1
        assert downvote.json()["upvotes"] == 0
        assert read.json()["userVote"] == "down"

    def test_invalid_vote_type(self, client):
        """Unknown vote types should be a validation error."""
        # Arrange
        _, token = register(client, "asker")
        question = ask_question(client, token)

        # Act
        response = client.post(
            f"/questions/{question['id']}/vote",
            json={"voteType": "sideways"},
            headers=bearer(token),
        )

        # Assert
        assert response.status_code == 400

    def test_accept_flow(self, client):
        """Only the asker accepts, and acceptance can be withdrawn."""
        # Arrange
        _, asker_token = register(client, "asker")
        _, answerer_token = register(client, "answerer")
        question = ask_question(client, asker_token)
        answer = post_answer(client, answerer_token, question["id"])

        # Act
        by_answerer = client.post(
            f"/answers/{answer['id']}/accept", headers=bearer(answerer_token)
        )
        accepted = client.post(
            f"/answers/{answer['id']}/accept", headers=bearer(asker_token)
        )
        read = client.get(f"/questions/{question['id']}")
        unaccepted = client.post(
            f"/answers/{answer['id']}/unaccept", headers=bearer(asker_token)
        )

        # Assert
        assert by_answerer.status_code == 403
        assert accepted.status_code == 200
        assert accepted.json()["isAnswered"] is True
        assert accepted.json()["acceptedAnswerId"] == answer["id"]
        assert read.json()["answers"][0]["isAccepted"] is True
        assert unaccepted.json()["isAnswered"] is False
        assert unaccepted.json()["acceptedAnswerId"] is None

    def test_unaccept_wrong_answer_rejected(self, client):
        """Unaccepting an answer that is not accepted changes nothing."""
        # Arrange
        _, asker_token = register(client, "asker")
        _, first_token = register(client, "first")
        _, second_token = register(client, "second")
        question = ask_question(client, asker_token)
        first = post_answer(client, first_token, question["id"])
        second = post_answer(client, second_token, question["id"])
        client.post(f"/answers/{first['id']}/accept", headers=bearer(asker_token))

        # Act
        response = client.post(
            f"/answers/{second['id']}/unaccept", headers=bearer(asker_token)
        )
        read = client.get(f"/questions/{question['id']}")

        # Assert
        assert response.status_code == 400
        body = read.json()
        assert body["isAnswered"] is True
        assert body["acceptedAnswerId"] == first["id"]
        accepted = {a["id"]: a["isAccepted"] for a in body["answers"]}
        assert accepted == {first["id"]: True, second["id"]: False}

    def test_second_answer_by_same_user_rejected(self, client):
        """A user may hold only one live answer per question."""
        # Arrange
        _, asker_token = register(client, "asker")
        _, answerer_token = register(client, "answerer")
        question = ask_question(client, asker_token)
        post_answer(client, answerer_token, question["id"])

        # Act
        response = client.post(
            "/answers",
            json={
                "questionId": question["id"],
                "content": "A second attempt at answering the same question.",
            },
            headers=bearer(answerer_token),
        )

        # Assert
        assert response.status_code == 400


class TestCommentEndpoints:
    """End-to-end tests for comments."""

    def test_comment_thread(self, client):
        """Comments and replies should be listed oldest first."""
        # Arrange
        _, asker_token = register(client, "asker")
        _, commenter_token = register(client, "commenter")
        question = ask_question(client, asker_token)

        # Act
        first = client.post(
            "/comments",
            json={
                "content": "Which browser are you testing with?",
                "questionId": question["id"],
            },
            headers=bearer(commenter_token),
        )
        reply = client.post(
            "/comments",
            json={
                "content": "Firefox and Chrome, both latest.",
                "questionId": question["id"],
                "parentCommentId": first.json()["comment"]["id"],
            },
            headers=bearer(asker_token),
        )
        listing = client.get(f"/questions/{question['id']}/comments")

        # Assert
        assert first.status_code == 201
        assert reply.status_code == 201
        comments = listing.json()
        assert [c["id"] for c in comments] == [
            first.json()["comment"]["id"],
            reply.json()["comment"]["id"],
        ]
        assert comments[1]["parentCommentId"] == comments[0]["id"]

    def test_comment_needs_single_target(self, client):
        """Comments on both a question and an answer should be rejected."""
        # Arrange
        _, asker_token = register(client, "asker")
        _, answerer_token = register(client, "answerer")
        question = ask_question(client, asker_token)
        answer = post_answer(client, answerer_token, question["id"])

        # Act
        response = client.post(
            "/comments",
            json={
                "content": "Which browser are you testing with?",
                "questionId": question["id"],
                "answerId": answer["id"],
            },
            headers=bearer(asker_token),
        )

        # Assert
        assert response.status_code == 400
