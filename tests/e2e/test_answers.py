"""End-to-end tests for answers, acceptance and comments."""


def _answer(client, headers, question_id, body="Use items[::-1]"):
    response = client.post(
        f"/questions/{question_id}/answers", json={"body": body}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()["answer_id"]


class TestAcceptance:
    """Accepting answers through the API."""

    def test_accept_flow(self, client, signup, ask):
        """Only one answer stays accepted and each acceptance is awarded."""
        # Arrange
        asker_headers, _ = signup("asker")
        answerer_headers, _ = signup("answerer")
        question_id = ask(asker_headers)
        first = _answer(client, answerer_headers, question_id)
        second = _answer(client, answerer_headers, question_id, "Use reversed()")

        # Act
        client.post(f"/answers/{first}/accept", headers=asker_headers)
        response = client.post(f"/answers/{second}/accept", headers=asker_headers)

        # Assert
        assert response.status_code == 200
        assert response.json()["unaccepted_answer_ids"] == [first]
        detail = client.get(f"/questions/{question_id}").json()
        assert detail["question"]["is_answered"] is True
        assert detail["question"]["selected_answer_id"] == second
        assert [a["is_accepted"] for a in detail["answers"]] == [True, False]
        assert client.get("/users/answerer").json()["reputation"] == 30

    def test_non_author_cannot_accept(self, client, signup, ask):
        """Accepting on someone else's question returns 403."""
        # Arrange
        asker_headers, _ = signup("asker")
        answerer_headers, _ = signup("answerer")
        question_id = ask(asker_headers)
        answer_id = _answer(client, answerer_headers, question_id)

        # Act
        response = client.post(f"/answers/{answer_id}/accept", headers=answerer_headers)

        # Assert
        assert response.status_code == 403
        assert client.get("/users/answerer").json()["reputation"] == 0

    def test_answer_vote_awards_answerer(self, client, signup, ask):
        """Votes on answers go to the answer's author."""
        # Arrange
        asker_headers, _ = signup("asker")
        answerer_headers, _ = signup("answerer")
        question_id = ask(asker_headers)
        answer_id = _answer(client, answerer_headers, question_id)

        # Act
        response = client.post(
            f"/answers/{answer_id}/vote", json={"value": 1}, headers=asker_headers
        )

        # Assert
        assert response.json()["vote_count"] == 1
        assert client.get("/users/answerer").json()["reputation"] == 10

    def test_malformed_id_is_rejected(self, client, signup):
        """Path IDs must be UUIDs."""
        headers, _ = signup("asker")

        response = client.post("/answers/not-a-uuid/accept", headers=headers)

        assert response.status_code == 422


class TestComments:
    """Comments on answers."""

    def test_comment_roundtrip(self, client, signup, ask):
        """Posted comments are listed on the answer."""
        # Arrange
        headers, _ = signup("asker")
        question_id = ask(headers)
        answer_id = _answer(client, headers, question_id)

        # Act
        created = client.post(
            f"/answers/{answer_id}/comments", json={"body": "Works, thanks"}, headers=headers
        )
        listed = client.get(f"/answers/{answer_id}/comments")

        # Assert
        assert created.status_code == 201
        assert [c["body"] for c in listed.json()["comments"]] == ["Works, thanks"]


class TestDeletion:
    """Deleting questions and answers."""

    def test_only_author_deletes_question(self, client, signup, ask):
        """Other users get 403; the author can delete."""
        # Arrange
        asker_headers, _ = signup("asker")
        other_headers, _ = signup("other")
        question_id = ask(asker_headers)

        # Act
        forbidden = client.delete(f"/questions/{question_id}", headers=other_headers)
        deleted = client.delete(f"/questions/{question_id}", headers=asker_headers)

        # Assert
        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert client.get(f"/questions/{question_id}").status_code == 404
