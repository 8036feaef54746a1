"""End-to-end tests for voting and reputation."""

import pytest


class TestQuestionVoting:
    """Voting on questions through the API."""

    def test_upvote_awards_author(self, client, signup, ask):
        """An upvote raises the count and the author's reputation."""
        # Arrange
        author_headers, _ = signup("asker")
        voter_headers, _ = signup("voter")
        question_id = ask(author_headers)

        # Act
        response = client.post(
            f"/questions/{question_id}/vote", json={"value": 1}, headers=voter_headers
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["action"] == "cast"
        assert response.json()["vote_count"] == 1
        assert client.get("/users/asker").json()["reputation"] == 10

    def test_repeat_vote_withdraws(self, client, signup, ask):
        """Sending the same vote twice removes it."""
        # Arrange
        author_headers, _ = signup("asker")
        voter_headers, _ = signup("voter")
        question_id = ask(author_headers)
        client.post(
            f"/questions/{question_id}/vote", json={"value": -1}, headers=voter_headers
        )

        # Act
        response = client.post(
            f"/questions/{question_id}/vote", json={"value": -1}, headers=voter_headers
        )

        # Assert
        assert response.json()["action"] == "removed"
        assert response.json()["vote_count"] == 0
        assert response.json()["my_vote"] is None

    def test_viewer_sees_own_vote(self, client, signup, ask):
        """Question detail includes the caller's vote."""
        # Arrange
        author_headers, _ = signup("asker")
        voter_headers, _ = signup("voter")
        question_id = ask(author_headers)
        client.post(
            f"/questions/{question_id}/vote", json={"value": 1}, headers=voter_headers
        )

        # Act
        response = client.get(f"/questions/{question_id}", headers=voter_headers)

        # Assert
        assert response.json()["my_vote"] == 1
        assert response.json()["question"]["vote_count"] == 1

    def test_float_vote_value_counts(self, client, signup, ask):
        """A JSON 1.0 is an upvote like 1."""
        # Arrange
        author_headers, _ = signup("asker")
        voter_headers, _ = signup("voter")
        question_id = ask(author_headers)

        # Act
        response = client.post(
            f"/questions/{question_id}/vote", json={"value": 1.0}, headers=voter_headers
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["action"] == "cast"
        assert response.json()["my_vote"] == 1

    @pytest.mark.parametrize("value", [2, 0, -5, True, 1.5, "1", None])
    def test_invalid_vote_value_is_bad_request(self, client, signup, ask, value):
        """Only 1 and -1 are accepted as vote values."""
        # Arrange
        author_headers, _ = signup("asker")
        voter_headers, _ = signup("voter")
        question_id = ask(author_headers)

        # Act
        response = client.post(
            f"/questions/{question_id}/vote", json={"value": value}, headers=voter_headers
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["type"] == "InvalidVoteValueError"

    def test_missing_value_is_unprocessable(self, client, signup, ask):
        """A body without a value fails request validation."""
        # Arrange
        author_headers, _ = signup("asker")
        question_id = ask(author_headers)

        # Act
        response = client.post(
            f"/questions/{question_id}/vote", json={}, headers=author_headers
        )

        # Assert
        assert response.status_code == 422

    def test_vote_requires_authentication(self, client, signup, ask):
        """Anonymous votes return 401."""
        # Arrange
        author_headers, _ = signup("asker")
        question_id = ask(author_headers)

        # Act
        response = client.post(f"/questions/{question_id}/vote", json={"value": 1})

        # Assert
        assert response.status_code == 401

    def test_vote_on_unknown_question_is_not_found(self, client, signup):
        """Voting on a question that does not exist returns 404."""
        # Arrange
        voter_headers, _ = signup("voter")

        # Act
        response = client.post(
            "/questions/00000000-0000-0000-0000-000000000000/vote",
            json={"value": 1},
            headers=voter_headers,
        )

        # Assert
        assert response.status_code == 404

    def test_self_vote_counts_without_reputation(self, client, signup, ask):
        """Authors may vote on their own question without earning reputation."""
        # Arrange
        author_headers, _ = signup("asker")
        question_id = ask(author_headers)

        # Act
        response = client.post(
            f"/questions/{question_id}/vote", json={"value": 1}, headers=author_headers
        )

        # Assert
        assert response.json()["vote_count"] == 1
        assert client.get("/users/asker").json()["reputation"] == 0
