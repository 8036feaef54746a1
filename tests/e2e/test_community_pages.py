"""End-to-end tests for communities, tags and profiles."""


class TestCommunities:
    """Community pages and listings."""

    def test_tag_resolves_to_placeholder_community(self, client, signup, ask):
        """A tag in use has a community page even without a record."""
        # Arrange
        headers, _ = signup("asker")
        ask(headers, tags=["rust"])

        # Act
        response = client.get("/communities/rust")

        # Assert
        assert response.status_code == 200
        assert response.json()["community"]["kind"] == "synthesized"
        assert response.json()["community"]["post_count"] == 1

    def test_unknown_community_is_not_found(self, client):
        """No record and no questions means 404."""
        assert client.get("/communities/cobol").status_code == 404

    def test_create_update_join(self, client, signup):
        """Creators can edit their community and anyone can join."""
        # Arrange
        creator_headers, _ = signup("creator")
        member_headers, _ = signup("member")

        # Act
        created = client.post(
            "/communities",
            json={"name": "elixir", "description": "BEAM languages"},
            headers=creator_headers,
        )
        duplicate = client.post(
            "/communities", json={"name": "elixir"}, headers=member_headers
        )
        forbidden = client.put(
            "/communities/elixir", json={"description": "Mine now"}, headers=member_headers
        )
        updated = client.put(
            "/communities/elixir",
            json={"display_name": "Elixir & Erlang"},
            headers=creator_headers,
        )
        joined = client.post("/communities/elixir/join", headers=member_headers)

        # Assert
        assert created.status_code == 201
        assert duplicate.status_code == 409
        assert forbidden.status_code == 403
        assert updated.json()["display_name"] == "Elixir & Erlang"
        assert updated.json()["description"] == "BEAM languages"
        assert joined.json()["member_count"] == 1

    def test_popular_merges_tags_and_records(self, client, signup, ask):
        """Popular communities include tag placeholders ranked by posts."""
        # Arrange
        headers, _ = signup("asker")
        client.post("/communities", json={"name": "go"}, headers=headers)
        ask(headers, tags=["rust"])
        ask(headers, tags=["rust"])
        ask(headers, tags=["go"])

        # Act
        response = client.get("/communities/popular")

        # Assert
        assert [(c["name"], c["kind"]) for c in response.json()["communities"]] == [
            ("rust", "synthesized"),
            ("go", "stored"),
        ]


class TestTagsAndProfiles:
    """Popular tags and public profiles."""

    def test_popular_tags(self, client, signup, ask):
        """Tags are counted across questions."""
        # Arrange
        headers, _ = signup("asker")
        ask(headers, tags=["Python", "async"])
        ask(headers, tags=["python"])

        # Act
        response = client.get("/tags/popular", params={"limit": 5})

        # Assert
        assert response.json()["tags"] == [
            {"name": "python", "count": 2},
            {"name": "async", "count": 1},
        ]

    def test_invalid_tag_is_bad_request(self, client, signup):
        """Tags with whitespace are rejected."""
        headers, _ = signup("asker")

        response = client.post(
            "/questions",
            json={"title": "Hi", "body": "Body", "tags": ["two words"]},
            headers=headers,
        )

        assert response.status_code == 400

    def test_profile_hides_email(self, client, signup, ask):
        """Public profiles show activity but not the email address."""
        # Arrange
        headers, _ = signup("grace")
        ask(headers)
        client.put("/users/profile", json={"bio": "Compilers"}, headers=headers)

        # Act
        response = client.get("/users/grace")
        questions = client.get("/users/grace/questions")

        # Assert
        assert response.status_code == 200
        assert response.json()["bio"] == "Compilers"
        assert response.json()["question_count"] == 1
        assert "email" not in response.json()
        assert questions.json()["total"] == 1

    def test_unknown_profile_is_not_found(self, client):
        assert client.get("/users/nobody").status_code == 404
