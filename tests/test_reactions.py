import pytest

from app.models.reaction import Reaction


class TestPostReactions:
    def test_react_to_post(self, client, test_post):
        """React once"""
        response = client.post(f"/api/posts/{test_post['id']}/react", json={"type": "love"})
        assert response.status_code == 200
        assert response.json() == {"reactions": {"love": 1}}

    def test_same_reaction_twice(self, client, test_post):
        """Reactions accumulate, they do not toggle"""
        client.post(f"/api/posts/{test_post['id']}/react", json={"type": "love"})
        response = client.post(f"/api/posts/{test_post['id']}/react", json={"type": "love"})
        assert response.status_code == 200
        assert response.json() == {"reactions": {"love": 2}}

    def test_breakdown_by_type(self, client, test_post):
        for reaction_type in ("haha", "fire", "haha"):
            response = client.post(f"/api/posts/{test_post['id']}/react", json={"type": reaction_type})
        assert response.json() == {"reactions": {"haha": 2, "fire": 1}}

    def test_breakdown_is_scoped_to_post(self, client, test_post):
        other = client.post("/api/posts", json={"text": "other"}).json()
        client.post(f"/api/posts/{other['id']}/react", json={"type": "angry"})

        response = client.post(f"/api/posts/{test_post['id']}/react", json={"type": "sad"})
        assert response.json() == {"reactions": {"sad": 1}}

    @pytest.mark.parametrize("reaction_type", ["love", "haha", "sad", "angry", "fire"])
    def test_every_reaction_type(self, client, test_post, reaction_type):
        response = client.post(f"/api/posts/{test_post['id']}/react", json={"type": reaction_type})
        assert response.status_code == 200
        assert response.json()["reactions"] == {reaction_type: 1}


class TestReactionValidation:
    @pytest.mark.parametrize("body", [{"type": "like"}, {"type": "LOVE"}, {"type": None}, {}])
    def test_invalid_reaction_type(self, client, session, test_post, body):
        """Unknown reaction types are rejected and nothing is stored"""
        response = client.post(f"/api/posts/{test_post['id']}/react", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid reaction"}
        assert session.query(Reaction).count() == 0

    def test_react_to_unknown_post_is_accepted(self, client):
        """The post id is not checked"""
        response = client.post("/api/posts/999/react", json={"type": "fire"})
        assert response.status_code == 200
        assert response.json() == {"reactions": {"fire": 1}}

    def test_non_integer_post_id(self, client):
        response = client.post("/api/posts/abc/react", json={"type": "fire"})
        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}
