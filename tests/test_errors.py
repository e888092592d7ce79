import logging

from sqlalchemy import text


class TestErrorResponses:
    def test_store_failure_on_listing(self, client, session):
        """Store errors come back as 500 with the driver message"""
        client.post("/api/posts", json={"text": "hi"})
        session.execute(text("DROP TABLE reactions"))
        session.commit()

        response = client.get("/api/posts")
        assert response.status_code == 500
        assert response.json() == {"error": "no such table: reactions"}

    def test_store_failure_on_replies(self, client, session):
        session.execute(text("DROP TABLE replies"))
        session.commit()

        response = client.get("/api/posts/1/replies")
        assert response.status_code == 500
        assert response.json() == {"error": "no such table: replies"}

    def test_unknown_route(self, client):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_method_not_allowed(self, client):
        response = client.patch("/api/posts")
        assert response.status_code == 405
        assert "error" in response.json()

    def test_non_integer_post_id_is_not_found(self, client):
        """An id that is not an integer matches no post"""
        for method, url in (
            ("DELETE", "/api/posts/abc"),
            ("POST", "/api/posts/abc/like"),
            ("POST", "/api/posts/abc/repost"),
        ):
            response = client.request(method, url)
            assert response.status_code == 404
            assert response.json() == {"error": "Not found"}

        response = client.put("/api/posts/abc", json={"text": "edited"})
        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}

    def test_client_errors_are_not_logged_as_errors(self, client, caplog):
        with caplog.at_level(logging.DEBUG, logger="fastapi"):
            response = client.post("/api/posts", json={"text": "   "})
            client.post("/api/posts/999/like")
        assert response.status_code == 400
        assert not [record for record in caplog.records if record.levelno >= logging.ERROR]

    def test_store_failure_is_logged_once(self, client, session, caplog):
        session.execute(text("DROP TABLE replies"))
        session.commit()

        with caplog.at_level(logging.INFO, logger="fastapi"):
            response = client.get("/api/posts/1/replies")
        assert response.status_code == 500
        errors = [record for record in caplog.records if record.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert "no such table: replies" in errors[0].getMessage()
