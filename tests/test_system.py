"""
Tests for the system endpoints and the page route.
"""


class TestSystemEndpoints:

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_info(self, client, settings):
        data = client.get("/api/info").json()

        assert data == {"name": settings.APP_NAME, "version": settings.APP_VERSION, "engine": "sqlite"}


class TestPage:

    def test_serves_html(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"] == "text/html; charset=utf-8"
        assert "<title>Employee Directory</title>" in response.text
        assert "jspdf" in response.text

    def test_page_initializes_schema(self, app, client):
        client.get("/")

        assert app.state.store.list_all() == []
