# =============================================================================
# tests/test_users.py - User Endpoint and View Tests
# =============================================================================
# Tests for the /api user JSON endpoints and the HTML views.
# =============================================================================

EXPECTED_USER = {"name": "Jose", "lastname": "Carrillo", "email": None}


class TestUserApi:
    """Tests for /api/details, /api/details-map and /api/list."""

    def test_details(self, client):
        """Test the UserDto shape."""
        response = client.get("/api/details")

        assert response.status_code == 200
        assert response.json() == {"title": "Hola Mundo Cruel", "user": EXPECTED_USER}

    def test_details_map_matches_details(self, client):
        """Test the untyped map has the same content as the DTO."""
        dto = client.get("/api/details").json()
        mapping = client.get("/api/details-map").json()

        assert mapping == dto

    def test_list_order(self, client):
        """Test exactly three users in fixed order."""
        response = client.get("/api/list")

        assert response.status_code == 200
        users = response.json()
        assert len(users) == 3
        assert [(u["name"], u["lastname"]) for u in users] == [
            ("Jose", "Carrillo"),
            ("Manolo", "Jimenez"),
            ("Maria", "Cabello"),
        ]

    def test_list_is_stable(self, client):
        """Test repeated calls return the same list."""
        assert client.get("/api/list").json() == client.get("/api/list").json()


class TestViews:
    """Tests for the server-rendered /details and /list pages."""

    def test_details_page(self, client):
        """Test the details page shows title and user."""
        response = client.get("/details")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<title>Hola Mundo Cruel</title>" in response.text
        assert "Jose" in response.text
        assert "Carrillo" in response.text
        assert "sin email" in response.text

    def test_list_page(self, client):
        """Test the list page renders the shared users."""
        response = client.get("/list")

        assert response.status_code == 200
        assert "<title>Hola mundo cruel</title>" in response.text
        for name in ("Jose", "Manuel", "Paco"):
            assert name in response.text
        assert "carrillo@email.com" in response.text

    def test_list_page_without_users(self, client):
        """Test the empty message when no users are injected."""
        from app.dependencies import users_model
        from app.main import app

        app.dependency_overrides[users_model] = lambda: []
        try:
            response = client.get("/list")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200
        assert "No hay usuarios en la lista" in response.text
