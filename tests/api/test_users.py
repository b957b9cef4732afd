"""
Tests for user API endpoints.
"""

from decimal import Decimal


def register(client, email="a@b.com", password="secret"):
    return client.post("/users", json={
        "name": "Ana",
        "email": email,
        "password": password,
    })


class TestRegisterUser:

    def test_register_returns_201(self, client):
        assert register(client).status_code == 201

    def test_response_hides_password(self, client):
        data = register(client).json()

        assert data["email"] == "a@b.com"
        assert "password" not in data

    def test_duplicate_email_returns_400(self, client):
        register(client)
        response = register(client)

        assert response.status_code == 400
        assert response.json()["detail"] == (
            "Já existe um usuário cadastrado com esse email."
        )


class TestAuthenticate:

    def test_valid_credentials(self, client):
        user_id = register(client).json()["id"]

        response = client.post("/users/authenticate", json={
            "email": "a@b.com", "password": "secret",
        })

        assert response.status_code == 200
        assert response.json()["id"] == user_id

    def test_wrong_password_returns_401(self, client):
        register(client)

        response = client.post("/users/authenticate", json={
            "email": "a@b.com", "password": "wrong",
        })

        assert response.status_code == 401
        assert response.json()["detail"] == "Senha inválida."

    def test_unknown_email_returns_401(self, client):
        response = client.post("/users/authenticate", json={
            "email": "nobody@b.com", "password": "secret",
        })

        assert response.status_code == 401
        assert response.json()["detail"] == (
            "Usuário não encontrado para o email informado."
        )


class TestGetUser:

    def test_get_user(self, client):
        user_id = register(client).json()["id"]
        assert client.get(f"/users/{user_id}").json()["email"] == "a@b.com"

    def test_unknown_user_returns_404(self, client):
        assert client.get("/users/999").status_code == 404


class TestBalance:

    def test_balance_counts_settled_entries(self, client):
        user_id = register(client).json()["id"]
        entry = {
            "description": "salary", "month": 1, "year": 2024,
            "user_id": user_id, "entry_type": "INCOME",
        }
        client.post("/entries", json={**entry, "value": 500, "status": "SETTLED"})
        client.post("/entries", json={
            **entry, "value": 200, "entry_type": "EXPENSE", "status": "SETTLED",
        })
        client.post("/entries", json={**entry, "value": 1000})

        response = client.get(f"/users/{user_id}/balance")

        assert response.status_code == 200
        assert Decimal(response.json()["balance"]) == Decimal("300")

    def test_unknown_user_returns_404(self, client):
        assert client.get("/users/999/balance").status_code == 404
