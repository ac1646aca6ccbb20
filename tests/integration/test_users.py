from tests.integration.conftest import bearer


def test_users_routes_are_admin_only(client, publisher_token):
    assert client.get("/api/v1/users").status_code == 401
    assert client.get("/api/v1/users", headers=bearer(publisher_token)).status_code == 403


def test_admin_lists_users_without_password(client, admin_token, user_token):
    body = client.get("/api/v1/users?sort=email", headers=bearer(admin_token)).json()
    assert body["count"] == 2
    assert [u["email"] for u in body["data"]] == ["admin@devcamper.io", "student@devcamper.io"]
    assert all("password_hash" not in u for u in body["data"])


def test_password_hash_cannot_be_selected(client, admin_token):
    response = client.get("/api/v1/users?select=password_hash", headers=bearer(admin_token))
    assert response.status_code == 400


def test_admin_user_lifecycle(client, admin_token):
    headers = bearer(admin_token)
    created = client.post(
        "/api/v1/users",
        json={"name": "Pat", "email": "pat@devcamper.io", "password": "secret123", "role": "publisher"},
        headers=headers,
    )
    assert created.status_code == 201
    user_id = created.json()["data"]["id"]

    updated = client.put(f"/api/v1/users/{user_id}", json={"role": "user"}, headers=headers)
    assert updated.json()["data"]["role"] == "user"

    assert client.delete(f"/api/v1/users/{user_id}", headers=headers).status_code == 200
    missing = client.get(f"/api/v1/users/{user_id}", headers=headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == f"User not found with id of {user_id}"
