"""
Registro, login, update y delete de usuarios vía HTTP.
"""

import pytest

from photo_api.core.security import check_password


class TestRegister:
    def test_register_ok(self, client, register, fetch_users):
        r = register()
        assert r.status_code == 200
        assert r.json() == {"message": "User registered successfully"}

        users = fetch_users()
        assert len(users) == 1
        assert users[0].email == "ana@photos.io"
        assert users[0].username == "ana"

    def test_password_is_stored_hashed(self, register, fetch_users):
        register(password="secret123")
        stored = fetch_users()[0].password
        assert stored != "secret123"
        check_password(stored, "secret123")

    @pytest.mark.parametrize(
        "email, password, error",
        [
            ("not-an-email", "secret123", "Invalid email format"),
            ("ana@", "secret123", "Invalid email format"),
            ("ana@photos.io", "12345", "Password must be at least 6 characters long"),
            ("ana@photos.io", "", "Password must be at least 6 characters long"),
        ],
    )
    def test_validation_fails_without_write(
        self, register, fetch_users, email, password, error
    ):
        r = register(email=email, password=password)
        assert r.status_code == 400
        assert r.json() == {"error": error}
        assert fetch_users() == []

    def test_malformed_body(self, client, fetch_users):
        r = client.post(
            "/user/register",
            content="{bad json",
            headers={"Content-Type": "application/json"},
        )
        assert r.status_code == 400
        assert "error" in r.json()
        assert fetch_users() == []

    def test_missing_password_is_validation_error(self, client, fetch_users):
        r = client.post("/user/register", json={"email": "ana@photos.io"})
        assert r.status_code == 400
        assert r.json() == {"error": "Password must be at least 6 characters long"}
        assert fetch_users() == []

    def test_missing_username_is_accepted(self, client, fetch_users):
        r = client.post(
            "/user/register", json={"email": "ana@photos.io", "password": "secret123"}
        )
        assert r.status_code == 200
        assert fetch_users()[0].username == ""

    def test_wrong_type_is_malformed(self, client, fetch_users):
        r = client.post(
            "/user/register",
            json={"username": 5, "email": "ana@photos.io", "password": "secret123"},
        )
        assert r.status_code == 400
        assert fetch_users() == []

    def test_hash_failure(self, client, monkeypatch, fetch_users):
        def _boom(password):
            raise RuntimeError("argon2 backend unavailable")

        monkeypatch.setattr("photo_api.users.service.hash_password", _boom)
        r = client.post(
            "/user/register",
            json={"username": "ana", "email": "ana@photos.io", "password": "secret123"},
        )
        assert r.status_code == 500
        assert r.json() == {"error": "Failed to set password"}
        assert fetch_users() == []

    def test_duplicate_email_is_store_error(self, register, fetch_users):
        assert register().status_code == 200
        r = register(username="otra")
        assert r.status_code == 500
        assert r.json() == {"error": "Failed to register user"}
        assert len(fetch_users()) == 1


class TestLogin:
    def test_login_ok(self, client, register):
        register()
        r = client.post(
            "/user/login", json={"email": "ana@photos.io", "password": "secret123"}
        )
        assert r.status_code == 200
        assert r.json() == {"message": "Login successful"}

    def test_wrong_password(self, client, register):
        register()
        r = client.post(
            "/user/login", json={"email": "ana@photos.io", "password": "wrong-pass"}
        )
        assert r.status_code == 401
        assert r.json() == {"error": "Invalid password"}

    def test_unknown_email(self, client):
        r = client.post(
            "/user/login", json={"email": "ghost@photos.io", "password": "secret123"}
        )
        assert r.status_code == 401
        assert r.json() == {"error": "User not found"}

    def test_missing_password(self, client, register):
        register()
        r = client.post("/user/login", json={"email": "ana@photos.io"})
        assert r.status_code == 401
        assert r.json() == {"error": "Invalid password"}

    def test_missing_email(self, client, register):
        register()
        r = client.post("/user/login", json={"password": "secret123"})
        assert r.status_code == 401
        assert r.json() == {"error": "User not found"}

    def test_malformed_body(self, client):
        r = client.post("/user/login", json={"email": ["ana@photos.io"]})
        assert r.status_code == 400


class TestUpdateUser:
    def test_partial_update_keeps_other_fields(self, client, register, fetch_users):
        register()
        r = client.put("/user/1", json={"username": "ana.maria", "email": ""})
        assert r.status_code == 200
        assert r.json() == {"message": "User updated successfully"}

        user = fetch_users()[0]
        assert user.username == "ana.maria"
        assert user.email == "ana@photos.io"

    def test_password_update_is_hashed(self, client, register, fetch_users):
        register()
        r = client.put("/user/1", json={"password": "brand-new"})
        assert r.status_code == 200

        stored = fetch_users()[0].password
        assert stored != "brand-new"
        login = client.post(
            "/user/login", json={"email": "ana@photos.io", "password": "brand-new"}
        )
        assert login.status_code == 200

    def test_update_unknown_id_is_noop(self, client):
        r = client.put("/user/999", json={"username": "nadie"})
        assert r.status_code == 200

    def test_update_to_taken_email_fails(self, client, register):
        register()
        register(email="bea@photos.io", username="bea")
        r = client.put("/user/2", json={"email": "ana@photos.io"})
        assert r.status_code == 500
        assert r.json() == {"error": "Failed to update user"}

    def test_non_numeric_id(self, client):
        r = client.put("/user/abc", json={"username": "x"})
        assert r.status_code == 400

    def test_malformed_body(self, client):
        r = client.put(
            "/user/1", content="nope", headers={"Content-Type": "application/json"}
        )
        assert r.status_code == 400


class TestDeleteUser:
    def test_delete_is_soft(self, client, register, fetch_users):
        register()
        r = client.delete("/user/1")
        assert r.status_code == 200
        assert r.json() == {"message": "User deleted successfully"}

        users = fetch_users()
        assert len(users) == 1
        assert users[0].deleted_at is not None

    def test_delete_twice_is_idempotent(self, client, register):
        register()
        assert client.delete("/user/1").status_code == 200
        second = client.delete("/user/1")
        assert second.status_code == 200
        assert second.json() == {"message": "User deleted successfully"}

    def test_deleted_user_cannot_login(self, client, register):
        register()
        client.delete("/user/1")
        r = client.post(
            "/user/login", json={"email": "ana@photos.io", "password": "secret123"}
        )
        assert r.status_code == 401

    def test_deleted_user_is_not_updated(self, client, register, fetch_users):
        register()
        client.delete("/user/1")
        assert client.put("/user/1", json={"username": "zombie"}).status_code == 200
        assert fetch_users()[0].username == "ana"


class TestStoreFailures:
    def test_delete_user(self, client, register, drop_table):
        register()
        drop_table("users")
        r = client.delete("/user/1")
        assert r.status_code == 500
        assert r.json() == {"error": "Failed to delete user"}

    def test_update_user(self, client, register, drop_table):
        register()
        drop_table("users")
        r = client.put("/user/1", json={"username": "bea"})
        assert r.status_code == 500
        assert r.json() == {"error": "Failed to update user"}

    def test_register(self, register, drop_table):
        drop_table("users")
        r = register()
        assert r.status_code == 500
        assert r.json() == {"error": "Failed to register user"}
