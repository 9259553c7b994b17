from jose import jwt


class TestSignupView:

    def test_signup(self, client):
        resp = client.post("/api/auth/signup", json={"username": "alice", "password": "pw"})
        assert resp.status_code == 201
        assert resp.json() == {"message": "User registered"}

    def test_signup_duplicate(self, client):
        client.post("/api/auth/signup", json={"username": "alice", "password": "pw"})
        resp = client.post("/api/auth/signup", json={"username": "alice", "password": "other"})
        assert resp.status_code == 400
        assert "message" in resp.json()

    def test_signup_missing_password(self, client):
        resp = client.post("/api/auth/signup", json={"username": "alice"})
        assert resp.status_code == 400
        assert "password" in resp.json()["message"]

    def test_signup_blank_username(self, client):
        resp = client.post("/api/auth/signup", json={"username": "   ", "password": "pw"})
        assert resp.status_code == 400

    def test_signup_strips_username(self, client):
        assert client.post("/api/auth/signup", json={"username": " alice ", "password": "pw"}).status_code == 201
        assert client.post("/api/auth/login", json={"username": "alice", "password": "pw"}).status_code == 200

    def test_signup_multibyte_password_too_long(self, client):
        resp = client.post("/api/auth/signup", json={"username": "zoe", "password": "é" * 40})
        assert resp.status_code == 400
        assert "72 bytes" in resp.json()["message"]

    def test_signup_bad_role(self, client):
        resp = client.post("/api/auth/signup", json={"username": "alice", "password": "pw", "role": "root"})
        assert resp.status_code == 400


class TestLoginView:

    def test_login(self, client, settings):
        client.post("/api/auth/signup", json={"username": "boss", "password": "pw", "role": "admin"})
        resp = client.post("/api/auth/login", json={"username": "boss", "password": "pw"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["user"] == {"username": "boss", "role": "admin"}

        claims = jwt.decode(body["token"], settings.JWT_SECRET_KEY, algorithms=["HS256"], options={"verify_exp": False})
        assert claims["role"] == "admin"
        assert isinstance(claims["id"], int)

    def test_login_failures_look_the_same(self, client):
        client.post("/api/auth/signup", json={"username": "alice", "password": "pw"})
        wrong_password = client.post("/api/auth/login", json={"username": "alice", "password": "bad"})
        unknown_user = client.post("/api/auth/login", json={"username": "nobody", "password": "pw"})

        assert wrong_password.status_code == unknown_user.status_code == 401
        assert wrong_password.json() == unknown_user.json() == {"message": "Invalid credentials"}


class TestSettingsView:

    def test_requires_token(self, client):
        resp = client.put("/api/auth/settings", json={"password": "new"})
        assert resp.status_code == 401
        assert resp.json() == {"message": "Unauthorized"}

    def test_rotate_password(self, client):
        client.post("/api/auth/signup", json={"username": "alice", "password": "pw"})
        token = client.post("/api/auth/login", json={"username": "alice", "password": "pw"}).json()["token"]

        resp = client.put(
            "/api/auth/settings", json={"password": "new-pw"}, headers={"Authorization": f"Bearer {token}"}
        )
        assert resp.status_code == 200
        assert resp.json() == {"message": "Settings updated.", "user": {"username": "alice", "role": "user"}}

        assert client.post("/api/auth/login", json={"username": "alice", "password": "pw"}).status_code == 401
        assert client.post("/api/auth/login", json={"username": "alice", "password": "new-pw"}).status_code == 200

    def test_empty_body_is_noop(self, client, auth_headers):
        resp = client.put("/api/auth/settings", json={}, headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["message"] == "Settings updated."

    def test_empty_password_is_noop(self, client):
        client.post("/api/auth/signup", json={"username": "alice", "password": "pw"})
        token = client.post("/api/auth/login", json={"username": "alice", "password": "pw"}).json()["token"]

        resp = client.put("/api/auth/settings", json={"password": ""}, headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 200
        assert client.post("/api/auth/login", json={"username": "alice", "password": "pw"}).status_code == 200

    def test_multibyte_password_too_long(self, client, auth_headers):
        resp = client.put("/api/auth/settings", json={"password": "é" * 40}, headers=auth_headers)
        assert resp.status_code == 400
        assert "72 bytes" in resp.json()["message"]
