"""
HTTP tests for the user endpoints:
- GET /create
- GET /auth
- GET /users
- GET /user/{username}
"""


def create_alice(client):
    return client.get("/create", params={"username": "alice", "email": "a@b.com", "pass": "secret"})


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "version" in response.json()


def test_create_user(client):
    response = create_alice(client)
    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "alice"
    assert data["email"] == "a@b.com"
    assert "id" in data
    assert "pass" not in data


def test_create_duplicate(client):
    create_alice(client)
    response = client.get("/create", params={"username": "bobby", "email": "a@b.com", "pass": "x"})
    assert response.status_code == 409
    assert response.text == ":: error adding user to db"


def test_create_invalid_email(client):
    response = client.get("/create", params={"username": "alice", "email": "nope", "pass": "x"})
    assert response.status_code == 400
    assert response.text == ":: error adding user to db"


def test_create_missing_param(client):
    response = client.get("/create", params={"username": "alice", "email": "a@b.com"})
    assert response.status_code == 422


def test_auth(client):
    created = create_alice(client).json()
    response = client.get("/auth", params={"username": "alice", "pass": "secret"})
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]
    assert "pass" not in response.json()


def test_auth_wrong_password(client):
    create_alice(client)
    response = client.get("/auth", params={"username": "alice", "pass": "wrong"})
    assert response.status_code == 401
    assert response.text == ":: pass does not match"


def test_auth_unknown_user(client):
    response = client.get("/auth", params={"username": "ghost", "pass": "x"})
    assert response.status_code == 404
    assert response.text == ":: user not found"


def test_list_users(client):
    create_alice(client)
    client.get("/create", params={"username": "bobby", "email": "bob@b.com", "pass": "x"})
    response = client.get("/users")
    assert response.status_code == 200
    users = response.json()
    assert sorted(u["username"] for u in users) == ["alice", "bobby"]
    assert all("pass" not in u for u in users)


def test_get_single_user(client):
    create_alice(client)
    response = client.get("/user/alice")
    assert response.status_code == 200
    assert response.json()["email"] == "a@b.com"


def test_get_missing_user(client):
    response = client.get("/user/ghost")
    assert response.status_code == 404


def test_list_users_with_legacy_document(client, collection):
    create_alice(client)
    collection.insert_one({"email": "old@b.com", "pass": "x", "dateCreated": "1", "dateUpdated": "1"})
    response = client.get("/users")
    assert response.status_code == 200
    assert sorted(u["email"] for u in response.json()) == ["a@b.com", "old@b.com"]
    assert all("pass" not in u for u in response.json())
