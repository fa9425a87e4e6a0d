import re

from sqlalchemy import text

from users_api.security.passwords import verify_password

ANN = {"name": "Ann", "email": "ann@x.com", "phone_number": "555", "password": "secret"}


def _create(client, body=ANN):
    return client.post("/users", json=body)


def test_create_user_returns_public_fields(client):
    resp = _create(client)
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["id"] == 1
    assert re.fullmatch(r"\d{14}", body["code"])
    assert {k: body[k] for k in ("name", "email", "phone_number")} == {
        "name": "Ann",
        "email": "ann@x.com",
        "phone_number": "555",
    }
    assert set(body) == {"id", "code", "name", "email", "phone_number"}


def test_create_then_list_shows_user_without_password(client):
    created = _create(client).get_json()
    resp = client.get("/users")
    assert resp.status_code == 200
    users = resp.get_json()
    assert len(users) == 1
    user = users[0]
    assert user["id"] == created["id"]
    assert user["code"] == created["code"]
    assert (user["name"], user["email"], user["phone_number"]) == ("Ann", "ann@x.com", "555")
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", user["created_at"])
    assert "password" not in user


def test_stored_password_is_a_digest(client, engine):
    _create(client)
    with engine.connect() as conn:
        digest = conn.execute(text("SELECT password FROM users WHERE id = 1")).scalar_one()
    assert digest != "secret"
    assert verify_password("secret", digest)


def test_same_password_twice_stores_different_digests(client, engine):
    _create(client)
    _create(client, {**ANN, "name": "Bob"})
    with engine.connect() as conn:
        digests = conn.execute(text("SELECT password FROM users ORDER BY id")).scalars().all()
    assert len(digests) == 2
    assert digests[0] != digests[1]


def test_list_on_empty_table_is_empty_array(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_ids_increase_and_list_is_ordered(client):
    for name in ("a", "b", "c"):
        _create(client, {**ANN, "name": name})
    users = client.get("/users").get_json()
    assert [u["id"] for u in users] == [1, 2, 3]
    assert [u["name"] for u in users] == ["a", "b", "c"]


def test_missing_fields_bind_to_empty_strings(client):
    resp = client.post("/users", json={})
    assert resp.status_code == 201
    body = resp.get_json()
    assert (body["name"], body["email"], body["phone_number"]) == ("", "", "")


def test_null_fields_bind_to_empty_strings(client):
    resp = client.post(
        "/users",
        json={"name": None, "email": "a@b.c", "phone_number": None, "password": None},
    )
    assert resp.status_code == 201
    body = resp.get_json()
    assert (body["name"], body["email"], body["phone_number"]) == ("", "a@b.c", "")


def test_client_supplied_id_code_and_created_at_are_ignored(client):
    resp = _create(client, {**ANN, "id": 99, "code": "x", "created_at": "yesterday"})
    body = resp.get_json()
    assert resp.status_code == 201
    assert body["id"] == 1
    assert body["code"] != "x"


def test_non_object_body_is_rejected_without_insert(client):
    resp = client.post("/users", json=["not", "an", "object"])
    assert resp.status_code == 400
    assert resp.get_json()["error"]
    assert client.get("/users").get_json() == []


def test_malformed_json_is_rejected(client):
    resp = client.post("/users", data="{not json", content_type="application/json")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_empty_body_is_rejected(client):
    resp = client.post("/users")
    assert resp.status_code == 400


def test_wrong_field_type_is_rejected(client):
    resp = client.post("/users", json={**ANN, "name": 42})
    assert resp.status_code == 400
    assert "name" in resp.get_json()["error"]


def test_hash_failure_returns_500_without_insert(client):
    resp = _create(client, {**ANN, "password": "p" * 73})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to hash password"}
    assert client.get("/users").get_json() == []


def test_store_failure_on_insert_passes_message_through(client, engine):
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE users"))
    resp = _create(client)
    assert resp.status_code == 500
    assert "users" in resp.get_json()["error"]


def test_store_failure_on_list_returns_500(client, engine):
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE users"))
    resp = client.get("/users")
    assert resp.status_code == 500
    assert "no such table" in resp.get_json()["error"]


def test_get_user_by_id(client):
    created = _create(client).get_json()
    resp = client.get(f"/users/{created['id']}")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["code"] == created["code"]
    assert body["created_at"]
    assert "password" not in body


def test_get_unknown_user_is_404(client):
    resp = client.get("/users/42")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "User not found"}


def test_unknown_route_and_method_use_error_shape(client):
    assert client.get("/nope").get_json()["error"]
    resp = client.delete("/users")
    assert resp.status_code == 405
    assert resp.get_json()["error"]
