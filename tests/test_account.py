from database import read_users, read_posts, write_users


def test_list_users_strips_passwords(client, register):
    register("alice", "pw1")
    register("bob", "pw2")

    res = client.get("/users")

    assert res.status_code == 200
    assert res.json() == [
        {"id": 1, "username": "alice", "email": "alice@example.com"},
        {"id": 2, "username": "bob", "email": "bob@example.com"},
    ]


def test_update_profile_email_and_password(client, register):
    register("alice", "pw1")

    res = client.put("/profile", json={
        "username": "alice", "password": "pw1", "email": "new@x.io", "newPassword": "pw9",
    })

    assert res.status_code == 200
    assert res.json() == {"id": 1, "username": "alice", "email": "new@x.io"}
    assert client.post("/login", json={"username": "alice", "password": "pw1"}).status_code == 401
    assert client.post("/login", json={"username": "alice", "password": "pw9"}).status_code == 200


def test_update_profile_only_email(client, register):
    register("alice", "pw1")

    res = client.put("/profile", json={"username": "alice", "password": "pw1", "email": "e@x.io"})

    assert res.status_code == 200
    assert read_users()[0]["password"] == "pw1"
    assert read_users()[0]["email"] == "e@x.io"


def test_update_profile_invalid_credentials(client, register):
    register("alice", "pw1")

    res = client.put("/profile", json={"username": "alice", "password": "no", "email": "e@x.io"})

    assert res.status_code == 401
    assert read_users()[0]["email"] == "alice@example.com"


def test_delete_account_cascades_to_own_posts_only(client, register, create_post):
    register("alice", "pw1")
    register("bob", "pw2")
    create_post("alice", "pw1")
    bobs = create_post("bob", "pw2")
    create_post("alice", "pw1")

    res = client.request("DELETE", "/account", json={"username": "alice", "password": "pw1"})

    assert res.status_code == 200
    assert [u["username"] for u in read_users()] == ["bob"]
    assert read_posts() == [bobs]


def test_delete_account_invalid_credentials(client, register):
    register("alice", "pw1")

    res = client.request("DELETE", "/account", json={"username": "alice", "password": "x"})

    assert res.status_code == 401
    assert len(read_users()) == 1


def test_end_to_end_scenario(client, register):
    res = client.post("/register", json={"username": "alice", "email": "a@x.io", "password": "pw1"})
    assert res.status_code == 201
    assert res.json()["id"] == 1

    res = client.post("/register", json={"username": "alice", "email": "b@x.io", "password": "other"})
    assert res.status_code == 400

    res = client.post("/login", json={"username": "alice", "password": "pw1"})
    assert res.status_code == 200
    assert res.json()["user"]["id"] == 1

    res = client.post("/posts", json={"username": "alice", "password": "pw1", "title": "T", "content": "C"})
    assert res.status_code == 201
    post = res.json()
    assert post["authorId"] == 1

    register("carol", "pw3")
    res = client.put(f"/posts/{post['id']}", json={
        "username": "carol", "password": "pw3", "title": "X", "content": "Y",
    })
    assert res.status_code == 403

    res = client.request("DELETE", "/account", json={"username": "alice", "password": "pw1"})
    assert res.status_code == 200
    assert all(p["id"] != post["id"] for p in read_posts())


def test_list_users_tolerates_incomplete_records(client):
    write_users([
        {"id": 1, "username": "alice", "password": "pw1"},
        {"id": 2, "email": "nobody@x.io", "password": "pw2"},
    ])

    res = client.get("/users")

    assert res.status_code == 200
    assert res.json() == [
        {"id": 1, "username": "alice"},
        {"id": 2, "email": "nobody@x.io"},
    ]
