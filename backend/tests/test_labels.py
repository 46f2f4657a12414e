from models.label_models import DEFAULT_CATEGORIES, DEFAULT_TAGS


def test_new_user_sees_default_categories(client, auth_headers):
    resp = client.get("/api/categories", headers=auth_headers)

    assert resp.status_code == 200
    names = [c["name"] for c in resp.get_json()["data"]["categories"]]
    assert names == sorted(DEFAULT_CATEGORIES)


def test_new_user_sees_default_tags(client, auth_headers):
    resp = client.get("/api/tags", headers=auth_headers)

    names = [t["name"] for t in resp.get_json()["data"]["tags"]]
    assert names == sorted(DEFAULT_TAGS)


def test_create_tag(client, auth_headers):
    resp = client.post("/api/tags", json={"name": "FOMO"}, headers=auth_headers)

    assert resp.status_code == 201
    assert resp.get_json()["data"]["tag"]["name"] == "FOMO"
    names = [t["name"] for t in client.get("/api/tags", headers=auth_headers).get_json()["data"]["tags"]]
    assert "FOMO" in names


def test_create_duplicate_category(client, auth_headers):
    resp = client.post("/api/categories", json={"name": "Travel"}, headers=auth_headers)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Category 'Travel' already exists"


def test_tag_name_required(client, auth_headers):
    resp = client.post("/api/tags", json={}, headers=auth_headers)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Please provide: name"


def test_labels_are_per_user(client, auth_headers, other_headers):
    client.post("/api/categories", json={"name": "Pets"}, headers=auth_headers)

    resp = client.get("/api/categories", headers=other_headers)

    assert "Pets" not in [c["name"] for c in resp.get_json()["data"]["categories"]]
    # same name is fine for a different user
    resp = client.post("/api/categories", json={"name": "Pets"}, headers=other_headers)
    assert resp.status_code == 201


def test_labels_require_token(client):
    assert client.get("/api/categories").status_code == 401
    assert client.post("/api/tags", json={"name": "x"}).status_code == 401
