from tests.integration.conftest import bearer, bootcamp_payload, register


def test_create_bootcamp(client, bootcamp):
    assert bootcamp["slug"] == "devworks-bootcamp"
    assert bootcamp["photo"] == "no-photo.jpg"
    assert bootcamp["careers"] == ["Web Development", "UI/UX"]


def test_get_and_list_are_public(client, bootcamp):
    response = client.get(f"/api/v1/bootcamps/{bootcamp['id']}")
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Devworks Bootcamp"

    listing = client.get("/api/v1/bootcamps").json()
    assert listing["count"] == 1
    assert listing["pagination"]["total"] == 1


def test_missing_bootcamp_returns_404(client):
    response = client.get("/api/v1/bootcamps/999")
    assert response.status_code == 404
    assert response.json()["message"] == "Bootcamp not found with id of 999"


def test_create_requires_authentication(client):
    response = client.post("/api/v1/bootcamps", json=bootcamp_payload())
    assert response.status_code == 401


def test_user_role_cannot_create(client, user_token):
    response = client.post("/api/v1/bootcamps", json=bootcamp_payload(), headers=bearer(user_token))
    assert response.status_code == 403


def test_publisher_limited_to_one_bootcamp(client, bootcamp, publisher_token):
    response = client.post(
        "/api/v1/bootcamps", json=bootcamp_payload(name="Second Camp"), headers=bearer(publisher_token)
    )
    assert response.status_code == 400
    assert "already published a bootcamp" in response.json()["message"]


def test_duplicate_name_is_rejected(client, bootcamp, admin_token):
    response = client.post("/api/v1/bootcamps", json=bootcamp_payload(), headers=bearer(admin_token))
    assert response.status_code == 400
    assert response.json()["message"] == "Duplicate field value entered"


def test_invalid_payload_is_rejected(client, publisher_token):
    response = client.post(
        "/api/v1/bootcamps",
        json=bootcamp_payload(website="not a url", careers=["Cooking"]),
        headers=bearer(publisher_token),
    )
    assert response.status_code == 400
    message = response.json()["message"]
    assert "website" in message
    assert "careers" in message


def test_description_html_is_escaped(client, publisher_token):
    response = client.post(
        "/api/v1/bootcamps",
        json=bootcamp_payload(description="<script>alert('x')</script>"),
        headers=bearer(publisher_token),
    )
    assert response.json()["data"]["description"] == "&lt;script>alert('x')&lt;/script>"


def test_owner_updates_bootcamp(client, bootcamp, publisher_token):
    response = client.put(
        f"/api/v1/bootcamps/{bootcamp['id']}",
        json={"name": "Devworks Academy", "average_cost": 12000},
        headers=bearer(publisher_token),
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["slug"] == "devworks-academy"
    assert data["average_cost"] == 12000
    assert data["housing"] is True


def test_update_rejects_null_for_required_fields(client, bootcamp, publisher_token):
    url = f"/api/v1/bootcamps/{bootcamp['id']}"
    response = client.put(url, json={"housing": None}, headers=bearer(publisher_token))
    assert response.status_code == 400
    assert "housing" in response.json()["message"]

    cleared = client.put(url, json={"website": None}, headers=bearer(publisher_token))
    assert cleared.status_code == 200
    assert cleared.json()["data"]["website"] is None
    assert cleared.json()["data"]["housing"] is True


def test_other_publisher_cannot_modify(client, bootcamp):
    other = register(client, "Other", "other@devcamper.io", role="publisher")
    update = client.put(f"/api/v1/bootcamps/{bootcamp['id']}", json={"name": "Mine"}, headers=bearer(other))
    delete = client.delete(f"/api/v1/bootcamps/{bootcamp['id']}", headers=bearer(other))
    assert update.status_code == 403
    assert delete.status_code == 403


def test_admin_can_delete_any_bootcamp(client, bootcamp, admin_token):
    response = client.delete(f"/api/v1/bootcamps/{bootcamp['id']}", headers=bearer(admin_token))
    assert response.status_code == 200
    assert client.get(f"/api/v1/bootcamps/{bootcamp['id']}").status_code == 404


def _seed(client, token):
    for name, cost in (("Alpha Camp", 1000), ("Beta Camp", 5000), ("Gamma Camp", 9000)):
        response = client.post(
            "/api/v1/bootcamps",
            json=bootcamp_payload(name=name, average_cost=cost, housing=cost > 3000),
            headers=bearer(token),
        )
        assert response.status_code == 201


def test_list_filters(client, admin_token):
    _seed(client, admin_token)

    assert client.get("/api/v1/bootcamps?average_cost[gte]=5000").json()["count"] == 2
    assert client.get("/api/v1/bootcamps?average_cost[lt]=5000").json()["count"] == 1
    assert client.get("/api/v1/bootcamps?housing=true").json()["count"] == 2
    assert client.get("/api/v1/bootcamps?name[in]=Alpha Camp,Gamma Camp").json()["count"] == 2
    assert client.get("/api/v1/bootcamps?unknown=1").json()["count"] == 3


def test_list_select_and_sort(client, admin_token):
    _seed(client, admin_token)

    data = client.get("/api/v1/bootcamps?select=name,average_cost&sort=-average_cost").json()["data"]
    assert [item["name"] for item in data] == ["Gamma Camp", "Beta Camp", "Alpha Camp"]
    assert set(data[0]) == {"id", "name", "average_cost"}


def test_list_polluted_sort_uses_last_value(client, admin_token):
    _seed(client, admin_token)

    data = client.get("/api/v1/bootcamps?sort=-average_cost&sort=average_cost").json()["data"]
    assert [item["average_cost"] for item in data] == [1000, 5000, 9000]


def test_list_pagination(client, admin_token):
    _seed(client, admin_token)

    body = client.get("/api/v1/bootcamps?sort=name&limit=1&page=2").json()
    assert body["count"] == 1
    assert body["data"][0]["name"] == "Beta Camp"
    assert body["pagination"] == {"page": 2, "limit": 1, "total": 3, "pages": 3, "next": 3, "prev": 1}


def test_list_rejects_bad_paging_and_fields(client):
    assert client.get("/api/v1/bootcamps?page=0").status_code == 400
    assert client.get("/api/v1/bootcamps?limit=abc").status_code == 400
    assert client.get("/api/v1/bootcamps?select=secret").status_code == 400


def test_list_rejects_out_of_range_numbers(client):
    response = client.get("/api/v1/bootcamps?page=100000000000000000000")
    assert response.status_code == 400
    assert response.json()["message"].startswith("page must be at most")
    assert client.get("/api/v1/bootcamps?average_cost[gt]=100000000000000000000").status_code == 400
    assert client.get("/api/v1/bootcamps?limit=100000000000000000000").json()["pagination"]["limit"] == 100


def test_photo_upload(client, bootcamp, publisher_token, upload_dir):
    response = client.put(
        f"/api/v1/bootcamps/{bootcamp['id']}/photo",
        files={"file": ("Campus.JPG", b"\xff\xd8\xff\xe0fake-jpeg", "image/jpeg")},
        headers=bearer(publisher_token),
    )
    assert response.status_code == 200
    filename = f"photo_{bootcamp['id']}.jpg"
    assert response.json()["data"] == {"photo": filename}
    assert (upload_dir / filename).read_bytes() == b"\xff\xd8\xff\xe0fake-jpeg"
    assert client.get(f"/api/v1/bootcamps/{bootcamp['id']}").json()["data"]["photo"] == filename


def test_photo_upload_rejects_non_images(client, bootcamp, publisher_token):
    response = client.put(
        f"/api/v1/bootcamps/{bootcamp['id']}/photo",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        headers=bearer(publisher_token),
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Please upload an image file"


def test_photo_upload_requires_file(client, bootcamp, publisher_token):
    response = client.put(f"/api/v1/bootcamps/{bootcamp['id']}/photo", headers=bearer(publisher_token))
    assert response.status_code == 400
