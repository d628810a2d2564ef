def test_create_with_tags_round_trips(client) -> None:
    resp = client.post(
        "/api/inspirations",
        json={"title": "Layering", "image": "data:image/png;base64,AAAA", "tags": ["minimal", "复古", "minimal"]},
    )
    assert resp.status_code == 201
    created = resp.json()["data"]
    assert created["tags"] == ["minimal", "复古", "minimal"]
    assert created["description"] == ""

    assert client.get(f"/api/inspirations/{created['id']}").json()["data"] == created


def test_tags_default_to_empty(client) -> None:
    resp = client.post("/api/inspirations", json={"title": "t", "image": "https://example.com/a.jpg"})
    assert resp.json()["data"]["tags"] == []


def test_image_is_required(client) -> None:
    resp = client.post("/api/inspirations", json={"title": "no image"})
    assert resp.status_code == 400
    assert "image" in resp.json()["message"]


def test_list_newest_first(client) -> None:
    ids = [
        client.post("/api/inspirations", json={"title": str(n), "image": "x"}).json()["data"]["id"]
        for n in range(3)
    ]
    body = client.get("/api/inspirations").json()
    assert body["count"] == 3
    assert [x["id"] for x in body["data"]] == list(reversed(ids))


def test_replace_and_delete(client) -> None:
    created = client.post("/api/inspirations", json={"title": "a", "image": "x", "tags": ["old"]}).json()["data"]

    resp = client.put(
        f"/api/inspirations/{created['id']}",
        json={"title": "b", "image": "y", "tags": ["new", "tags"]},
    )
    assert resp.status_code == 200
    updated = resp.json()["data"]
    assert updated["title"] == "b"
    assert updated["tags"] == ["new", "tags"]
    assert updated["description"] is None

    assert client.delete(f"/api/inspirations/{created['id']}").status_code == 200
    assert client.delete(f"/api/inspirations/{created['id']}").status_code == 404


def test_id_beyond_integer_range_is_404(client) -> None:
    huge = "99999999999999999999"
    assert client.get(f"/api/inspirations/{huge}").status_code == 404
    assert client.put(f"/api/inspirations/{huge}", json={"title": "a", "image": "x"}).status_code == 404
    resp = client.delete(f"/api/inspirations/{huge}")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Inspiration not found"}
    assert client.get("/api/inspirations/abc").status_code == 404
