from models import OutfitRecord


def test_create_applies_defaults(client) -> None:
    resp = client.post(
        "/api/outfits",
        json={"date": "2024-05-01", "season": "spring", "style": "casual", "scene": "work"},
    )
    assert resp.status_code == 201
    record = resp.json()["data"]
    assert record["items"] == ""
    assert record["notes"] == ""
    assert record["rating"] == 0
    assert record["image"] is None

    assert client.get(f"/api/outfits/{record['id']}").json()["data"] == record


def test_items_text_is_passed_through(make_outfit) -> None:
    record = make_outfit(items='["3", "7"] white tee + jeans')
    assert record["items"] == '["3", "7"] white tee + jeans'


def test_create_missing_required_is_400(client, db) -> None:
    resp = client.post("/api/outfits", json={"date": "2024-05-01", "season": "spring"})
    assert resp.status_code == 400
    assert "style" in resp.json()["message"]
    assert "scene" in resp.json()["message"]
    assert db.query(OutfitRecord).count() == 0


def test_list_orders_by_date_then_creation(client, make_outfit) -> None:
    old = make_outfit(date="2024-04-30")
    first_today = make_outfit(date="2024-05-02")
    second_today = make_outfit(date="2024-05-02")
    middle = make_outfit(date="2024-05-01")

    ids = [x["id"] for x in client.get("/api/outfits").json()["data"]]
    assert ids == [second_today["id"], first_today["id"], middle["id"], old["id"]]


def test_filters_by_season_style_scene(client, make_outfit) -> None:
    match = make_outfit(season="summer", style="street", scene="party")
    make_outfit(season="summer", style="street", scene="work")
    make_outfit(season="summer", style="formal", scene="party")
    make_outfit(season="winter", style="street", scene="party")

    body = client.get("/api/outfits", params={"season": "summer", "style": "street", "scene": "party"}).json()
    assert body["count"] == 1
    assert body["data"][0]["id"] == match["id"]


def test_search_matches_items_or_notes(client, make_outfit) -> None:
    by_items = make_outfit(items="Denim jacket, boots")
    by_notes = make_outfit(notes="rainy day, wore DENIM")
    make_outfit(items="dress", notes="sunny")

    body = client.get("/api/outfits", params={"search": "denim"}).json()
    assert {x["id"] for x in body["data"]} == {by_items["id"], by_notes["id"]}


def test_replace_and_delete(client, make_outfit) -> None:
    record = make_outfit(rating=3, notes="ok")

    resp = client.put(
        f"/api/outfits/{record['id']}",
        json={"date": "2024-06-01", "season": "summer", "style": "sport", "scene": "gym", "rating": 5},
    )
    assert resp.status_code == 200
    updated = resp.json()["data"]
    assert updated["date"] == "2024-06-01"
    assert updated["rating"] == 5
    assert updated["notes"] is None

    assert client.delete(f"/api/outfits/{record['id']}").status_code == 200
    assert client.get(f"/api/outfits/{record['id']}").status_code == 404


def test_unknown_id_is_404_everywhere(client) -> None:
    body = {"date": "2024-05-01", "season": "spring", "style": "casual", "scene": "work"}
    assert client.get("/api/outfits/777").status_code == 404
    assert client.put("/api/outfits/777", json=body).status_code == 404
    resp = client.delete("/api/outfits/777")
    assert resp.status_code == 404
    assert resp.json()["success"] is False


def test_id_beyond_integer_range_is_404(client) -> None:
    body = {"date": "2024-05-01", "season": "spring", "style": "casual", "scene": "work"}
    huge = "99999999999999999999"
    assert client.get(f"/api/outfits/{huge}").status_code == 404
    assert client.put(f"/api/outfits/{huge}", json=body).status_code == 404
    resp = client.delete(f"/api/outfits/{huge}")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Outfit record not found"}
    assert client.get("/api/outfits/abc").status_code == 404
