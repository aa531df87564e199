import json
import re


class TestPublicMenuJSON:
    def test_resolves_slug_with_theme_and_table(self, client, restaurant, menu, make_item):
        make_item(name="Soup", category="Starters")
        make_item(name="Steak", category="Mains", price="$24", isChefsPick=True, isBestseller=True)
        make_item(name="Bread", category="")
        make_item(name="Salad", category="Starters")
        client.cookies.clear()

        resp = client.get("/api/public/menu/bistro", params={"table": "12"})
        assert resp.status_code == 200
        view = resp.json()
        assert view["restaurant"]["slug"] == "bistro"
        assert view["table"] == "12"
        assert view["theme"]["key"] == "french"
        assert view["defaultMenuId"] == menu["id"]

        groups = [(g["category"], [i["name"] for i in g["items"]]) for g in view["categories"]]
        assert groups == [
            ("Starters", ["Soup", "Salad"]),
            ("Mains", ["Steak"]),
            ("Uncategorized", ["Bread"]),
        ]
        steak = view["categories"][1]["items"][0]
        assert steak["displayPrice"] == "$24"
        assert steak["badges"] == ["Bestseller", "Chef's Pick"]
        assert view["categories"][0]["items"][0]["displayPrice"] == "$6.00"

    def test_default_menu_is_lowest_id_but_all_menus_exposed(self, client, restaurant, menu, make_item):
        client.post("/api/menus", json={"restaurantId": restaurant["id"], "name": "Brunch"})
        view = client.get("/api/public/menu/bistro").json()
        assert view["defaultMenuId"] == menu["id"]
        assert [m["name"] for m in view["menus"]] == ["Dinner", "Brunch"]
        assert view["table"] is None

    def test_unknown_slug(self, client):
        resp = client.get("/api/public/menu/does-not-exist")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Menu not found"}

    def test_unmatched_cuisine_uses_default_theme(self, client, owner):
        client.post("/api/restaurants", json={"name": "Injera House", "slug": "injera", "cuisineType": "Ethiopian"})
        assert client.get("/api/public/menu/injera").json()["theme"]["key"] == "default"


class TestPublicMenuPage:
    def test_not_found_page(self, client):
        resp = client.get("/menu/does-not-exist")
        assert resp.status_code == 404
        assert "Menu Not Found" in resp.text
        assert "menu-data" not in resp.text

    def test_restaurant_without_menus_shows_not_found_state(self, client, restaurant):
        resp = client.get("/menu/bistro")
        assert resp.status_code == 200
        assert "Menu Not Found" in resp.text

    def test_menu_without_items_renders_empty_page(self, client, restaurant, menu):
        resp = client.get("/menu/bistro")
        assert resp.status_code == 200
        html = resp.text
        assert "Menu Not Found" not in html
        assert "<h1>Bistro</h1>" in html
        assert 'data-category="All"' in html
        assert "No items found in this category." in html

    def test_long_table_label_is_shown_not_rejected(self, client, restaurant, menu, make_item):
        make_item()
        label = "T" * 60
        resp = client.get("/menu/bistro", params={"table": label})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert f"Table {label}" in resp.text
        assert client.get("/api/public/menu/bistro", params={"table": label}).json()["table"] == label

    def test_page_renders_items_and_table(self, client, restaurant, menu, make_item):
        make_item(name="Soup", price="6.00", isTodaysSpecial=True)
        make_item(name="<script>alert(1)</script>", price="$3", category="Sides")
        client.cookies.clear()

        resp = client.get("/menu/bistro?table=7")
        assert resp.status_code == 200
        html = resp.text
        assert "Bistro" in html
        assert "Table 7" in html
        assert "$6.00" in html
        assert "Today&#x27;s Special" in html
        assert 'data-category="Starters"' in html
        assert "<script>alert(1)</script>" not in html

        data = json.loads(re.search(r'<script type="application/json" id="menu-data">(.*?)</script>', html, re.S).group(1))
        assert data["table"] == "7"
        assert {entry["name"] for entry in data["items"].values()} == {"Soup", "<script>alert(1)</script>"}

    def test_table_is_optional(self, client, restaurant, menu, make_item):
        make_item()
        html = client.get("/menu/bistro").text
        assert 'class="pill table"' not in html


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
