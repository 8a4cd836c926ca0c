from sqlalchemy.exc import OperationalError
from storefront.extensions import db
from storefront.models.page import Page


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200


def test_get_page(client, make_page, hero_block):
    make_page("landing", content=[hero_block])

    response = client.get("/api/v1/pages/landing")

    assert response.status_code == 200
    assert response.get_json()["blocks"] == [hero_block]


def test_missing_page_is_404(client):
    response = client.get("/api/v1/pages/nope")

    assert response.status_code == 404
    assert response.get_json()["error"] == "PageNotFound"


def test_template_page_looks_missing(client, make_page):
    make_page("collection-template")

    response = client.get("/api/v1/pages/collection-template")

    assert response.status_code == 404
    assert response.get_json() == {"error": "PageNotFound", "message": "Page not found"}


def test_home_page(client, make_page):
    assert client.get("/api/v1/home").status_code == 404

    make_page("welcome", is_home=True)

    assert client.get("/api/v1/home").get_json()["slug"] == "welcome"


def test_page_html(client, make_page):
    make_page("landing", content=[
        {"id": "a", "type": "cta", "content": {"title": "Shop the drop"}},
        {"id": "b", "type": "hologram", "content": {}},
    ])

    response = client.get("/api/v1/pages/landing/html")

    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert "Shop the drop" in response.get_data(as_text=True)


def test_system_page_blocks_for_missing_page(client):
    response = client.get("/api/v1/pages/cart/blocks")

    assert response.status_code == 200
    assert response.get_json() == {"page_id": None, "blocks": [], "meta": None}


def test_edit_by_slug_creates_draft(client):
    response = client.get("/api/v1/admin/pages/edit/new-arrivals")

    body = response.get_json()
    assert response.status_code == 200
    assert body["title"] == "New Arrivals"
    assert body["status"] == "draft"
    assert body["content"] == []


def test_publish_content(client, make_page, hero_block):
    page = make_page()

    response = client.put(
        f"/api/v1/admin/pages/{page.id}/content",
        json={"blocks": [hero_block], "meta": {"meta_title": "Landing"}},
    )

    assert response.status_code == 200
    assert response.get_json()["page"]["meta"]["title"] == "Landing"
    assert db.session.get(Page, page.id).content == [hero_block]


def test_publish_rejects_bad_blocks(client, make_page):
    page = make_page()

    missing = client.put(f"/api/v1/admin/pages/{page.id}/content", json={})
    duplicate = client.put(
        f"/api/v1/admin/pages/{page.id}/content",
        json={"blocks": [{"id": "a", "type": "hero"}, {"id": "a", "type": "faq"}]},
    )
    bad_meta = client.put(
        f"/api/v1/admin/pages/{page.id}/content",
        json={"blocks": [], "meta": {"status": "published"}},
    )

    assert missing.status_code == 400
    assert duplicate.status_code == 400
    assert duplicate.get_json()["error"] == "InvariantViolation"
    assert bad_meta.status_code == 400


def test_publish_unknown_page(client):
    response = client.put("/api/v1/admin/pages/missing/content", json={"blocks": []})

    assert response.status_code == 404


def test_version_round_trip(client, make_page, hero_block, faq_block):
    page = make_page(content=[hero_block])
    url = f"/api/v1/admin/pages/{page.id}/versions"

    created = client.post(url, json={"content": [hero_block], "meta_title": "v1"})
    assert created.status_code == 201
    version = created.get_json()["version"]
    assert version["version_number"] == 1

    client.put(f"/api/v1/admin/pages/{page.id}/content", json={"blocks": [faq_block]})

    listed = client.get(url + "?include_content=true").get_json()
    assert [v["version_number"] for v in listed] == [1]
    assert listed[0]["content"] == [hero_block]

    restored = client.post(f"{url}/{version['id']}/restore")
    assert restored.status_code == 200
    assert restored.get_json()["page"]["content"] == [hero_block]
    assert restored.get_json()["page"]["meta"]["title"] == "v1"


def test_version_requires_content(client, make_page):
    page = make_page()

    response = client.post(f"/api/v1/admin/pages/{page.id}/versions", json={})

    assert response.status_code == 400


def test_restore_unknown_version(client, make_page):
    page = make_page()

    response = client.post(f"/api/v1/admin/pages/{page.id}/versions/missing/restore")

    assert response.status_code == 404
    assert response.get_json()["error"] == "VersionNotFound"


def test_block_templates(client):
    everything = client.get("/api/v1/admin/block-templates").get_json()
    marketing = client.get("/api/v1/admin/block-templates?category=marketing").get_json()

    assert len(everything) == 6
    assert marketing
    assert all(t["category"] == "marketing" for t in marketing)


def test_store_outage_is_not_a_missing_page(client, monkeypatch):
    class UnreachableQuery:
        def filter_by(self, **kwargs):
            raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(Page, "query", UnreachableQuery())

    response = client.get("/api/v1/pages/anything")

    assert response.status_code == 503
    assert response.get_json()["error"] == "PersistenceError"
