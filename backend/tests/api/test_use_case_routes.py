"""Use Case Routes — HTTP contract of the catalogue and admin endpoints.

Invariants:
    - POST returns 201 with the stored entity in camelCase
    - Missing id → 404, invalid form → 400, backend failure → 503
    - DELETE returns 204 with no body
"""

import pytest

BASE = "/api/v1/usecases"


def _payload(**overrides):
    data = {
        "title": "Fraud detection",
        "description": "Flag suspicious payments",
        "content": "Long form body",
        "industries": ["Finance", "Retail"],
        "categories": ["ML"],
        "imageUrl": "https://example.test/fraud.png",
        "status": "published",
    }
    data.update(overrides)
    return data


@pytest.fixture
async def seeded(client):
    """Three use cases across industries, categories and statuses."""
    created = []
    for payload in (
        _payload(),
        _payload(title="Demand forecasting", industries=["Retail"],
                 categories=["Forecasting"]),
        _payload(title="Claims triage", industries=["Insurance"],
                 categories=["NLP", "ML"], status="draft"),
    ):
        res = await client.post(BASE, json=payload)
        assert res.status_code == 201
        created.append(res.json())
    return created


async def test_create_returns_201_with_camel_case(client):
    res = await client.post(BASE, json=_payload())
    assert res.status_code == 201
    body = res.json()
    assert body["id"].startswith("usecase_")
    assert body["imageUrl"] == "https://example.test/fraud.png"
    assert body["industry"] == "Finance"
    assert body["category"] == "ML"
    assert "createdAt" in body and "updatedAt" in body


async def test_create_accepts_json_text_tags(client):
    res = await client.post(BASE, json=_payload(industries='["Energy"]'))
    assert res.status_code == 201
    assert res.json()["industries"] == ["Energy"]


async def test_create_blank_title_returns_400(client):
    res = await client.post(BASE, json=_payload(title="  "))
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == "Title is required"
    assert error["details"] == [
        {"field": "title", "message": "Title is required", "type": "use_case_rule"},
    ]


async def test_create_without_categories_returns_400(client):
    payload = _payload()
    del payload["categories"]
    res = await client.post(BASE, json=payload)
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "At least one category is required"


async def test_create_unknown_status_returns_400(client):
    res = await client.post(BASE, json=_payload(status="archived"))
    assert res.status_code == 400
    assert res.json()["error"]["details"]


async def test_get_returns_use_case(client, seeded):
    res = await client.get(f"{BASE}/{seeded[0]['id']}")
    assert res.status_code == 200
    assert res.json()["title"] == "Fraud detection"


async def test_get_missing_returns_404(client):
    res = await client.get(f"{BASE}/nonexistent-id")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["context"]["use_case_id"] == "nonexistent-id"


async def test_list_returns_all(client, seeded):
    res = await client.get(BASE)
    assert res.status_code == 200
    assert [u["title"] for u in res.json()] == [
        "Fraud detection", "Demand forecasting", "Claims triage",
    ]


async def test_list_filters_by_status(client, seeded):
    res = await client.get(BASE, params={"status": "draft"})
    assert [u["title"] for u in res.json()] == ["Claims triage"]


async def test_list_search_is_case_insensitive(client, seeded):
    res = await client.get(BASE, params={"search": "FORECAST"})
    assert [u["title"] for u in res.json()] == ["Demand forecasting"]


async def test_list_industry_selection_matches_any(client, seeded):
    res = await client.get(BASE, params=[("industry", "Insurance"), ("industry", "Finance")])
    assert [u["title"] for u in res.json()] == ["Fraud detection", "Claims triage"]


async def test_list_industry_and_category_combine(client, seeded):
    res = await client.get(BASE, params={"industry": "Retail", "category": "ML"})
    assert [u["title"] for u in res.json()] == ["Fraud detection"]


async def test_facets_are_unique_in_first_seen_order(client, seeded):
    res = await client.get(f"{BASE}/facets")
    assert res.status_code == 200
    assert res.json() == {
        "industries": ["Finance", "Retail", "Insurance"],
        "categories": ["ML", "Forecasting", "NLP"],
    }


async def test_facets_for_published_only(client, seeded):
    res = await client.get(f"{BASE}/facets", params={"status": "published"})
    assert res.json()["industries"] == ["Finance", "Retail"]


async def test_patch_applies_partial_update(client, seeded):
    target = seeded[0]
    res = await client.patch(
        f"{BASE}/{target['id']}", json={"title": "Renamed", "categories": ["NLP"]},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "Renamed"
    assert body["description"] == target["description"]
    assert body["categories"] == ["NLP"]
    assert body["category"] == "NLP"


async def test_patch_empty_industries_returns_400(client, seeded):
    res = await client.patch(f"{BASE}/{seeded[0]['id']}", json={"industries": []})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "At least one industry is required"


async def test_patch_null_status_returns_400(client, seeded):
    res = await client.patch(f"{BASE}/{seeded[0]['id']}", json={"status": None})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Status is required"
    unchanged = await client.get(f"{BASE}/{seeded[0]['id']}")
    assert unchanged.json()["status"] == "published"


async def test_patch_missing_returns_404(client):
    res = await client.patch(f"{BASE}/nonexistent-id", json={"title": "x"})
    assert res.status_code == 404


async def test_delete_returns_204(client, seeded):
    use_case_id = seeded[0]["id"]
    res = await client.delete(f"{BASE}/{use_case_id}")
    assert res.status_code == 204
    assert res.content == b""
    assert (await client.get(f"{BASE}/{use_case_id}")).status_code == 404


async def test_delete_missing_returns_404(client):
    res = await client.delete(f"{BASE}/nonexistent-id")
    assert res.status_code == 404


async def test_corrupt_store_returns_503(client, kv_store):
    kv_store.set_item("usecases", "{broken")
    res = await client.get(BASE)
    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "USE_CASE_BACKEND_ERROR"
    assert error["message"] == "Failed to fetch use cases"


async def test_published_catalogue_skips_drafts(client, seeded):
    res = await client.get(f"{BASE}/published")
    assert res.status_code == 200
    assert [u["title"] for u in res.json()] == [
        "Fraud detection", "Demand forecasting",
    ]


async def test_published_catalogue_applies_filters(client, seeded):
    res = await client.get(f"{BASE}/published", params={"category": "NLP"})
    assert res.json() == []
    res = await client.get(f"{BASE}/published", params={"search": "fraud"})
    assert [u["title"] for u in res.json()] == ["Fraud detection"]


async def test_related_categories_for_industry(client, seeded):
    res = await client.get(
        f"{BASE}/facets/related", params={"name": "Retail", "kind": "industry"},
    )
    assert res.status_code == 200
    assert res.json() == ["ML", "Forecasting"]


async def test_related_industries_for_published_category(client, seeded):
    res = await client.get(
        f"{BASE}/facets/related",
        params={"name": "ML", "kind": "category", "status": "published"},
    )
    assert res.json() == ["Finance", "Retail"]


async def test_related_requires_known_kind(client):
    res = await client.get(
        f"{BASE}/facets/related", params={"name": "ML", "kind": "sector"},
    )
    assert res.status_code == 400
