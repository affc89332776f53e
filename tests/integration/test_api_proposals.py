"""
Saved proposal, account executive and prompt settings API tests.
These routes share the remote store wire format.
"""

from httpx import AsyncClient

from proposal_studio.services.expiration import DAY_MS, now_ms


async def _save(client: AsyncClient, make_proposal, **kwargs) -> dict:
    response = await client.post("/api/v1/proposals", json=make_proposal(**kwargs).to_wire())
    assert response.status_code == 200
    return response.json()


# ==================== Proposals ====================

async def test_list_empty(client: AsyncClient):
    response = await client.get("/api/v1/proposals")

    assert response.status_code == 200
    assert response.json() == []
    assert response.headers["X-Store-Reachable"] == "true"


async def test_save_assigns_id_and_timestamps(client: AsyncClient, make_proposal):
    saved = await _save(client, make_proposal, proposal_id=None)

    assert saved["id"].startswith("PROP-")
    assert saved["createdAt"] == saved["lastModified"]

    listed = (await client.get("/api/v1/proposals")).json()
    assert [p["id"] for p in listed] == [saved["id"]]


async def test_get_and_delete(client: AsyncClient, make_proposal):
    saved = await _save(client, make_proposal, proposal_id=None)

    response = await client.get(f"/api/v1/proposals/{saved['id']}")
    assert response.status_code == 200
    assert response.json()["firmData"]["firmName"] == "Acme"

    response = await client.delete(f"/api/v1/proposals/{saved['id']}")
    assert response.json() == {"message": "Proposal deleted", "id": saved["id"]}

    assert (await client.get(f"/api/v1/proposals/{saved['id']}")).status_code == 404
    assert (await client.delete(f"/api/v1/proposals/{saved['id']}")).status_code == 404


async def test_expired_proposal_hidden(client: AsyncClient, make_proposal):
    now = now_ms()
    await _save(client, make_proposal, proposal_id="OLD", created_at=now - 31 * DAY_MS)
    await _save(client, make_proposal, proposal_id="NEW", created_at=now - DAY_MS)

    listed = (await client.get("/api/v1/proposals")).json()
    assert [p["id"] for p in listed] == ["NEW"]


async def test_store_unreachable_header(client: AsyncClient, api_store):
    async def unreachable():
        raise ConnectionError("down")

    api_store.list_proposals = unreachable

    response = await client.get("/api/v1/proposals")

    assert response.status_code == 200
    assert response.json() == []
    assert response.headers["X-Store-Reachable"] == "false"


# ==================== Account executives ====================

async def test_account_executive_lifecycle(client: AsyncClient):
    listed = (await client.get("/api/v1/account-executives")).json()
    assert [ae["id"] for ae in listed] == ["ae_1", "ae_2"]

    response = await client.post("/api/v1/account-executives", json={"name": "Ann", "email": "ann@example.com"})
    assert response.status_code == 200
    new_id = response.json()["id"]

    remaining = (await client.delete("/api/v1/account-executives/ae_1")).json()
    assert [ae["id"] for ae in remaining] == ["ae_2", new_id]


async def test_cannot_remove_last_account_executive(client: AsyncClient):
    await client.put(
        "/api/v1/account-executives",
        json=[{"id": "ae_only", "name": "Solo", "email": "solo@example.com"}],
    )

    response = await client.delete("/api/v1/account-executives/ae_only")

    assert response.status_code == 400
    assert response.json()["message"] == "You must have at least one Account Executive."
    listed = (await client.get("/api/v1/account-executives")).json()
    assert [ae["id"] for ae in listed] == ["ae_only"]


async def test_replace_with_empty_list_rejected(client: AsyncClient):
    response = await client.put("/api/v1/account-executives", json=[])
    assert response.status_code == 400


# ==================== Prompt settings ====================

async def test_prompt_lifecycle(client: AsyncClient):
    assert (await client.get("/api/v1/settings/prompt")).status_code == 404

    response = await client.put("/api/v1/settings/prompt", json={"value": "Quote {{firmName}}"})
    assert response.json() == {"value": "Quote {{firmName}}"}
    assert (await client.get("/api/v1/settings/prompt")).json() == {"value": "Quote {{firmName}}"}

    detail = (await client.get("/api/v1/health/detail")).json()
    assert detail["config"]["custom_prompt"] is True

    reset = (await client.delete("/api/v1/settings/prompt")).json()
    assert "{{firmName}}" in reset["value"]


async def test_blank_prompt_rejected(client: AsyncClient):
    response = await client.put("/api/v1/settings/prompt", json={"value": "  "})
    assert response.status_code == 400


async def test_store_write_failure_is_503(client: AsyncClient, api_store):
    from proposal_studio.exceptions import StorageError

    async def failing(value):
        raise StorageError("Remote store is unreachable")

    api_store.set_prompt = failing

    response = await client.put("/api/v1/settings/prompt", json={"value": "Quote {{firmName}}"})

    assert response.status_code == 503
    assert response.json()["error_code"] == "ERR_STORE_001"
