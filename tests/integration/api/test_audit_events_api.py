from uuid import uuid4

import pytest

from config import ApplicationConfig
from src.domain.base import utcnow
from src.domain.entities import AuditEvent

API = ApplicationConfig.API_PREFIX


@pytest.mark.asyncio
async def test_paging_across_equal_timestamps_returns_every_event(
    client, super_admin, db_session
):
    org_id = uuid4()
    same_instant = utcnow()
    db_session.add_all(
        [
            AuditEvent(organization_id=org_id, action="role_changed", created_at=same_instant)
            for _ in range(5)
        ]
    )
    await db_session.commit()

    seen, cursor, pages = [], None, 0
    while True:
        params = {"limit": 2, "organization_id": str(org_id)}
        if cursor:
            params["cursor"] = cursor
        response = await client.get(
            f"{API}/admin/audit-events", params=params, headers=super_admin["headers"]
        )
        assert response.status_code == 200
        body = response.json()
        seen.extend(e["id"] for e in body["events"])
        pages += 1
        cursor = body["next_cursor"]
        if cursor is None:
            break

    assert pages == 3
    assert len(seen) == len(set(seen)) == 5


@pytest.mark.asyncio
async def test_audit_events_filtered_by_organization_and_action(client, super_admin):
    org = await client.post(
        f"{API}/admin/organizations", json={"name": "Acme"}, headers=super_admin["headers"]
    )
    org_id = org.json()["organization_id"]
    await client.post(
        f"{API}/admin/invitations",
        json={"email": "a@x.com", "role": "viewer", "organization_id": org_id},
        headers=super_admin["headers"],
    )

    response = await client.get(
        f"{API}/admin/audit-events",
        params={"organization_id": org_id, "action": "invitation_created"},
        headers=super_admin["headers"],
    )

    events = response.json()["events"]
    assert [e["action"] for e in events] == ["invitation_created"]
    assert events[0]["organization_id"] == org_id


@pytest.mark.asyncio
async def test_malformed_cursor_is_rejected(client, super_admin):
    response = await client.get(
        f"{API}/admin/audit-events", params={"cursor": "Zm9v"}, headers=super_admin["headers"]
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
