from __future__ import annotations


def test_only_admins_change_ranges(client, admin_headers, user_headers):
    payload = {"name": "Talão 1", "start_number": "001", "end_number": "500"}
    assert client.post("/api/document-ranges", json=payload, headers=user_headers).status_code == 403

    r = client.post("/api/document-ranges", json=payload, headers=admin_headers)
    assert r.status_code == 201
    range_id = r.json()["id"]

    # reading stays open to every signed-in user
    listed = client.get("/api/document-ranges", headers=user_headers)
    assert [x["id"] for x in listed.json()] == [range_id]

    assert client.put(f"/api/document-ranges/{range_id}", json={"is_active": False}, headers=user_headers).status_code == 403
    assert client.delete(f"/api/document-ranges/{range_id}", headers=user_headers).status_code == 403

    r = client.put(f"/api/document-ranges/{range_id}", json={"is_active": False}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["is_active"] is False
    assert client.get("/api/document-ranges", params={"is_active": True}, headers=user_headers).json() == []

    assert client.delete(f"/api/document-ranges/{range_id}", headers=admin_headers).status_code == 204
    assert client.get(f"/api/document-ranges/{range_id}", headers=admin_headers).status_code == 404


def test_range_bounds_must_be_ordered(client, admin_headers):
    r = client.post(
        "/api/document-ranges",
        json={"name": "Invertido", "start_number": "900", "end_number": "100"},
        headers=admin_headers,
    )
    assert r.status_code == 400

    created = client.post(
        "/api/document-ranges",
        json={"name": "Notas", "start_number": "NF-001", "end_number": "NF-100"},
        headers=admin_headers,
    ).json()
    r = client.put(
        f"/api/document-ranges/{created['id']}",
        json={"end_number": "NF-000"},
        headers=admin_headers,
    )
    assert r.status_code == 400


def test_range_fields_cannot_be_cleared(client, admin_headers):
    created = client.post(
        "/api/document-ranges",
        json={"name": "A", "start_number": "001", "end_number": "100"},
        headers=admin_headers,
    ).json()

    for patch in ({"name": None}, {"start_number": None}, {"is_active": None}):
        r = client.put(f"/api/document-ranges/{created['id']}", json=patch, headers=admin_headers)
        assert r.status_code == 422, patch

    r = client.put(f"/api/document-ranges/{created['id']}", json={"description": None}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["name"] == "A"


def test_inactive_ranges_do_not_constrain(client, admin_headers, user_headers):
    created = client.post(
        "/api/document-ranges",
        json={"name": "A", "start_number": "001", "end_number": "100"},
        headers=admin_headers,
    ).json()

    check = lambda n: client.post(
        "/api/document-ranges/validate", json={"document_number": n}, headers=user_headers
    ).json()
    assert check("500")["is_valid"] is False

    client.put(f"/api/document-ranges/{created['id']}", json={"is_active": False}, headers=admin_headers)
    assert check("500")["is_valid"] is True
    assert check("   ") == {"is_valid": True, "is_duplicate": False, "message": ""}
