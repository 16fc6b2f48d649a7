from __future__ import annotations

BASE = "/api/v1/employees"


def test_create_returns_created_employee(client, ann):
    response = client.post(BASE, json=ann)

    assert response.status_code == 201
    assert response.json() == {"id": 1, **ann}


def test_create_rejects_invalid_payload(client, ann):
    response = client.post(BASE, json={**ann, "name": "A", "email": "nope"})

    assert response.status_code == 422
    body = response.json()
    assert body["detail"] == "Validation failed"
    assert body["violations"] == [
        {"field": "name", "message": "Name must be between 2 and 50 characters"},
        {"field": "email", "message": "Invalid email format"},
    ]
    assert client.get(BASE).json() == []


def test_get_employee(client, ann):
    created = client.post(BASE, json=ann).json()

    response = client.get(f"{BASE}/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_employee_returns_404(client):
    response = client.get(f"{BASE}/99")

    assert response.status_code == 404
    assert response.json() == {"detail": "Employee not found with ID: 99"}


def test_list_employees(client, ann):
    client.post(BASE, json=ann)
    client.post(BASE, json={**ann, "name": "Bob", "email": "bob@x.com"})

    response = client.get(BASE)

    assert response.status_code == 200
    assert [e["name"] for e in response.json()] == ["Ann", "Bob"]


def test_update_replaces_employee(client, ann):
    created = client.post(BASE, json=ann).json()

    response = client.put(f"{BASE}/{created['id']}", json={**ann, "name": "Anna"})

    assert response.status_code == 200
    assert response.json() == {"id": created["id"], **ann, "name": "Anna"}


def test_update_requires_every_field(client, ann):
    created = client.post(BASE, json=ann).json()

    response = client.put(f"{BASE}/{created['id']}", json={"name": "Anna"})

    assert response.status_code == 422
    fields = {v["field"] for v in response.json()["violations"]}
    assert fields == {"email", "department"}


def test_update_unknown_employee_returns_404(client, ann):
    response = client.put(f"{BASE}/5", json=ann)

    assert response.status_code == 404


def test_delete_employee(client, ann):
    created = client.post(BASE, json=ann).json()

    response = client.delete(f"{BASE}/{created['id']}")

    assert response.status_code == 204
    assert client.get(f"{BASE}/{created['id']}").status_code == 404


def test_delete_unknown_employee_returns_404(client):
    assert client.delete(f"{BASE}/1").status_code == 404


def test_ann_scenario(client, ann):
    created = client.post(BASE, json=ann).json()
    assert created == {"id": 1, **ann}
    assert client.get(f"{BASE}/1").json() == created

    updated = client.put(f"{BASE}/1", json={**ann, "name": "Anna"}).json()
    assert updated["name"] == "Anna"
    assert updated["id"] == 1

    assert client.delete(f"{BASE}/1").status_code == 204
    assert client.get(f"{BASE}/1").status_code == 404


def test_huge_id_returns_404(client, ann):
    huge = 2**64

    assert client.get(f"{BASE}/{huge}").status_code == 404
    assert client.put(f"{BASE}/{huge}", json=ann).status_code == 404
    response = client.delete(f"{BASE}/{huge}")
    assert response.status_code == 404
    assert response.json() == {"detail": f"Employee not found with ID: {huge}"}


def test_missing_body_returns_violations(client):
    response = client.post(BASE)

    assert response.status_code == 422
    assert response.json() == {
        "detail": "Validation failed",
        "violations": [{"field": "body", "message": "Body is required"}],
    }


def test_malformed_json_returns_violations(client, ann):
    created = client.post(BASE, json=ann).json()

    response = client.put(
        f"{BASE}/{created['id']}",
        content=b'{"name": "Anna",',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
    body = response.json()
    assert body["detail"] == "Validation failed"
    assert len(body["violations"]) == 1
    assert body["violations"][0]["field"].startswith("body")
    assert client.get(f"{BASE}/{created['id']}").json() == created


def test_non_integer_id_returns_violations(client):
    response = client.get(f"{BASE}/abc")

    assert response.status_code == 422
    assert [v["field"] for v in response.json()["violations"]] == ["path.employee_id"]
