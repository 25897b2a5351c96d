"""HTTP tests for the /guests routes."""

from bson import ObjectId


def guest_payload(client_id, **overrides):
    data = {"name": "Jo", "message": "hi", "confirmation": "yes", "client_id": client_id}
    data.update(overrides)
    return data


def create_guest(api, client_id, **overrides):
    response = api.post("/guests", json=guest_payload(client_id, **overrides))
    assert response.status_code == 201, response.text
    return response.json()["inserted_id"]


def test_create_and_get(api, acme):
    guest_id = create_guest(api, acme)
    body = api.get(f"/guests/{guest_id}").json()
    assert body == {
        "id": guest_id,
        "name": "Jo",
        "message": "hi",
        "confirmation": "yes",
        "client_id": acme,
    }


def test_create_for_nonexistent_client_stores_nothing(api, database):
    response = api.post("/guests", json=guest_payload(str(ObjectId())))
    assert response.status_code == 409
    assert response.json()["code"] == "unknown_reference"
    assert database.guests.count_documents({}) == 0


def test_create_without_client_id_is_400(api, database):
    payload = guest_payload(None)
    del payload["client_id"]
    response = api.post("/guests", json=payload)
    assert response.status_code == 400
    assert response.json()["code"] == "validation_error"
    assert database.guests.count_documents({}) == 0


def test_create_with_non_string_client_id_is_400(api):
    response = api.post("/guests", json=guest_payload(12345))
    assert response.status_code == 400


def test_create_with_malformed_client_id_is_400(api):
    response = api.post("/guests", json=guest_payload("xyz"))
    assert response.status_code == 400
    assert response.json()["code"] == "malformed_identifier"


def test_create_with_zero_client_id_is_400(api, database):
    response = api.post("/guests", json=guest_payload("0" * 24))
    assert response.status_code == 400
    assert response.json()["code"] == "validation_error"
    assert database.guests.count_documents({}) == 0


def test_list_by_client(api, acme):
    first = create_guest(api, acme, name="A")
    second = create_guest(api, acme, name="B")
    response = api.get("/guests", params={"client_id": acme})
    assert response.status_code == 200
    assert sorted(g["id"] for g in response.json()) == sorted([first, second])


def test_list_for_client_without_guests_is_empty_success(api):
    response = api.get("/guests", params={"client_id": str(ObjectId())})
    assert response.status_code == 200
    assert response.json() == []


def test_list_requires_client_id(api):
    response = api.get("/guests")
    assert response.status_code == 400


def test_list_with_malformed_client_id_is_400(api):
    response = api.get("/guests", params={"client_id": "nope"})
    assert response.status_code == 400
    assert response.json()["code"] == "malformed_identifier"


def test_get_missing_is_404(api):
    assert api.get(f"/guests/{ObjectId()}").status_code == 404


def test_update_without_client_id_keeps_existing(api, acme):
    guest_id = create_guest(api, acme)
    response = api.put(f"/guests/{guest_id}", json={"name": "Jo B", "message": "see you", "confirmation": "no"})
    assert response.status_code == 200
    assert response.json()["matched_count"] == 1

    body = api.get(f"/guests/{guest_id}").json()
    assert body["client_id"] == acme
    assert (body["name"], body["message"], body["confirmation"]) == ("Jo B", "see you", "no")


def test_update_with_zero_client_id_keeps_existing(api, acme):
    guest_id = create_guest(api, acme)
    response = api.put(f"/guests/{guest_id}", json=guest_payload("0" * 24, name="Jo B"))
    assert response.status_code == 200
    body = api.get(f"/guests/{guest_id}").json()
    assert body["client_id"] == acme
    assert body["name"] == "Jo B"


def test_update_with_zero_client_id_and_none_stored_is_400(api, database):
    guest_id = str(database.guests.insert_one({"name": "Orphan"}).inserted_id)
    response = api.put(f"/guests/{guest_id}", json={"name": "x", "client_id": "0" * 24})
    assert response.status_code == 400
    assert response.json()["code"] == "validation_error"


def test_update_moves_guest_to_another_client(api, acme):
    other = api.post("/clients", json={"name": "Other", "invitation_types": "party"}).json()["inserted_id"]
    guest_id = create_guest(api, acme)
    response = api.put(f"/guests/{guest_id}", json=guest_payload(other))
    assert response.status_code == 200
    assert api.get(f"/guests/{guest_id}").json()["client_id"] == other


def test_update_is_full_overwrite(api, acme):
    guest_id = create_guest(api, acme)
    api.put(f"/guests/{guest_id}", json={"name": "Only name"})
    body = api.get(f"/guests/{guest_id}").json()
    assert body["name"] == "Only name"
    assert body["message"] == ""
    assert body["confirmation"] == ""


def test_update_missing_guest_is_404(api):
    response = api.put(f"/guests/{ObjectId()}", json={"name": "x"})
    assert response.status_code == 404


def test_update_when_stored_guest_has_no_client_id_is_400(api, database):
    guest_id = str(database.guests.insert_one({"name": "Orphan"}).inserted_id)
    response = api.put(f"/guests/{guest_id}", json={"name": "x"})
    assert response.status_code == 400
    assert response.json()["code"] == "validation_error"


def test_delete(api, acme):
    guest_id = create_guest(api, acme)
    assert api.delete(f"/guests/{guest_id}").json() == {"deleted_count": 1}
    assert api.delete(f"/guests/{guest_id}").json() == {"deleted_count": 0}


def test_delete_malformed_id_is_400(api):
    assert api.delete("/guests/123").status_code == 400


def test_deleting_client_keeps_its_guests(api, acme):
    guest_id = create_guest(api, acme)
    api.delete(f"/clients/{acme}")
    assert api.get(f"/guests/{guest_id}").status_code == 200
