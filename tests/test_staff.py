from unittest.mock import MagicMock

from bson.objectid import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from conftest import make_staff
from frontdesk_api.main import app, db_conn


def _staff_ids(client):
    return [s["_id"] for s in client.get("/api/staff").json()]


def test_create_staff(client):
    payload = make_staff()
    response = client.post("/api/staff", json=payload)
    assert response.status_code == 201
    assert response.text == "Staff profile saved successfully"

    staff = client.get("/api/staff").json()
    assert len(staff) == 1
    for key, value in payload.items():
        assert staff[0][key] == value


def test_create_staff_password_stored_as_received(client, db):
    client.post("/api/staff", json=make_staff(password="plain-text"))
    assert db["staffs"].find_one()["password"] == "plain-text"


def test_create_staff_missing_field(client, db):
    payload = make_staff()
    del payload["age"]
    response = client.post("/api/staff", json=payload)
    assert response.status_code == 400
    assert response.text.startswith("Error saving staff profile:")
    assert db["staffs"].count_documents({}) == 0


def test_create_staff_non_integer_age(client, db):
    response = client.post("/api/staff", json=make_staff(age="thirty"))
    assert response.status_code == 400
    assert db["staffs"].count_documents({}) == 0


def test_update_staff_partial(client):
    client.post("/api/staff", json=make_staff())
    staff_id = _staff_ids(client)[0]

    response = client.put(f"/api/staff/{staff_id}", json={"staffProgress": "on-leave"})
    assert response.status_code == 200
    body = response.json()
    assert body["staffProgress"] == "on-leave"
    assert body["firstName"] == "Jane"
    assert body["age"] == 31


def test_update_staff_not_found(client):
    response = client.put(f"/api/staff/{ObjectId()}", json={"age": "not a number"})
    assert response.status_code == 404
    assert response.text == "Staff not found"


def test_update_staff_invalid(client):
    client.post("/api/staff", json=make_staff())
    staff_id = _staff_ids(client)[0]
    response = client.put(f"/api/staff/{staff_id}", json={"age": "old"})
    assert response.status_code == 400
    assert response.text.startswith("Error updating staff profile:")
    assert client.get("/api/staff").json()[0]["age"] == 31


def test_delete_staff(client):
    client.post("/api/staff", json=make_staff(firstName="Keep"))
    client.post("/api/staff", json=make_staff(firstName="Remove"))
    keep_id, remove_id = _staff_ids(client)

    response = client.delete(f"/api/staff/{remove_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Staff profile deleted successfully"}
    assert _staff_ids(client) == [keep_id]

    response = client.delete(f"/api/staff/{remove_id}")
    assert response.status_code == 404
    assert response.text == "Staff not found"


def test_delete_staff_malformed_id(client):
    response = client.delete("/api/staff/123")
    assert response.status_code == 400
    assert response.text.startswith("Error deleting staff profile:")


def test_list_staff_database_error(client):
    broken = MagicMock()
    broken.__getitem__.return_value.find.side_effect = ServerSelectionTimeoutError("down")
    app.dependency_overrides[db_conn] = lambda: broken

    response = client.get("/api/staff")
    assert response.status_code == 500
    assert response.text.startswith("Error fetching staff data:")


def test_update_staff_not_found_without_body(client):
    response = client.put(f"/api/staff/{ObjectId()}")
    assert response.status_code == 404
    assert response.text == "Staff not found"


def test_staff_age_out_of_range(client, db):
    response = client.post("/api/staff", json=make_staff(age=10**20))
    assert response.status_code == 400
    assert db["staffs"].count_documents({}) == 0

    client.post("/api/staff", json=make_staff())
    staff_id = _staff_ids(client)[0]
    response = client.put(f"/api/staff/{staff_id}", json={"age": 2**31})
    assert response.status_code == 400
    assert response.text.startswith("Error updating staff profile:")
    assert client.get("/api/staff").json()[0]["age"] == 31
