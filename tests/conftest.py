import mongomock
import pytest
from fastapi.testclient import TestClient

from frontdesk_api.main import app, db_conn


def make_customer(**overrides):
    customer = {
        "firstName": "A",
        "lastName": "B",
        "email": "a@b.com",
        "mobile": "123",
        "checkinDate": "2024-01-01",
        "checkoutDate": "2024-01-02",
        "roomNumber": "101",
        "roomType": "single",
        "checkinTime": "14:00",
        "checkoutTime": "11:00",
        "mode": "walk-in",
        "idType": "passport",
        "idValidationStatus": "verified",
        "checkinStatus": "checked-in",
        "roomAlloted": "101",
        "omsCheckin": "2024-01-01",
        "omsCheckout": "2024-01-02",
        "idNumber": "X1",
        "totalGuests": 2,
    }
    customer.update(overrides)
    return customer


def make_staff(**overrides):
    staff = {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@hotel.com",
        "contact": "555-0101",
        "age": 31,
        "password": "s3cret",
        "staffAccess": "reception",
        "staffProgress": "active",
        "idType": "national-id",
        "idNumber": "N-42",
    }
    staff.update(overrides)
    return staff


# ------------------ fixtures ------------------
@pytest.fixture
def db():
    return mongomock.MongoClient()["hotel"]


@pytest.fixture
def client(db):
    # not entered as a context manager, so the startup hook never touches a real server
    app.dependency_overrides[db_conn] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()
