from datetime import datetime, timezone
from typing import Any, List

from bson.errors import InvalidId
from bson.objectid import ObjectId
from pydantic import BaseModel
from pymongo import ReturnDocument

from .exceptions import RecordNotFound, RecordValidationError
from .models import CustomerIn, StaffIn
from .validation import validate_document


# ======== Utility helpers ========
def _datetime_to_iso(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def serialize(doc: dict) -> dict:
    """Render a stored document as JSON-ready data."""
    out = {}
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            value = str(value)
        elif isinstance(value, datetime):
            value = _datetime_to_iso(value)
        out[key] = value
    return out


def parse_object_id(record_id: str) -> ObjectId:
    try:
        return ObjectId(record_id)
    except (InvalidId, TypeError):
        raise RecordValidationError(f'Cast to ObjectId failed for value "{record_id}"')


class RecordStore:
    """CRUD over one collection whose documents must satisfy `model`."""

    def __init__(self, db, collection: str, model: type[BaseModel], label: str):
        self.collection = db[collection]
        self.collection_name = collection
        self.model = model
        # used in not-found messages, e.g. "Customer not found"
        self.label = label

    def create(self, payload: Any) -> ObjectId:
        doc = validate_document(self.collection_name, payload, self.model)
        res = self.collection.insert_one(doc)
        return res.inserted_id

    def list_all(self) -> List[dict]:
        return [serialize(r) for r in self.collection.find()]

    def update(self, record_id: str, payload: Any) -> dict:
        """Merge `payload` onto the stored record and return the result.

        Existence is checked first, so an unknown id is reported as not found
        whatever the payload holds.
        """
        oid = parse_object_id(record_id)
        existing = self.collection.find_one({"_id": oid})
        if not existing:
            raise RecordNotFound(f"{self.label} not found")
        if not isinstance(payload, dict):
            raise RecordValidationError("Update payload must be a JSON object")

        changes = {k: v for k, v in payload.items() if k in self.model.model_fields}
        if not changes:
            return serialize(existing)

        merged = serialize(existing)
        merged.update(changes)
        validated = validate_document(self.collection_name, merged, self.model)
        update_doc = {k: validated[k] for k in changes}

        updated = self.collection.find_one_and_update(
            {"_id": oid},
            {"$set": update_doc},
            return_document=ReturnDocument.AFTER,
        )
        if updated is None:
            # removed between the lookup and the write
            raise RecordNotFound(f"{self.label} not found")
        return serialize(updated)

    def delete(self, record_id: str) -> dict:
        oid = parse_object_id(record_id)
        deleted = self.collection.find_one_and_delete({"_id": oid})
        if deleted is None:
            raise RecordNotFound(f"{self.label} not found")
        return serialize(deleted)


def customer_store(db) -> RecordStore:
    return RecordStore(db, "customers", CustomerIn, "Customer")


def staff_store(db) -> RecordStore:
    return RecordStore(db, "staffs", StaffIn, "Staff")


def total_guests(db) -> int:
    """Sum totalGuests over every customer; missing or falsy counts as 0."""
    total = 0
    for doc in db["customers"].find({}, {"totalGuests": 1}):
        total += doc.get("totalGuests") or 0
    return total

