import sys

from pymongo.errors import CollectionInvalid, PyMongoError

from frontdesk_db.connect_db import get_database
from frontdesk_db.schema import SCHEMAS


def create_collections(db=None) -> dict:
    """Create the collections and attach their $jsonSchema validators.

    Returns a mapping of collection name to whether the validator was applied.
    """
    if db is None:
        db = get_database()

    applied = {}
    for name, schema in SCHEMAS.items():
        try:
            db.create_collection(name)
        except CollectionInvalid:
            # already exists
            pass

        try:
            db.command("collMod", name, validator={"$jsonSchema": schema})
            print(f"✅ Created/updated collection '{name}' with validation.")
            applied[name] = True
        except PyMongoError as e:
            print(f"⚠️ Failed to apply validator to '{name}': {e}", file=sys.stderr)
            applied[name] = False
    return applied


if __name__ == "__main__":
    create_collections()
