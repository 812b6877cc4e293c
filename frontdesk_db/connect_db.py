# connect_db.py - one MongoClient per process
import os
import sys
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.errors import PyMongoError

load_dotenv()
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017/hotel")
DB_NAME = os.getenv("DB_NAME")
DEFAULT_DB_NAME = "hotel"


@lru_cache(maxsize=None)
def get_client() -> MongoClient:
    """Return the process-wide client.

    MongoClient connects lazily and pools connections, so building it never
    blocks and the same instance is shared by every request.
    """
    return MongoClient(MONGODB_URI, serverSelectionTimeoutMS=5000)


def get_database(client: Optional[MongoClient] = None):
    if client is None:
        client = get_client()
    if DB_NAME:
        return client[DB_NAME]
    return client.get_default_database(default=DEFAULT_DB_NAME)


def check_connection(client: Optional[MongoClient] = None) -> bool:
    """Ping the server once. Failures are reported, not raised."""
    if client is None:
        client = get_client()
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        print(f"❌ MongoDB connection error: {e}", file=sys.stderr)
        return False
    print(f"✅ Connected to MongoDB database: {get_database(client).name}")
    return True


if __name__ == "__main__":
    check_connection()
