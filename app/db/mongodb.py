"""
MongoDB Connection Utility

MongoDB stores every entity of the platform:
- Registered users
- Student profiles (marks, family info, file references)
- College-admin requests, pending and approved
- Placement upload metadata
- Payment transactions

The client is created lazily once per process. Workflows never reach for it
directly: routes receive the Database through the get_mongo_db dependency,
which is what tests override.
"""
import logging
from typing import Optional
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from app.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# Global client (connection pooling handled internally by pymongo)
_client: Optional[MongoClient] = None
_db: Optional[Database] = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms
        )
    return _client


def get_mongo_db() -> Database:
    """Get the application database. Also used as a FastAPI dependency."""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str, db: Optional[Database] = None) -> Collection:
    db = db if db is not None else get_mongo_db()
    return db[COLLECTIONS[name]]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.error("MongoDB connection failed: %s", e)
        return False


def close_mongo_client() -> None:
    global _client, _db
    if _client is not None:
        _client.close()
    _client = None
    _db = None


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "students": "students",
    "college_admins": "college_admins",
    "approved_college_admins": "approved_college_admins",
    "placement_data": "placement_data",
    "transactions": "transactions",
    "college_data": "college_data"
}


def init_mongo_indexes(db: Optional[Database] = None):
    """
    Create indexes for better query performance.
    Call this once during app startup.
    """
    db = db if db is not None else get_mongo_db()

    # Emails are stored lower-cased, so a plain unique index is case-insensitive
    db[COLLECTIONS["users"]].create_index("email", unique=True)

    # Profiles are looked up by email; not unique
    db[COLLECTIONS["students"]].create_index("email")

    # Approved placement query filters on all three
    db[COLLECTIONS["placement_data"]].create_index([
        ("collegeName", ASCENDING),
        ("year", ASCENDING),
        ("approved", ASCENDING)
    ])

    # Payment status upsert is keyed on orderId
    db[COLLECTIONS["transactions"]].create_index("orderId")

    logger.info("MongoDB indexes created successfully")
