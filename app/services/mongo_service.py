"""
MongoDB Service - CRUD operations for document collections.

Collections in this database:
1. users                    - Registered accounts (hashed passwords)
2. students                 - Student profiles with file references
3. college_admins           - Pending college-admin requests
4. approved_college_admins  - Approved requests (same _id as the pending one)
5. transactions             - Payment ledger
6. college_data             - Free-form college info used for recommendations

Placement uploads live in placement_service.py since they also touch files.

Every service is built around an injected Database; nothing here reaches
for the process-wide client.
"""

import logging
from datetime import datetime
from typing import List, Dict, Any
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.core.auth import hash_password, verify_password, create_access_token
from app.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from app.db.mongodb import get_collection
from app.schemas.schemas import (
    RegisterRequest, StudentProfileCreate, CollegeAdminCreate, CollegeAdminRecord,
    TransactionCreate
)

logger = logging.getLogger(__name__)


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_docs(docs) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def to_object_id(value: str) -> ObjectId:
    """Parse an id coming from a client. Malformed ids are a client error."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ValidationError(f"Invalid id: {value}")


# ============================================================
# USERS COLLECTION
# ============================================================

class UserService:
    """
    Registration and login.
    Emails are lower-cased on the way in, for both register and login.
    """

    def __init__(self, db: Database):
        self.collection: Collection = get_collection("users", db)

    def register(self, request: RegisterRequest) -> str:
        email = request.email.lower()
        if self.collection.find_one({"email": email}):
            raise ConflictError("Email already in use.")

        doc = {
            "name": request.name,
            "email": email,
            "password": hash_password(request.password),
            "userType": request.user_type.value,
            "createdAt": datetime.utcnow()
        }
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError:
            # lost a race with a concurrent registration
            raise ConflictError("Email already in use.")

        logger.info("Registered %s user %s", doc["userType"], email)
        return str(result.inserted_id)

    def login(self, email: str, password: str) -> dict:
        """
        Check credentials and issue a token.

        Returns:
            {"token", "userType", "name"}
        """
        user = self.collection.find_one({"email": email.lower()})
        if not user or not verify_password(password, user["password"]):
            logger.info("Failed login attempt")
            raise AuthError()

        token = create_access_token(data={"sub": str(user["_id"]), "role": user["userType"]})
        return {"token": token, "userType": user["userType"], "name": user["name"]}


# ============================================================
# STUDENTS COLLECTION
# ============================================================

class StudentProfileService:
    """
    Student profiles. Joined to users only by the email string;
    several profiles may share an email, lookups return the first.
    """

    def __init__(self, db: Database):
        self.collection: Collection = get_collection("students", db)

    def create(self, profile: StudentProfileCreate) -> str:
        result = self.collection.insert_one(profile.model_dump(by_alias=True))
        logger.info("Saved student profile for %s", profile.email)
        return str(result.inserted_id)

    def get_by_email(self, email: str) -> dict:
        doc = self.collection.find_one({"email": email})
        if not doc:
            raise NotFoundError("Student not found")
        return serialize_doc(doc)

    def get_recommendation_info(self, email: str) -> dict:
        """Only what the recommender needs: email, location and family income."""
        doc = self.collection.find_one(
            {"email": email},
            {"email": 1, "location": 1, "parents.fatherSalary": 1, "parents.motherSalary": 1}
        )
        if not doc:
            raise NotFoundError("Student not found")

        parents = doc.get("parents") or {}
        return {
            "email": doc["email"],
            "location": doc.get("location"),
            "fatherSalary": parents.get("fatherSalary"),
            "motherSalary": parents.get("motherSalary")
        }

    def list_all(self) -> List[dict]:
        return serialize_docs(self.collection.find())


# ============================================================
# COLLEGE ADMIN COLLECTIONS (pending + approved)
# ============================================================

class CollegeAdminService:
    """
    College-admin onboarding.

    Approval copies the record into approved_college_admins under the same
    _id and then deletes the pending one. The two writes are not atomic;
    because the copy is an upsert, repeating an approval that failed halfway
    finishes the job instead of duplicating it.
    """

    def __init__(self, db: Database):
        self.pending: Collection = get_collection("college_admins", db)
        self.approved: Collection = get_collection("approved_college_admins", db)

    def submit(self, request: CollegeAdminCreate) -> str:
        result = self.pending.insert_one(request.model_dump(by_alias=True))
        logger.info("College admin request %s submitted by %s", result.inserted_id, request.email)
        return str(result.inserted_id)

    def list_pending(self) -> List[dict]:
        return serialize_docs(self.pending.find())

    def approve(self, record: CollegeAdminRecord) -> None:
        oid = to_object_id(record.id)
        doc = record.model_dump(by_alias=True, exclude={"id"})

        self.approved.replace_one({"_id": oid}, doc, upsert=True)
        self.pending.delete_one({"_id": oid})
        logger.info("College admin %s approved", oid)

    def disapprove(self, admin_id: str) -> None:
        result = self.pending.delete_one({"_id": to_object_id(admin_id)})
        if result.deleted_count == 0:
            raise NotFoundError("College admin request not found")
        logger.info("College admin %s disapproved", admin_id)


# ============================================================
# TRANSACTIONS COLLECTION
# ============================================================

class TransactionService:
    """
    Payment ledger. Status updates upsert on orderId: an unknown orderId
    creates a new record rather than failing.
    """

    def __init__(self, db: Database):
        self.collection: Collection = get_collection("transactions", db)

    def record(self, request: TransactionCreate) -> dict:
        doc = {
            "email": request.email,
            "orderId": request.order_id,
            "amount": request.amount,
            "status": "pending",
            "timestamp": datetime.utcnow()
        }
        self.collection.insert_one(doc)
        return serialize_doc(doc)

    def update_status(self, order_id: str, status: str) -> dict:
        # Open string on purpose: payment gateways report their own status values
        doc = self.collection.find_one_and_update(
            {"orderId": order_id},
            {
                "$set": {"status": status},
                "$setOnInsert": {"timestamp": datetime.utcnow()}
            },
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        logger.info("Transaction %s set to %s", order_id, status)
        return serialize_doc(doc)


# ============================================================
# COLLEGE DATA COLLECTION
# ============================================================

class CollegeDataService:
    """Free-form college documents consumed by the recommender."""

    def __init__(self, db: Database):
        self.collection: Collection = get_collection("college_data", db)

    def insert(self, data: Dict[str, Any]) -> str:
        if not data:
            raise ValidationError("College data is required")
        result = self.collection.insert_one(dict(data))
        return str(result.inserted_id)
