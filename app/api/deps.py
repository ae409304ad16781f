"""
FastAPI dependencies - build each workflow service around the injected
document store and blob store.

Tests swap the stores by overriding get_mongo_db and get_blob_store.
"""

from fastapi import Depends
from pymongo.database import Database

from app.core.config import get_settings
from app.db.mongodb import get_mongo_db
from app.services.mongo_service import (
    UserService, StudentProfileService, CollegeAdminService,
    TransactionService, CollegeDataService
)
from app.services.placement_service import PlacementService
from app.utils.file_upload import BlobStore

settings = get_settings()


def get_blob_store() -> BlobStore:
    return BlobStore(settings.upload_dir, settings.max_upload_bytes)


def get_user_service(db: Database = Depends(get_mongo_db)) -> UserService:
    return UserService(db)


def get_student_service(db: Database = Depends(get_mongo_db)) -> StudentProfileService:
    return StudentProfileService(db)


def get_college_admin_service(db: Database = Depends(get_mongo_db)) -> CollegeAdminService:
    return CollegeAdminService(db)


def get_placement_service(
    db: Database = Depends(get_mongo_db),
    blob_store: BlobStore = Depends(get_blob_store)
) -> PlacementService:
    return PlacementService(db, blob_store)


def get_transaction_service(db: Database = Depends(get_mongo_db)) -> TransactionService:
    return TransactionService(db)


def get_college_data_service(db: Database = Depends(get_mongo_db)) -> CollegeDataService:
    return CollegeDataService(db)
