"""
Placement Service - uploaded placement statistics (CSV) and their approval.

Flow:
1. A college uploads a CSV with collegeName + year -> record with approved=False
2. Admin lists pending uploads (CSV contents decoded inline)
3. Admin approves (flag flipped in place) or rejects (record deleted)
4. Anyone queries approved data by collegeName + year

Rejected uploads leave their file on disk; nothing removes blobs.
"""

import logging
from datetime import datetime
from typing import List, Optional
from fastapi import UploadFile
from pandas.errors import ParserError
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from app.core.errors import NotFoundError, ValidationError
from app.db.mongodb import get_collection
from app.services.mongo_service import serialize_doc, to_object_id
from app.utils.csv_data import parse_csv_file
from app.utils.file_upload import BlobStore

logger = logging.getLogger(__name__)


class PlacementService:

    def __init__(self, db: Database, blob_store: BlobStore):
        self.collection: Collection = get_collection("placement_data", db)
        self.blob_store = blob_store

    async def upload(self, college_name: Optional[str], year: Optional[str], file: Optional[UploadFile]) -> str:
        """
        Store the file and record it as pending.

        Returns:
            MongoDB ObjectId of the new record as string
        """
        if not college_name or not year or file is None or not file.filename:
            raise ValidationError("Missing required fields")

        try:
            year_value = int(year)
        except ValueError:
            raise ValidationError("Year must be a number")

        stored_name = await self.blob_store.save(file, keep_original_name=True)
        doc = {
            "collegeName": college_name,
            "year": year_value,
            "fileUrl": f"uploads/{stored_name}",
            "fileName": file.filename,
            "mimeType": file.content_type or "application/octet-stream",
            "approved": False,
            "uploadedAt": datetime.utcnow()
        }
        result = self.collection.insert_one(doc)
        logger.info("Placement data for %s %s uploaded as %s", college_name, year_value, stored_name)
        return str(result.inserted_id)

    def _read_rows(self, record: dict) -> Optional[List[dict]]:
        """CSV rows of a record's file, or None when the file is missing or unreadable."""
        if not self.blob_store.exists(record["fileUrl"]):
            logger.warning("File not found for placement %s: %s", record["_id"], record["fileUrl"])
            return None
        try:
            return parse_csv_file(self.blob_store.resolve(record["fileUrl"]))
        except (ParserError, UnicodeDecodeError) as e:
            logger.warning("Could not parse %s for placement %s: %s", record["fileUrl"], record["_id"], e)
            return None

    def list_pending(self) -> List[dict]:
        """Best effort: records whose file cannot be read are left out."""
        results = []
        for record in self.collection.find({"approved": False}):
            rows = self._read_rows(record)
            if rows is None:
                continue
            results.append({
                "_id": str(record["_id"]),
                "collegeName": record["collegeName"],
                "year": record["year"],
                "data": rows
            })
        return results

    def approve(self, placement_id: str) -> dict:
        doc = self.collection.find_one_and_update(
            {"_id": to_object_id(placement_id)},
            {"$set": {"approved": True}},
            return_document=ReturnDocument.AFTER
        )
        if not doc:
            raise NotFoundError("Placement not found")
        logger.info("Placement %s approved", placement_id)
        return serialize_doc(doc)

    def reject(self, placement_id: str) -> None:
        doc = self.collection.find_one_and_delete({"_id": to_object_id(placement_id)})
        if not doc:
            raise NotFoundError("Placement not found")
        logger.info("Placement %s rejected, file %s kept", placement_id, doc["fileUrl"])

    def query_approved(self, college_name: Optional[str], year: Optional[str]) -> List[dict]:
        if not college_name or not year:
            raise ValidationError("College name and year are required")
        try:
            year_value = int(year)
        except ValueError:
            raise ValidationError("Year must be a number")

        records = list(self.collection.find({
            "collegeName": college_name,
            "year": year_value,
            "approved": True
        }))
        if not records:
            raise NotFoundError("No approved placements found for the specified college and year")

        results = []
        for record in records:
            rows = self._read_rows(record)
            if rows is None:
                continue
            results.append({
                "collegeName": record["collegeName"],
                "year": record["year"],
                "data": rows
            })
        return results
