"""
File Routes

GET /uploads/{filename} - Stream a stored upload back
"""

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from app.api.deps import get_blob_store
from app.utils.file_upload import BlobStore

router = APIRouter(tags=["Files"])


@router.get("/uploads/{filename}")
async def serve_upload(filename: str, blob_store: BlobStore = Depends(get_blob_store)):
    return FileResponse(blob_store.resolve(filename))
