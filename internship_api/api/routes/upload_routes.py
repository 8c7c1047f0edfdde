"""
Upload Routes

POST /upload - Upload a resume file, get back a 1-hour read-only URL

The returned URL is not stored; clients save it on the student with
PUT /students/{id} {"ResumeUrl": url}.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from internship_api.core.errors import ValidationError
from internship_api.schemas.schemas import UploadResponse
from internship_api.services.blob_storage import ScopedUploadService, get_upload_service

router = APIRouter(tags=["Uploads"])


@router.post("/upload", response_model=UploadResponse)
async def upload_resume(
    file: Optional[UploadFile] = File(None, description="Resume file"),
    service: ScopedUploadService = Depends(get_upload_service)
):
    if file is None or not file.filename:
        raise ValidationError("No file uploaded")

    payload = await file.read()
    url = await service.upload(payload, file.filename)
    return UploadResponse(url=url)
