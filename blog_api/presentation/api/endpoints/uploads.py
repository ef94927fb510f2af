"""Image upload endpoints backed by S3-compatible object storage."""

from fastapi import APIRouter, Depends, HTTPException, Query, UploadFile, status

from blog_api.application.schemas import UploadResponse
from blog_api.application.services import UploadService
from blog_api.domain.entities import Identity
from blog_api.domain.exceptions import StorageError, UploadTooLargeError, ValidationError
from blog_api.infrastructure.dependencies import get_upload_service
from blog_api.presentation.api.security import require_admin

router = APIRouter(prefix="/uploads", tags=["Uploads"])


@router.post("", response_model=UploadResponse)
async def upload_file(
    file: UploadFile,
    prefix: str | None = Query(None, description="Folder prefix inside the bucket"),
    _: Identity = Depends(require_admin),
    service: UploadService = Depends(get_upload_service),
) -> UploadResponse:
    """Upload an image and return its key and public URL."""
    try:
        service.check(file.content_type, file.size)
        # Bounded read: one byte past the limit is enough to reject
        content = await file.read(service.max_size_bytes + 1)
        stored = await service.upload(
            content=content,
            filename=file.filename or "file",
            content_type=file.content_type,
            prefix=prefix,
        )
    except UploadTooLargeError as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Storage backend error")
    return UploadResponse.model_validate(stored, from_attributes=True)


@router.delete("/{key:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_file(
    key: str,
    _: Identity = Depends(require_admin),
    service: UploadService = Depends(get_upload_service),
) -> None:
    """Delete an uploaded object by key. Deleting a missing key still succeeds."""
    try:
        await service.delete(key)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageError:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Storage backend error")
