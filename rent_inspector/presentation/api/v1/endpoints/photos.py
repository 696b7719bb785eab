"""Photo endpoints — upload to a room, fetch by token, remove by index."""

from fastapi import APIRouter, Depends, HTTPException, Response, UploadFile, status

from rent_inspector.application.interfaces import ImageStorage
from rent_inspector.application.schemas import RoomResponse
from rent_inspector.application.services import InspectionStore
from rent_inspector.application.services.field_validation import validate_photo_count
from rent_inspector.domain.exceptions import FieldValidationError, ImageNotFoundError
from rent_inspector.infrastructure.dependencies import get_image_storage, get_store
from rent_inspector.presentation.api.v1.errors import unwrap_or_raise, validation_error

router = APIRouter(tags=["Photos"])

_MEDIA_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "heic": "image/heic",
    "webp": "image/webp",
}


@router.post(
    "/rooms/{room_id}/photos",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_photo(
    room_id: str,
    file: UploadFile,
    store: InspectionStore = Depends(get_store),
    image_storage: ImageStorage = Depends(get_image_storage),
) -> RoomResponse:
    """Store the uploaded bytes and append the new token to the room."""
    room = await store.get_room(room_id)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    try:
        validate_photo_count(room.photo_count + 1)
    except FieldValidationError as e:
        raise validation_error(e)

    content = await file.read()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Empty file")

    token = await image_storage.save_image(content)
    result = await store.add_photo(room_id, token)
    if not result.ok:
        await image_storage.delete_image(token)
    updated = unwrap_or_raise(result)
    return RoomResponse.model_validate(updated, from_attributes=True)


@router.get("/photos/{token}")
async def get_photo(
    token: str,
    image_storage: ImageStorage = Depends(get_image_storage),
) -> Response:
    try:
        data = await image_storage.load_image(token)
    except ImageNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Photo not found")
    extension = token.rsplit(".", 1)[-1].lower()
    return Response(content=data, media_type=_MEDIA_TYPES.get(extension, "application/octet-stream"))


@router.delete("/rooms/{room_id}/photos/{index}", response_model=RoomResponse)
async def remove_photo(
    room_id: str,
    index: int,
    store: InspectionStore = Depends(get_store),
) -> RoomResponse:
    """Remove the photo at ``index``; an out-of-range index leaves the room unchanged."""
    room = unwrap_or_raise(await store.remove_photo(room_id, index))
    return RoomResponse.model_validate(room, from_attributes=True)
