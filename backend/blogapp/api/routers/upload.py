import logging
import random
import time
from pathlib import Path

from fastapi import APIRouter, Depends, File, UploadFile

from blogapp.api.deps import get_settings, require_auth
from blogapp.core.config import Settings
from blogapp.core.errors import ValidationError
from blogapp.core.security import Identity
from blogapp.schemas import UploadOut

router = APIRouter(prefix="/api", tags=["upload"])
log = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024

# Endung kommt nur aus dieser Liste, nie aus dem Dateinamen des Clients (kein svg/html)
IMAGE_EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/gif": ".gif",
    "image/webp": ".webp",
}

def stored_name(content_type: str, field: str = "image") -> str:
    suffix = IMAGE_EXTENSIONS[content_type]
    unique = f"{int(time.time() * 1000)}-{random.randint(0, 999_999_999)}"
    return f"{field}-{unique}{suffix}"

@router.post("/upload", response_model=UploadOut)
async def upload_image(
    image: UploadFile | None = File(None),
    identity: Identity = Depends(require_auth),
    settings: Settings = Depends(get_settings),
):
    if image is None or not image.filename:
        raise ValidationError("No image file provided")
    content_type = (image.content_type or "").split(";")[0].strip().lower()
    if content_type not in IMAGE_EXTENSIONS:
        raise ValidationError("Only image files are allowed!")

    target_dir = Path(settings.UPLOAD_DIR)
    target_dir.mkdir(parents=True, exist_ok=True)
    name = stored_name(content_type)
    target = target_dir / name

    size = 0
    try:
        with target.open("wb") as fh:
            while True:
                chunk = await image.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > settings.MAX_UPLOAD_BYTES:
                    raise ValidationError(
                        f"File too large. Max size: {settings.MAX_UPLOAD_BYTES} bytes"
                    )
                fh.write(chunk)
    except BaseException:
        target.unlink(missing_ok=True)
        raise

    url = f"{settings.UPLOAD_URL_PREFIX.rstrip('/')}/{name}"
    log.info("User %s uploaded %s (%d bytes)", identity.user_id, name, size)
    return UploadOut(image_url=url)
