"""
Static lesson images.

Files are served from the directory configured by ``IMAGES_DIR``.  The
``filename`` path parameter cannot contain a slash, so lookups stay
within that directory; no other sanitization is applied.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import FileResponse, JSONResponse


router = APIRouter()


@router.get("/{filename}")
async def get_image(filename: str, request: Request):
    """Return the image file or a JSON 404 if it does not exist."""
    image_path = request.app.state.settings.images_path / filename
    if not image_path.is_file():
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "Image not found"})
    return FileResponse(image_path)
