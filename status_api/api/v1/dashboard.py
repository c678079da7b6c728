from fastapi import APIRouter
from fastapi.responses import FileResponse, RedirectResponse

from status_api.config import settings

router = APIRouter()


@router.get("/dashboard", include_in_schema=False)
async def dashboard() -> FileResponse:
    return FileResponse(settings.dashboard_path, media_type="text/html")


@router.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(url="/dashboard")
