from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from nexjob.auth import get_current_user_id
from nexjob.dependencies import get_settings_service
from nexjob.errors import UNAUTHORIZED_MESSAGE, SettingsError
from nexjob.schemas.settings import SaveSettingsResponse, SiteSettings, SiteSettingsUpdate
from nexjob.services.admin_settings import AdminSettingsService


router = APIRouter()


@router.get("", response_model=SiteSettings)
async def read_settings(
    user_id: int = Depends(get_current_user_id),
    settings_service: AdminSettingsService = Depends(get_settings_service),
) -> SiteSettings:
    try:
        authorized = await settings_service.is_super_admin(user_id)
    except SettingsError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    if not authorized:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=UNAUTHORIZED_MESSAGE)
    return await settings_service.get_settings(admin_context=True)


@router.put("", response_model=SaveSettingsResponse)
async def save_settings(
    payload: SiteSettingsUpdate,
    user_id: int = Depends(get_current_user_id),
    settings_service: AdminSettingsService = Depends(get_settings_service),
) -> SaveSettingsResponse:
    result = await settings_service.save_settings(payload, user_id=user_id)
    if not result.success:
        code = status.HTTP_403_FORBIDDEN if result.error == UNAUTHORIZED_MESSAGE else status.HTTP_502_BAD_GATEWAY
        raise HTTPException(status_code=code, detail=result.error)
    return SaveSettingsResponse(success=True)


@router.post("/sitemap-generated", status_code=status.HTTP_204_NO_CONTENT)
async def mark_sitemap_generated(
    user_id: int = Depends(get_current_user_id),
    settings_service: AdminSettingsService = Depends(get_settings_service),
) -> None:
    await settings_service.update_last_sitemap_generation(user_id)
