from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from nexjob.dependencies import get_advertisement_service
from nexjob.schemas.page import AdCodeResponse
from nexjob.services.advertisement import AD_POSITIONS, AdvertisementService


router = APIRouter()


@router.get("", response_model=dict[str, str])
async def list_ad_codes(
    ads: AdvertisementService = Depends(get_advertisement_service),
) -> dict[str, str]:
    return await ads.ad_config()


@router.get("/{position}", response_model=AdCodeResponse)
async def get_ad_code(
    position: str,
    ads: AdvertisementService = Depends(get_advertisement_service),
) -> AdCodeResponse:
    if position not in AD_POSITIONS:
        raise HTTPException(status_code=404, detail="Unknown ad position")
    return AdCodeResponse(position=position, ad_code=await ads.get_ad_code(position))
