"""
routers/offline.py — Offline crop data: status, download, sync and clear.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from krishimitra.database import get_db
from krishimitra.schemas import OfflineDataResponse, OfflineDownloadRequest, OfflineDownloadResponse
from krishimitra.services.storage import (
    clear_offline_data,
    describe_offline_data,
    download_crop,
    load_offline_data,
    sync_offline_data,
)

router = APIRouter()


@router.get("", response_model=OfflineDataResponse)
async def get_offline_data(db: AsyncSession = Depends(get_db)):
    return describe_offline_data(await load_offline_data(db))


@router.post("/download", response_model=OfflineDownloadResponse)
async def download(body: OfflineDownloadRequest, db: AsyncSession = Depends(get_db)):
    data, downloaded = await download_crop(db, body.crop_type)
    if downloaded:
        message = f"Offline data for {body.crop_type} is now available."
    else:
        message = f"Offline data for {body.crop_type} is already available."
    return {
        "downloaded": downloaded,
        "message": message,
        "offline_data": describe_offline_data(data),
    }


@router.post("/sync", response_model=OfflineDataResponse)
async def sync(db: AsyncSession = Depends(get_db)):
    return describe_offline_data(await sync_offline_data(db))


@router.delete("", response_model=OfflineDataResponse)
async def clear(db: AsyncSession = Depends(get_db)):
    return describe_offline_data(await clear_offline_data(db))
