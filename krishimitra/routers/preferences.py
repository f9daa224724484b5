"""
routers/preferences.py — Language preference.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from krishimitra.config import SUPPORTED_LANGUAGES
from krishimitra.database import get_db
from krishimitra.schemas import LanguagePreference, LanguageUpdate
from krishimitra.services.storage import UnsupportedLanguage, get_language, set_language

router = APIRouter()


@router.get("/languages", response_model=list[LanguagePreference])
async def list_languages():
    return [{"code": code, "name": name} for code, name in SUPPORTED_LANGUAGES.items()]


@router.get("/language", response_model=LanguagePreference)
async def read_language(db: AsyncSession = Depends(get_db)):
    code = await get_language(db)
    return {"code": code, "name": SUPPORTED_LANGUAGES[code]}


@router.put("/language", response_model=LanguagePreference)
async def update_language(body: LanguageUpdate, db: AsyncSession = Depends(get_db)):
    try:
        code = await set_language(db, body.code)
    except UnsupportedLanguage:
        raise HTTPException(status_code=400, detail=f"Unsupported language: {body.code}")
    return {"code": code, "name": SUPPORTED_LANGUAGES[code]}
