from fastapi import APIRouter

from cognitive_api.domain.catalog import LANGUAGES, VOICES
from cognitive_api.domain.models import CatalogEntry

router = APIRouter(tags=["catalog"])


@router.get("/voices", response_model=list[CatalogEntry])
async def voices():
    return list(VOICES)


@router.get("/languages", response_model=list[CatalogEntry])
async def languages():
    return list(LANGUAGES)
