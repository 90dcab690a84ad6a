from fastapi import APIRouter

from app.prompts.language import language_catalog
from app.schemas.chat import LanguageOption

router = APIRouter()


@router.get("/languages", response_model=list[LanguageOption], summary="Supported reply languages")
async def list_languages():
    return [
        LanguageOption(code=lang.value, name=lang.display_name, native=lang.native_name)
        for lang in language_catalog()
    ]
