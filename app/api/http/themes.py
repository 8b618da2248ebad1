from fastapi import APIRouter

from app.domains.themes.entities import DEFAULT_THEME_ID, get_theme, list_themes
from app.domains.themes.schemas import ThemeResponse, ThemeListResponse

router = APIRouter(prefix="/themes", tags=["themes"])


@router.get("/", response_model=ThemeListResponse)
async def get_themes():
    """Список тем оформления"""
    return ThemeListResponse(
        themes=[ThemeResponse.model_validate(theme) for theme in list_themes()],
        default_id=DEFAULT_THEME_ID
    )


@router.get("/{theme_id}", response_model=ThemeResponse)
async def get_theme_styles(theme_id: str):
    """Стили темы, для неизвестной темы - plain"""
    return ThemeResponse.model_validate(get_theme(theme_id))
