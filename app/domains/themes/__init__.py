from app.domains.themes.entities import Theme, THEMES, DEFAULT_THEME_ID, get_theme, list_themes
from app.domains.themes.schemas import ThemeResponse, ThemeListResponse

__all__ = [
    "Theme", "THEMES", "DEFAULT_THEME_ID", "get_theme", "list_themes",
    "ThemeResponse", "ThemeListResponse"
]
