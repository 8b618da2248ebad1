from pydantic import BaseModel, ConfigDict
from typing import List


class ThemeResponse(BaseModel):
    """Схема темы оформления"""
    id: str
    name: str
    icon: str
    background: str
    text_color: str
    placeholder_color: str
    is_dark: bool

    model_config = ConfigDict(from_attributes=True)


class ThemeListResponse(BaseModel):
    themes: List[ThemeResponse]
    default_id: str
