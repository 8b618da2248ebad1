from dataclasses import dataclass
from typing import Dict, List

DEFAULT_THEME_ID = "plain"
DARK_THEME_ID = "night"


@dataclass(frozen=True)
class Theme:
    id: str
    name: str
    icon: str
    background: str
    text_color: str
    placeholder_color: str

    @property
    def is_dark(self) -> bool:
        return self.id == DARK_THEME_ID


# Порядок совпадает с панелью выбора темы
THEMES: List[Theme] = [
    Theme("plain", "Plain", "circle", "bg-stone-50", "text-stone-800", "placeholder-stone-400"),
    Theme("forest", "Forest", "tree-pine", "bg-gradient-to-br from-green-50 to-emerald-100",
          "text-slate-800", "placeholder-slate-500"),
    Theme("cafe", "Café", "coffee", "bg-gradient-to-br from-amber-50 to-orange-100",
          "text-amber-900", "placeholder-amber-600"),
    Theme("spring", "Spring", "flower", "bg-gradient-to-br from-pink-50 to-green-100",
          "text-slate-800", "placeholder-slate-500"),
    Theme("summer", "Summer", "sun", "bg-gradient-to-br from-yellow-50 to-orange-100",
          "text-slate-800", "placeholder-slate-500"),
    Theme("autumn", "Autumn", "leaf", "bg-gradient-to-br from-orange-50 to-red-100",
          "text-slate-800", "placeholder-slate-500"),
    Theme("winter", "Winter", "snowflake", "bg-gradient-to-br from-blue-50 to-slate-100",
          "text-slate-800", "placeholder-slate-500"),
    Theme("sunrise", "Sunrise", "sunrise", "bg-gradient-to-br from-orange-100 to-pink-100",
          "text-slate-800", "placeholder-slate-500"),
    Theme("night", "Night", "moon", "bg-black", "text-white", "placeholder-gray-400"),
]

_THEMES_BY_ID: Dict[str, Theme] = {theme.id: theme for theme in THEMES}


def get_theme(theme_id: str) -> Theme:
    """Тема по идентификатору, для неизвестного - plain"""
    return _THEMES_BY_ID.get(theme_id, _THEMES_BY_ID[DEFAULT_THEME_ID])


def list_themes() -> List[Theme]:
    return list(THEMES)
