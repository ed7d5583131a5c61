from app.configs.settings import (
    ADMIN_SECRET_HEADER,
    PRIVACY_KEYWORD,
    ROOT_MESSAGE,
    Settings,
    settings,
)

__all__ = [
    "ADMIN_SECRET_HEADER",
    "PRIVACY_KEYWORD",
    "ROOT_MESSAGE",
    "Settings",
    "settings",
]
