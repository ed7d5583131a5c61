"""Startup configuration errors."""

from collections.abc import Sequence

from app.errors.base import BaseAppError


class ConfigMissingError(BaseAppError):
    """Raised at startup when required environment variables are absent."""

    def __init__(self, missing: Sequence[str] = ("URL", "SECRET_KEY")) -> None:
        self.missing = list(missing)
        names = " and ".join(f"'{name}'" for name in self.missing)
        plural = "variables" if len(self.missing) > 1 else "variable"
        super().__init__(detail=f"Please set the {names} environment {plural}.")
