# main.py

import sys

from uvicorn import run

from app.configs import settings
from app.errors import ConfigMissingError


def main() -> None:
    try:
        settings.validate_required()
    except ConfigMissingError as e:
        print(e.detail, file=sys.stderr)  # noqa: T201
        sys.exit(1)

    run(
        "app:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
