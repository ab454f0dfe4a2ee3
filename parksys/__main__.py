"""Run the API server: python -m parksys"""

import uvicorn

from parksys.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "parksys.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.APP_ENV == "dev" and settings.DEBUG,
    )


if __name__ == "__main__":
    main()
