import os

import uvicorn

from app.core.config import PORT


def main() -> None:
    reload_enabled = os.getenv("APP_ENV", "development").lower() != "production"
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=PORT,
        reload=reload_enabled,
    )


if __name__ == "__main__":
    main()
