"""Run the application with uvicorn: ``python -m snippetbox``."""

import uvicorn

from snippetbox.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "snippetbox.main:app",
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=60,
        server_header=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
