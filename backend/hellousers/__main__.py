"""
HelloUsers Backend — Process Entry Point
=========================================

Usage:
    python -m hellousers
    hellousers            (console script)

Takes no arguments. Prints one startup line, then serves until killed.
If the address cannot be bound, uvicorn logs the error and exits non-zero.
"""

import uvicorn

from hellousers.config import settings


def main() -> None:
    print(f"Starting server at: {settings.public_url}", flush=True)
    uvicorn.run(
        "hellousers.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # logging is configured by the app's lifespan
    )


if __name__ == "__main__":
    main()
