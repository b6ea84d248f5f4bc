"""
Hello Server — Command-Line Entry Point
=========================================

    python -m hello_server
    hello-server            (console script installed by pyproject.toml)

Runs uvicorn on the host and port from Settings (BACKEND_HOST / BACKEND_PORT).
"""

import uvicorn

from hello_server.config import settings


def main() -> None:
    uvicorn.run(
        "hello_server.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
