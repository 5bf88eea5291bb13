from __future__ import annotations

import os

import uvicorn

APP_FACTORY = "windowsmoother.api:create_app"


def main() -> None:
    host = os.environ.get("WINDOWSMOOTHER_HOST", "127.0.0.1")
    port = int(os.environ.get("WINDOWSMOOTHER_PORT", "8000"))
    uvicorn.run(APP_FACTORY, factory=True, host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
