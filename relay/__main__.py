"""Run the relay with uvicorn on $PORT."""

import uvicorn

from relay.config import settings


def main() -> None:
    uvicorn.run("relay.app:app", host="0.0.0.0", port=settings.port, proxy_headers=True)


if __name__ == "__main__":
    main()
