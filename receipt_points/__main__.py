"""Run the service: python -m receipt_points"""

import uvicorn

from receipt_points.config import settings


def main() -> None:
    uvicorn.run(
        "receipt_points.api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the JSON logging set up by the app
    )


if __name__ == "__main__":
    main()
