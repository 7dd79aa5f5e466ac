"""Run the customer API under uvicorn: `python -m customer_service`."""

import uvicorn

from customer_service.config import settings


def main() -> None:
    uvicorn.run(
        "customer_service.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
