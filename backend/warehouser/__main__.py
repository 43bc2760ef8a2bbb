"""Run the API with uvicorn: python -m warehouser"""

import uvicorn

from warehouser.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("warehouser.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
