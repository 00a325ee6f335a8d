"""Run the API with uvicorn: ``python -m plant_tracker`` (HOST/PORT from env)."""

import uvicorn

from plant_tracker.core.config import get_settings
from plant_tracker.main import create_application


def main() -> None:
    settings = get_settings()
    app = create_application(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
