import logging

import uvicorn

from larder.api.api_run import app
from larder.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("larder_app").info("Serving on http://localhost:%s", APP_PORT)
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
