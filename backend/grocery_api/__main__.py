import logging

import uvicorn

from grocery_api.config import HOST, LOG_LEVEL, PORT
from grocery_api.logging_config import setup_logging

logger = logging.getLogger("grocery_api")


def main() -> None:
    setup_logging(LOG_LEVEL)
    logger.info("Server is running on http://%s:%d", HOST, PORT)
    uvicorn.run("grocery_api.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
