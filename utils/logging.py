import logging

from utils.constants import LOG_LEVEL

logging.basicConfig(
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    level=LOG_LEVEL.upper(),
)

logger = logging.getLogger("foodguide")
