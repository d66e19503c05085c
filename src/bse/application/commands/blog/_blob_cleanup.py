"""Best-effort removal of stored images."""

import logging
from collections.abc import Iterable

from bse.application.ports import ImageStorage

logger = logging.getLogger(__name__)


async def discard_images(storage: ImageStorage, urls: Iterable[str]) -> None:
    """Delete each URL, logging rather than raising on failure."""
    for url in urls:
        try:
            await storage.delete(url)
        except Exception:  # NOQA: BLE001
            logger.warning("Could not delete stored image %s", url, exc_info=True)
