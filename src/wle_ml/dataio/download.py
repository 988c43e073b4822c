import logging
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1 << 16


class DataDownloadError(RuntimeError):
    """Raised when a dataset cannot be fetched from its remote location."""


def fetch_dataset(url: str, destination: str | Path, timeout: float = 60.0) -> Path:
    """
    Download ``url`` to ``destination`` unless the file is already present.

    The body is streamed into a sibling ``.part`` file which is renamed
    into place once complete, so an interrupted download never leaves a
    truncated CSV behind.

    Raises:
        DataDownloadError: On connection failure or a non-2xx response.
    """
    destination = Path(destination)
    if destination.exists():
        logger.info(f"Using cached {destination}")
        return destination

    destination.parent.mkdir(parents=True, exist_ok=True)
    partial = destination.with_name(destination.name + ".part")

    logger.info(f"Fetching {url} -> {destination}")
    try:
        with requests.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            with open(partial, "wb") as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    f.write(chunk)
    except requests.RequestException as e:
        partial.unlink(missing_ok=True)
        raise DataDownloadError(f"Failed to download {url}: {e}") from e

    partial.replace(destination)
    logger.info(f"Saved {destination.stat().st_size} bytes to {destination}")
    return destination
