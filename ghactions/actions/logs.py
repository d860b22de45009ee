"""
Helpers for workflow run log archives.
"""

import io
import logging
import zipfile
from typing import Dict

logger = logging.getLogger(__name__)


def extract_log_archive(content: bytes) -> Dict[str, str]:
    """Unpack a workflow run log archive.

    Args:
        content: Zip archive returned by the run logs endpoint

    Returns:
        Dict mapping archive file names (``<job>/<step>.txt``) to log text

    Raises:
        ValueError: If content is not a zip archive
    """
    if not isinstance(content, (bytes, bytearray)):
        raise ValueError(f"Expected log archive bytes, got {type(content).__name__}")

    logs: Dict[str, str] = {}
    try:
        with zipfile.ZipFile(io.BytesIO(content)) as archive:
            for info in archive.infolist():
                if info.is_dir():
                    continue
                with archive.open(info) as log_file:
                    logs[info.filename] = log_file.read().decode("utf-8", errors="replace")
    except zipfile.BadZipFile as e:
        logger.error(f"Error extracting workflow logs: {e}")
        raise ValueError(f"Invalid workflow log archive: {e}") from e

    return logs
