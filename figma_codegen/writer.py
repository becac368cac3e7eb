"""Persist a generated file map to disk."""

import logging
import os
from typing import Dict, List

logger = logging.getLogger(__name__)


def write_files(files: Dict[str, str], output_dir: str) -> List[str]:
    """Write {relative path: content} under output_dir as UTF-8 text.

    Parent directories are created as needed; filesystem errors propagate.

    Returns:
        Written file paths, in the map's order
    """
    written: List[str] = []
    for relative_path, content in files.items():
        file_path = os.path.join(output_dir, *relative_path.split("/"))
        os.makedirs(os.path.dirname(file_path) or ".", exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)
        written.append(file_path)
        logger.info(f"Wrote {file_path}")

    logger.info(f"write_files: {len(written)} files -> {os.path.abspath(output_dir)}")
    return written
