# writer.py
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Tuple

from .build import Artifact

logger = logging.getLogger(__name__)

WRITTEN = "written"
UNCHANGED = "unchanged"


def atomic_write(path: Path, content: bytes) -> None:
    """Write via a temp file in the same directory, then rename over `path`."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def write_artifacts(artifacts: Iterable[Artifact], root: str | Path = ".") -> List[Tuple[Path, str]]:
    """
    Write artifacts under `root`.

    Returns (path, status) pairs; files whose bytes already match are left
    alone and reported as unchanged.
    """
    root_path = Path(root)
    results: List[Tuple[Path, str]] = []
    for artifact in artifacts:
        target = root_path / artifact.path
        if target.is_file() and target.read_bytes() == artifact.content:
            results.append((target, UNCHANGED))
            continue
        atomic_write(target, artifact.content)
        logger.debug("wrote %s (%d bytes)", target, len(artifact.content))
        results.append((target, WRITTEN))
    return results
