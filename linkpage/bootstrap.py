"""Scaffold a starter descriptor for a new link page."""

from __future__ import annotations

import logging
import shutil
import typing as typ

from ._constants import ASSETS_DIR, STARTER_DESCRIPTOR

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def scaffold(directory: Path, *, force: bool = False) -> Path | None:
    """Copy the packaged ``index.xml`` into ``directory``.

    Parameters
    ----------
    directory : Path
        Destination folder; created when missing.
    force : bool, optional
        Overwrite an existing ``index.xml``. Defaults to ``False``.

    Returns
    -------
    Path or None
        The written descriptor, or ``None`` when an existing file was kept.
    """
    destination = directory / STARTER_DESCRIPTOR
    if destination.exists() and not force:
        logger.warning("%s already exists; leaving it untouched", destination)
        return None
    directory.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(ASSETS_DIR / STARTER_DESCRIPTOR, destination)
    logger.info("Copied %s to %s", STARTER_DESCRIPTOR, destination)
    return destination


__all__ = ["scaffold"]
