"""
Plugin work directory: reset before each planning pass.

Cleanup is best effort: a directory that cannot be removed or
re-created is left as it is and planning continues.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def force_clean(directory: Path) -> bool:
    """Remove whatever sits at ``directory`` and create it again, non-recursively.

    A file or symlink at the path is unlinked; a symlinked directory is
    not followed.

    Returns:
        True if the directory was created fresh, False if either step
        failed and the existing state was kept.
    """
    try:
        if directory.is_symlink() or directory.is_file():
            directory.unlink()
        else:
            shutil.rmtree(directory)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.debug("Could not remove %s: %s", directory, e)

    try:
        directory.mkdir()
    except OSError as e:
        logger.debug("Could not create %s: %s", directory, e)
        return False

    return True
