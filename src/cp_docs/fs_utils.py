"""Filesystem utilities for the collector."""

from __future__ import annotations

import errno
import os
import shutil
from pathlib import Path

from .errors import DestinationResetError
from .paths import is_within


def _replace_with_link(link: Path, dest_path: Path) -> None:
    if dest_path.is_symlink() or dest_path.is_file():
        dest_path.unlink()
    elif dest_path.is_dir():
        shutil.rmtree(dest_path)
    os.symlink(os.readlink(link), dest_path, target_is_directory=link.is_dir())


def copy_tree(src: Path, dest: Path, follow_symlinks: bool = False) -> None:
    """Recursively copy the contents of src into dest.

    Creates dest (and its ancestors) if absent. Existing files are
    overwritten; nothing already in dest is removed. Symlinks are recreated
    as links unless follow_symlinks is set, in which case their targets are
    copied. Errors propagate as OSError and may leave a partial copy.
    """
    dest.mkdir(parents=True, exist_ok=True)

    for entry in sorted(src.iterdir()):
        dest_path = dest / entry.name

        if entry.is_symlink() and not follow_symlinks:
            _replace_with_link(entry, dest_path)
        elif entry.is_dir():
            if dest_path.is_symlink():
                dest_path.unlink()
            copy_tree(entry, dest_path, follow_symlinks)
        else:
            # copy2 would write through a link or into a directory of the same name
            if dest_path.is_symlink():
                dest_path.unlink()
            elif dest_path.is_dir():
                raise IsADirectoryError(errno.EISDIR, "Cannot overwrite directory with file", str(dest_path))
            shutil.copy2(entry, dest_path)


def reset_destination(path: Path, protect: Path | None = None) -> Path:
    """Remove path if it exists and recreate it as an empty directory.

    Refuses to clear ``protect`` (the scan root) or any of its ancestors.
    Returns the absolute destination path.
    """
    target = Path(os.path.abspath(path))

    if protect is not None and is_within(protect.resolve(), target.resolve()):
        raise DestinationResetError(f"Refusing to clear {target}: it contains the scan root {protect}", target)

    try:
        if target.is_symlink() or target.is_file():
            target.unlink()
        elif target.exists():
            shutil.rmtree(target)
        target.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise DestinationResetError(f"Could not reset target dir {target}: {err}", target) from err

    return target
