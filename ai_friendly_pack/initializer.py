"""Copy the bundled template tree into a target directory."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable

from .cli_shared import TEMPLATE_DIRNAME, FilesystemError, MissingTemplateError

CopyHook = Callable[[Path], None]


def _package_root() -> Path:
    return Path(__file__).resolve().parent


def template_root() -> Path:
    return _package_root() / TEMPLATE_DIRNAME


def _list_dir(path: Path) -> list[Path]:
    if not path.exists():
        raise FilesystemError(f"missing source path: {path}")
    if not path.is_dir():
        raise FilesystemError(f"source path is not a directory: {path}")
    try:
        return sorted(path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FilesystemError(f"cannot read source directory {path}: {e}") from e


def _copy_file(src: Path, dst: Path, on_copy: CopyHook | None) -> Path:
    # existing files are truncated and rewritten
    shutil.copyfile(src, dst)
    if on_copy is not None:
        on_copy(dst)
    return dst


def copy_tree(source: Path, destination: Path, *, on_copy: CopyHook | None = None) -> list[Path]:
    """Mirror the contents of ``source`` into ``destination``.

    Missing directories are created, existing files are overwritten without
    warning and ``on_copy`` is called once per file written. Returns the
    destination paths of the copied files.
    """
    entries = _list_dir(source)
    destination.mkdir(parents=True, exist_ok=True)

    copied: list[Path] = []
    for entry in entries:
        target = destination / entry.name
        if entry.is_dir():
            copied.extend(copy_tree(entry, target, on_copy=on_copy))
        else:
            copied.append(_copy_file(entry, target, on_copy))
    return copied


def require_template_dir(template_dir: Path) -> Path:
    if not template_dir.is_dir():
        raise MissingTemplateError("Template folder not found in package.")
    return template_dir


def copy_template(
    template_dir: Path,
    target_dir: Path,
    *,
    on_copy: CopyHook | None = None,
) -> list[Path]:
    require_template_dir(template_dir)

    copied: list[Path] = []
    for item in _list_dir(template_dir):
        target = target_dir / item.name
        if item.is_dir():
            copied.extend(copy_tree(item, target, on_copy=on_copy))
        else:
            copied.append(_copy_file(item, target, on_copy))
    return copied
