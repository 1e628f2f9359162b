from __future__ import annotations

from ai_friendly_pack.initializer import template_root


def test_bundled_template_contains_no_forbidden_artifacts() -> None:
    root = template_root()
    paths = [p.relative_to(root).as_posix() for p in root.rglob("*")]

    forbidden: list[str] = []
    for path in paths:
        name = path.rsplit("/", 1)[-1]
        if name == ".DS_Store":
            forbidden.append(path)
            continue
        if name == "__pycache__" or path.endswith(".pyc"):
            forbidden.append(path)
            continue
        if name.startswith("."):
            # dotfiles are not collected as package data
            forbidden.append(path)
            continue

    assert forbidden == [], f"forbidden template artifacts: {forbidden}"


def test_bundled_template_has_no_symlinks() -> None:
    root = template_root()
    links = [p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_symlink()]
    assert links == []
