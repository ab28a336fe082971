from __future__ import annotations

from pathlib import Path

_SEPARATORS = ("/", "\\", "\x00")


def safe_segment(value: str, label: str = "id") -> str:
    """Return value if it is usable as a single path component, else raise ValueError."""
    if not value or value in (".", "..") or ".." in value or any(sep in value for sep in _SEPARATORS):
        raise ValueError(f"Invalid {label}: {value!r}")
    return value


def resolve_within(root: Path, relative: str) -> Path:
    """Join relative onto root and refuse anything that lands outside it."""
    base = root.resolve()
    target = (base / relative).resolve()
    if target != base and base not in target.parents:
        raise ValueError(f"Path escapes storage root: {relative!r}")
    return target
