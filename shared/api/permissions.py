"""Permission helpers shared by the API layers."""

from __future__ import annotations


def is_staff(user) -> bool:  # type: ignore
    return bool(getattr(user, "is_staff", False) or getattr(user, "is_superuser", False))
