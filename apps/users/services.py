"""User lookups used by the space and reservation use cases."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from django.contrib.auth import get_user_model  # type: ignore

from shared.domain.exceptions import NotFoundError


class UserDirectory(ABC):
    @abstractmethod
    def get_by_id(self, user_id: int) -> Any:
        """Return the user or raise NotFoundError"""
        pass


class DjangoUserDirectory(UserDirectory):

    def get_by_id(self, user_id: int) -> Any:
        user_model = get_user_model()
        user = user_model.objects.filter(pk=user_id).first()
        if user is None:
            raise NotFoundError(f"User with id {user_id} does not exist")
        return user
