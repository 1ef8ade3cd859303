"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from eduforum.domain.value import Role


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class CamelModel(BaseModel):
    """Response model serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Role allow-lists used by guarded use cases
ADMIN_ONLY: frozenset[Role] = frozenset({Role.ADMIN})
STUDENT_ONLY: frozenset[Role] = frozenset({Role.STUDENT})
