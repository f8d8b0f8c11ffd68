"""Resolution of a bare reference into an entity

References coming from input (an item code, an item id, a customer id) are
resolved once at the boundary into either ``Resolved`` or ``Unresolved``;
downstream code branches on the variant instead of re-checking types.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Resolved(Generic[T]):
    entity: T

    @property
    def ref(self) -> Any:
        return self.entity.id


@dataclass(frozen=True)
class Unresolved:
    ref: Any


Resolution = Union[Resolved[T], Unresolved]


def resolve(ref: Any, entity) -> "Resolution":
    """Wrap a lookup outcome: entity found -> Resolved, None -> Unresolved"""
    if entity is None:
        return Unresolved(ref)
    return Resolved(entity)
