"""Base classes identifying the mapping types that scanning registers.

Any concrete subclass of these classes, defined in a candidate library, is
discovered by :mod:`mapperscan.scanning`.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

__all__ = [
    "Profile",
    "ValueResolver",
    "MemberValueResolver",
    "TypeConverter",
    "MAPPING_TYPE_KINDS",
]

S = TypeVar("S")
D = TypeVar("D")
SM = TypeVar("SM")
DM = TypeVar("DM")


class Profile(ABC):
    """A named group of mapping configuration."""

    @abstractmethod
    def configure(self, config: Any) -> None:
        pass


class ValueResolver(ABC, Generic[S, D, DM]):
    """Computes the value of a destination member from the whole source object."""

    @abstractmethod
    def resolve(self, source: S, destination: D, destination_member: DM, context: Any) -> DM:
        pass


class MemberValueResolver(ABC, Generic[S, D, SM, DM]):
    """Computes the value of a destination member from one source member."""

    @abstractmethod
    def resolve(
        self, source: S, destination: D, source_member: SM, destination_member: DM, context: Any
    ) -> DM:
        pass


class TypeConverter(ABC, Generic[S, D]):
    """Converts a whole source object into a destination object."""

    @abstractmethod
    def convert(self, source: S, destination: D, context: Any) -> D:
        pass


MAPPING_TYPE_KINDS: dict[str, type] = {
    "profile": Profile,
    "value_resolver": ValueResolver,
    "member_value_resolver": MemberValueResolver,
    "type_converter": TypeConverter,
}
"""The base class identifying each kind of mapping type."""
