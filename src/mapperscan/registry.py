"""Registration of mapping types discovered by scanning or declared explicitly."""

import inspect
from typing import Callable, Iterable, Optional

from mapperscan.domain import ScannedType
from mapperscan.errors import RegistrationError
from mapperscan.scanning import qualified_name, mapping_kinds

__all__ = ["ScannedType", "TypeRegistry"]


class TypeRegistry:
    """Registry of mapping types, supporting registration and filtering by kind.

    Each class is registered at most once per kind, so scanning the same library
    twice, or scanning a type that was also registered explicitly, has no effect.

    Example:
        >>> registry = TypeRegistry()
        >>>
        >>> @registry.registers()
        >>> class OrderProfile(Profile):
        ...     def configure(self, config):
        ...         ...
        >>>
        >>> registry.profiles()
        [<class 'OrderProfile'>]
    """

    def __init__(self):
        self._types: dict[tuple[type, str], ScannedType] = {}

    def register(self, scanned_type: ScannedType):
        """Register a mapping type explicitly.

        Args:
            scanned_type: The type to register. If its class is already registered
                under the same kind, the existing registration is kept.
        """
        self._types.setdefault((scanned_type.cls, scanned_type.kind), scanned_type)

    def register_all(self, scanned_types: Iterable[ScannedType]):
        for scanned_type in scanned_types:
            self.register(scanned_type)

    def registered_types(self, kinds: Optional[set[str]] = None) -> list[ScannedType]:
        """Retrieve registered types, optionally filtered by kind.

        Args:
            kinds: A set of kinds to include. If None, returns all registered types.

        Returns:
            The registered types, in registration order.
        """
        if kinds is None:
            return list(self._types.values())
        return [t for t in self._types.values() if t.kind in kinds]

    def profiles(self) -> list[type]:
        return [t.cls for t in self.registered_types({"profile"})]

    def registers(self) -> Callable:
        """Decorator to register a class under every mapping kind it implements.

        Raises:
            RegistrationError: If the decorated object is not a concrete mapping type.

        Example:
            @registry.registers()
            class UpperCase(ValueResolver[Source, Destination, str]):
                def resolve(self, source, destination, destination_member, context):
                    return source.name.upper()
        """

        def decorator(obj):
            if not inspect.isclass(obj):
                raise RegistrationError(f"{obj} is not a class")
            kinds = mapping_kinds(obj)
            if not kinds:
                raise RegistrationError(
                    f"{qualified_name(obj)} is not a concrete profile, value resolver, "
                    "member value resolver or type converter"
                )
            for kind in kinds:
                self.register(ScannedType(qualified_name(obj), obj, kind))
            return obj

        return decorator

    def __len__(self) -> int:
        return len(self._types)
