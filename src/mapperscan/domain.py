"""Domain models used throughout the package."""

import enum
from dataclasses import dataclass
from typing import Iterable, Optional


def library_key(name: str) -> str:
    """Return the key used to compare library names.

    Library names are compared without regard to case, so ``"Foo"`` and ``"foo"``
    refer to the same library.
    """
    return name.casefold()


@dataclass(frozen=True)
class Library:
    """A named unit in a dependency manifest.

    Attributes:
        name: The library name, unique within a manifest ignoring case.
        dependencies: Names of the libraries this library depends on, in declaration
            order. They need not be present in the manifest.
        kind: Classification tag of the record, e.g. ``"package"`` or ``"project"``.
        modules: Top-level modules importable from this library, used when scanning
            it for mapping types.
    """

    name: str
    dependencies: tuple[str, ...] = ()
    kind: str = "package"
    modules: tuple[str, ...] = ()

    @property
    def key(self) -> str:
        return library_key(self.name)

    @staticmethod
    def of(name: str, dependencies: Iterable[str] = ()) -> "Library":
        """Build a library from a name and its dependency names.

        Example:
            >>> Library.of("A", ["B", "C"])
            Library(name='A', dependencies=('B', 'C'), kind='package', modules=())
        """
        return Library(name, tuple(dependencies))


class Classification(enum.Enum):
    """State of a library during and after candidate resolution."""

    UNKNOWN = 0
    CANDIDATE = 1
    NOT_CANDIDATE = 2
    REFERENCE_MATCH = 3
    IN_PROGRESS = 4

    @property
    def is_final(self) -> bool:
        return self not in (Classification.UNKNOWN, Classification.IN_PROGRESS)

    @property
    def reaches_reference(self) -> bool:
        return self in (Classification.CANDIDATE, Classification.REFERENCE_MATCH)


@dataclass
class ClassificationEntry:
    """Memoized classification of one library, owned by a single dependency graph."""

    library: Library
    classification: Classification = Classification.UNKNOWN

    @property
    def key(self) -> str:
        return self.library.key

    def __str__(self) -> str:
        return f"Library: {self.library.name}, Classification: {self.classification.name}"


@dataclass(frozen=True)
class ScannedType:
    """A mapping type discovered by scanning, or registered explicitly.

    Attributes:
        name: The qualified name of the class (``module.QualName``).
        cls: The class itself.
        kind: One of ``profile``, ``value_resolver``, ``member_value_resolver`` or
            ``type_converter``.
        library: Name of the library the class was found in, if it was found by scanning.
    """

    name: str
    cls: type
    kind: str
    library: Optional[str] = None
