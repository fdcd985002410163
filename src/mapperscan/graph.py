"""Index of the libraries in a dependency manifest.

The graph maps each library name, compared without regard to case, to the
:class:`~mapperscan.domain.ClassificationEntry` that memoizes whether the library
depends on one of the reference libraries. Reference libraries are seeded at
construction; every other library starts out unclassified.
"""

from typing import Iterable, Iterator, Optional, FrozenSet

from mapperscan.domain import Library, ClassificationEntry, Classification, library_key
from mapperscan.errors import DuplicateLibraryError

__all__ = ["DependencyGraph"]


class DependencyGraph:
    """
    Libraries keyed by name, with the reference libraries marked.

    The set of libraries is fixed at construction. Only the classification held by
    each entry changes afterwards, and only through
    :class:`~mapperscan.resolver.CandidateResolver`.
    """

    def __init__(self, libraries: Iterable[Library], reference_names: Iterable[str]):
        """
        Args:
            libraries: Every library in the manifest, in manifest order.
            reference_names: Names of the libraries whose dependents are of interest.

        Raises:
            DuplicateLibraryError: If two libraries share a name, ignoring case.
        """
        self._reference_names: FrozenSet[str] = frozenset(
            library_key(name) for name in reference_names
        )
        self._entries: dict[str, ClassificationEntry] = {}

        for library in libraries:
            existing = self._entries.get(library.key)
            if existing is not None:
                raise DuplicateLibraryError(library.name, existing.library.name)
            self._entries[library.key] = self._create_entry(library)

    def _create_entry(self, library: Library) -> ClassificationEntry:
        if library.key in self._reference_names:
            return ClassificationEntry(library, Classification.REFERENCE_MATCH)
        return ClassificationEntry(library)

    @property
    def reference_names(self) -> FrozenSet[str]:
        """Case-folded names of the reference libraries."""
        return self._reference_names

    def entry(self, name: str) -> Optional[ClassificationEntry]:
        """Return the entry for the named library, or None if it is not in the manifest."""
        return self._entries.get(library_key(name))

    def libraries(self) -> list[Library]:
        return [entry.library for entry in self._entries.values()]

    def __contains__(self, name: str) -> bool:
        return library_key(name) in self._entries

    def __iter__(self) -> Iterator[ClassificationEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
