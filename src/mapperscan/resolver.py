"""
Resolution of the candidate libraries in a dependency manifest.

A library is a *candidate* if it depends, directly or transitively, on one of the
reference libraries without being a reference library itself. Only candidates can
declare mapping types, so only they need to be scanned.

Classification is a memoized depth-first search along dependency edges, seeded by
the reference libraries. The search keeps an explicit stack rather than recursing,
and finalizes each strongly connected component of the graph as a unit: libraries
that depend on each other in a cycle share one classification, and an edge back
into a library that is still being visited contributes nothing to it.
"""

import logging
from typing import Iterable, Iterator

from mapperscan.domain import Library, Classification, ClassificationEntry
from mapperscan.graph import DependencyGraph

__all__ = ["CandidateResolver"]

logger = logging.getLogger(__name__)


class CandidateResolver:
    """Classify the libraries of a manifest against a set of reference libraries.

    The resolver memoizes classifications as it goes and is therefore not safe for
    concurrent use until :meth:`resolve_all` has been called.

    Example:
        >>> resolver = CandidateResolver(
        ...     [Library.of("A", ["B"]), Library.of("B", ["C"]), Library.of("C"), Library.of("D")],
        ...     {"C"},
        ... )
        >>> resolver.candidate_names()
        ['A', 'B']
    """

    def __init__(self, libraries: Iterable[Library], reference_names: Iterable[str]):
        """
        Args:
            libraries: Every library in the manifest.
            reference_names: Names of the reference libraries, compared ignoring case.

        Raises:
            DuplicateLibraryError: If two libraries share a name, ignoring case.
        """
        self.graph = DependencyGraph(libraries, reference_names)

    def classify(self, name: str) -> Classification:
        """Classify the named library, visiting its unclassified dependencies as needed.

        Names that are not in the manifest are external libraries, and are never
        candidates.

        Returns:
            ``CANDIDATE``, ``NOT_CANDIDATE`` or ``REFERENCE_MATCH``.
        """
        entry = self.graph.entry(name)
        if entry is None:
            return Classification.NOT_CANDIDATE
        if entry.classification is Classification.UNKNOWN:
            self._resolve_from(entry)
        return entry.classification

    def get_candidates(self) -> Iterator[Library]:
        """Yield the candidate libraries in manifest order.

        Reference libraries are never yielded, even when they depend on one another.
        """
        for entry in self.graph:
            if self.classify(entry.library.name) is Classification.CANDIDATE:
                yield entry.library

    def candidate_names(self) -> list[str]:
        return [library.name for library in self.get_candidates()]

    def resolve_all(self) -> dict[str, Classification]:
        """Classify every library eagerly.

        Once this returns, no further classification state changes, and the resolver
        may be read from several threads.

        Returns:
            The classification of each library, keyed by library name in manifest order.
        """
        classifications = {
            entry.library.name: self.classify(entry.library.name) for entry in self.graph
        }
        logger.debug(
            "Classified %d libraries, %d candidates",
            len(classifications),
            sum(1 for c in classifications.values() if c is Classification.CANDIDATE),
        )
        return classifications

    def _resolve_from(self, root: ClassificationEntry):
        """
        Classify ``root`` and every unclassified library reachable from it.

        This is Tarjan's strongly connected components algorithm run with an explicit
        work stack. Each visited entry is marked ``IN_PROGRESS`` until its component is
        complete, at which point every member becomes ``CANDIDATE`` if any member has a
        dependency that reaches a reference library, or ``NOT_CANDIDATE`` otherwise.
        """
        index: dict[str, int] = {}
        lowlink: dict[str, int] = {}
        reaches_reference: set[str] = set()
        visiting: list[ClassificationEntry] = []

        def enter(entry: ClassificationEntry):
            index[entry.key] = lowlink[entry.key] = len(index)
            entry.classification = Classification.IN_PROGRESS
            visiting.append(entry)
            work.append((entry, iter(entry.library.dependencies)))

        work: list[tuple[ClassificationEntry, Iterator[str]]] = []
        enter(root)

        while work:
            entry, dependency_names = work[-1]

            next_entry = None
            if entry.key not in reaches_reference:
                for dependency_name in dependency_names:
                    dependency = self.graph.entry(dependency_name)
                    if dependency is None:
                        continue
                    if dependency.classification is Classification.UNKNOWN:
                        next_entry = dependency
                        break
                    if dependency.classification is Classification.IN_PROGRESS:
                        lowlink[entry.key] = min(lowlink[entry.key], index[dependency.key])
                        continue
                    if dependency.classification.reaches_reference:
                        reaches_reference.add(entry.key)
                        break

            if next_entry is not None:
                enter(next_entry)
                continue

            work.pop()
            if lowlink[entry.key] == index[entry.key]:
                self._complete_component(entry, visiting, reaches_reference)

            if work:
                parent = work[-1][0]
                if entry.classification is Classification.IN_PROGRESS:
                    lowlink[parent.key] = min(lowlink[parent.key], lowlink[entry.key])
                elif entry.classification is Classification.CANDIDATE:
                    reaches_reference.add(parent.key)

    @staticmethod
    def _complete_component(
        root: ClassificationEntry,
        visiting: list[ClassificationEntry],
        reaches_reference: set[str],
    ):
        component = []
        while True:
            member = visiting.pop()
            component.append(member)
            if member is root:
                break

        classification = (
            Classification.CANDIDATE
            if any(member.key in reaches_reference for member in component)
            else Classification.NOT_CANDIDATE
        )
        for member in component:
            member.classification = classification

        if len(component) > 1:
            logger.debug(
                "Dependency cycle %s classified as %s",
                [member.library.name for member in component],
                classification.name,
            )
