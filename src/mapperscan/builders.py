"""High level entry points for resolving candidates and registering mapping types."""

import logging
from typing import Iterable, Optional

from mapperscan.config import ResolverSettings
from mapperscan.distributions import installed_libraries
from mapperscan.domain import Library
from mapperscan.registry import TypeRegistry
from mapperscan.resolver import CandidateResolver
from mapperscan.scanning import scan_libraries, scan_modules

__all__ = ["resolve_candidates", "add_mapping_types"]

logger = logging.getLogger(__name__)


def resolve_candidates(
    libraries: Optional[Iterable[Library]] = None,
    reference_names: Optional[Iterable[str]] = None,
) -> list[Library]:
    """Find the libraries that depend, directly or transitively, on a reference library.

    Args:
        libraries: The dependency manifest. If None, the distributions installed in
            the running interpreter are used.
        reference_names: Names of the reference libraries. If None, they are read
            from the environment (see :meth:`ResolverSettings.from_env`).

    Returns:
        The candidate libraries, in manifest order. Reference libraries are excluded.

    Raises:
        DuplicateLibraryError: If two libraries in the manifest share a name, ignoring case.
        ConfigurationError: If the reference libraries configured in the environment are invalid.
    """
    if libraries is None:
        libraries = installed_libraries()
    if reference_names is None:
        reference_names = ResolverSettings.from_env().reference_libraries

    resolver = CandidateResolver(libraries, reference_names)
    candidates = list(resolver.get_candidates())
    logger.info(
        "Resolved %d candidate libraries out of %d", len(candidates), len(resolver.graph)
    )
    return candidates


def add_mapping_types(
    registry: Optional[TypeRegistry] = None,
    libraries: Optional[Iterable[Library]] = None,
    reference_names: Optional[Iterable[str]] = None,
    modules: Iterable[str] = (),
) -> TypeRegistry:
    """Scan the candidate libraries and register the mapping types they define.

    Args:
        registry: The registry to add to. If None, a new registry is created.
        libraries: The dependency manifest, as for :func:`resolve_candidates`.
        reference_names: The reference libraries, as for :func:`resolve_candidates`.
        modules: Names of additional modules to scan, whether or not they belong to
            a candidate library.

    Returns:
        The registry, with every discovered profile, value resolver, member value
        resolver and type converter registered.

    Raises:
        DuplicateLibraryError: If two libraries in the manifest share a name, ignoring case.
        ScanError: If a module cannot be imported.

    Example:
        >>> registry = add_mapping_types(modules=["myapp.mappings"])
        >>> registry.profiles()
    """
    registry = registry if registry is not None else TypeRegistry()

    candidates = resolve_candidates(libraries, reference_names)
    registry.register_all(scan_libraries(candidates))
    registry.register_all(scan_modules(modules))

    return registry
