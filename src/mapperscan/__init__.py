"""Candidate library resolution and mapping type registration.

mapperscan finds the mapping profiles, value resolvers, member value resolvers and
type converters that an application's libraries define, without importing every
installed distribution. It first resolves the *candidate* libraries, those that
depend directly or transitively on a reference library (by default mapperscan
itself), and scans only those.

Key Features:
    - Case-insensitive dependency manifests with duplicate detection
    - Memoized, cycle-safe reachability over the dependency graph
    - Manifests built from the distributions installed in the running interpreter
    - Scanning and registration of concrete mapping types by kind

Basic Usage:
    >>> from mapperscan.builders import resolve_candidates, add_mapping_types
    >>> from mapperscan.domain import Library
    >>>
    >>> resolve_candidates(
    ...     [Library.of("app", ["lib"]), Library.of("lib", ["mapperscan"]), Library.of("mapperscan")],
    ...     {"mapperscan"},
    ... )
    [Library(name='app', ...), Library(name='lib', ...)]
    >>>
    >>> registry = add_mapping_types()
    >>> registry.profiles()

The package consists of several modules:
    - graph: Index of a dependency manifest with reference libraries marked
    - resolver: Candidate classification and extraction
    - distributions: Manifests from installed distributions
    - scanning: Discovery of mapping types in candidate modules
    - registry: Registration of mapping types by kind
    - builders: High-level entry points
    - domain: Core domain models (Library, Classification, ScannedType)
    - errors: Package-specific exceptions
"""
