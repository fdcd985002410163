"""Build dependency manifests from the distributions installed in the running interpreter.

Each installed distribution becomes a :class:`~mapperscan.domain.Library` whose
dependencies are the names from its ``Requires-Dist`` metadata. Requirements that
only apply to an optional extra are skipped, since the extra may not be installed.
"""

import importlib.metadata
import json
import logging
import re
from collections import defaultdict
from typing import Iterable, Optional

from mapperscan.domain import Library

__all__ = [
    "installed_libraries",
    "library_from_distribution",
    "normalize_name",
    "requirement_names",
]

logger = logging.getLogger(__name__)

_REQUIREMENT_NAME_RE = re.compile(r"^([A-Za-z0-9]([A-Za-z0-9._-]*[A-Za-z0-9])?)")
_EXTRA_MARKER_RE = re.compile(r"\bextra\s*==")


def normalize_name(name: str) -> str:
    """Normalize a distribution name per PEP 503."""
    return re.sub(r"[-_.]+", "-", name).lower()


def requirement_names(requirements: Optional[Iterable[str]]) -> tuple[str, ...]:
    """Extract normalized distribution names from PEP 508 requirement strings.

    Requirements guarded by an ``extra ==`` marker are skipped. Each name appears
    once, in the order first declared.

    Example:
        >>> requirement_names(["Foo_Bar>=1.0", "baz; extra == 'test'", "foo-bar[x]"])
        ('foo-bar',)
    """
    names: dict[str, None] = {}
    for requirement in requirements or ():
        requirement, _, marker = requirement.partition(";")
        if _EXTRA_MARKER_RE.search(marker):
            continue
        match = _REQUIREMENT_NAME_RE.match(requirement.strip())
        if match:
            names[normalize_name(match.group(1))] = None
    return tuple(names)


def library_from_distribution(
    distribution: importlib.metadata.Distribution,
    modules_by_distribution: Optional[dict[str, list[str]]] = None,
) -> Library:
    """Describe an installed distribution as a library.

    Args:
        distribution: The installed distribution.
        modules_by_distribution: Top-level modules keyed by normalized distribution
            name, used when the distribution has no ``top_level.txt``.
    """
    name = normalize_name(distribution.metadata["Name"])
    return Library(
        name,
        requirement_names(distribution.requires),
        "project" if _is_editable(distribution) else "package",
        _top_level_modules(distribution, (modules_by_distribution or {}).get(name, [])),
    )


def installed_libraries() -> list[Library]:
    """Describe every distribution visible to the running interpreter.

    A distribution installed more than once on ``sys.path`` is listed once per
    installation, so that the resolver reports it as a duplicate.
    """
    modules_by_distribution = _modules_by_distribution()
    libraries = [
        library_from_distribution(distribution, modules_by_distribution)
        for distribution in importlib.metadata.distributions()
        if distribution.metadata.get("Name")
    ]
    logger.info("Found %d installed distributions", len(libraries))
    return libraries


def _modules_by_distribution() -> dict[str, list[str]]:
    modules: dict[str, list[str]] = defaultdict(list)
    for module_name, distribution_names in importlib.metadata.packages_distributions().items():
        for distribution_name in distribution_names:
            modules[normalize_name(distribution_name)].append(module_name)
    return modules


def _top_level_modules(
    distribution: importlib.metadata.Distribution, fallback: list[str]
) -> tuple[str, ...]:
    top_level = distribution.read_text("top_level.txt")
    if top_level:
        names = [line.strip() for line in top_level.splitlines()]
    else:
        names = fallback
    return tuple(
        sorted({name for name in names if name.isidentifier() and not name.startswith("_")})
    )


def _is_editable(distribution: importlib.metadata.Distribution) -> bool:
    direct_url = distribution.read_text("direct_url.json")
    if not direct_url:
        return False
    try:
        return bool(json.loads(direct_url).get("dir_info", {}).get("editable", False))
    except ValueError:
        logger.warning(
            "Ignoring malformed direct_url.json for %s", distribution.metadata["Name"]
        )
        return False
