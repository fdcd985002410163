"""Configuration of the reference libraries used to resolve candidates."""

import os
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Mapping, Optional

from mapperscan.distributions import normalize_name
from mapperscan.errors import ConfigurationError

__all__ = [
    "DEFAULT_REFERENCE_LIBRARIES",
    "REFERENCE_LIBRARIES_ENV_VAR",
    "ResolverSettings",
]

DEFAULT_REFERENCE_LIBRARIES: FrozenSet[str] = frozenset({normalize_name("mapperscan")})
"""Libraries whose dependents are always candidates: the mapping library itself."""

REFERENCE_LIBRARIES_ENV_VAR = "MAPPERSCAN_REFERENCE_LIBRARIES"


@dataclass(frozen=True)
class ResolverSettings:
    """Settings for a candidate resolution.

    Attributes:
        reference_libraries: Names of the libraries whose dependents are scanned.
    """

    reference_libraries: FrozenSet[str] = DEFAULT_REFERENCE_LIBRARIES

    @staticmethod
    def with_references(names: Iterable[str]) -> "ResolverSettings":
        """Settings with the given reference libraries added to the defaults.

        Names are normalized like installed distribution names, so ``Foo_Bar``,
        ``foo.bar`` and ``foo-bar`` all refer to the same library.

        Raises:
            ConfigurationError: If any name is blank.
        """
        extra = [name.strip() for name in names]
        if any(not name for name in extra):
            raise ConfigurationError("Reference library names must not be blank")
        return ResolverSettings(
            DEFAULT_REFERENCE_LIBRARIES.union(normalize_name(name) for name in extra)
        )

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "ResolverSettings":
        """Read settings from the environment.

        ``MAPPERSCAN_REFERENCE_LIBRARIES`` holds a comma-separated list of extra
        reference library names. A trailing comma is tolerated; an empty entry
        between two commas is not.

        Raises:
            ConfigurationError: If the variable contains a blank entry.
        """
        environ = os.environ if environ is None else environ
        value = environ.get(REFERENCE_LIBRARIES_ENV_VAR, "").strip()
        if not value:
            return ResolverSettings()

        names = value.rstrip(",").split(",")
        try:
            return ResolverSettings.with_references(names)
        except ConfigurationError as e:
            raise ConfigurationError(
                f"Invalid value for {REFERENCE_LIBRARIES_ENV_VAR}: {value!r}"
            ) from e
