__all__ = [
    "MapperScanError",
    "ResolutionError",
    "DuplicateLibraryError",
    "ScanError",
    "ConfigurationError",
    "RegistrationError",
]


class MapperScanError(Exception):
    """Base class for all errors raised by mapperscan."""

    pass


class ResolutionError(MapperScanError):
    """Raised when the candidate libraries cannot be resolved from a dependency manifest."""

    pass


class DuplicateLibraryError(ResolutionError):
    """Raised when two libraries in one manifest share a name, ignoring case."""

    def __init__(self, name: str, existing_name: str):
        super().__init__(
            f"A duplicate entry for library reference {name} was found "
            f"(already registered as {existing_name}). Please check that all package "
            "references in all projects use the same casing for the same package references."
        )
        self.name = name
        self.existing_name = existing_name


class ScanError(MapperScanError):
    """Raised when a candidate module cannot be imported for scanning."""

    pass


class ConfigurationError(MapperScanError):
    """Raised when configuration values are invalid."""

    pass


class RegistrationError(MapperScanError):
    """Raised when an object cannot be registered as a mapping type."""

    pass
