"""
Discovery of mapping types in the modules of candidate libraries.

Scanning imports each top-level module of a library, then every submodule of it,
and inspects the public classes each module defines. Classes a module merely
imports from elsewhere are ignored, so a type is reported once, against the module
that defines it.
"""

import importlib
import inspect
import logging
import pkgutil
import sys
from types import ModuleType
from typing import Iterable, Iterator, Optional

from mapperscan.domain import Library, ScannedType
from mapperscan.errors import ScanError
from mapperscan.profiles import MAPPING_TYPE_KINDS

__all__ = [
    "qualified_name",
    "mapping_kinds",
    "find_mapping_types",
    "scan_modules",
    "scan_libraries",
]

logger = logging.getLogger(__name__)


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def mapping_kinds(cls: type) -> list[str]:
    """Return the kinds of mapping type a class can be registered as.

    Abstract classes, and the mapping base classes themselves, have no kinds.

    Example:
        >>> class Both(TypeConverter[str, int], ValueResolver[str, int, int]):
        ...     def convert(self, source, destination, context):
        ...         return int(source)
        ...     def resolve(self, source, destination, destination_member, context):
        ...         return len(source)
        >>> mapping_kinds(Both)
        ['value_resolver', 'type_converter']
    """
    if not inspect.isclass(cls) or inspect.isabstract(cls):
        return []
    return [
        kind
        for kind, base in MAPPING_TYPE_KINDS.items()
        if cls is not base and issubclass(cls, base)
    ]


def find_mapping_types(classes: Iterable[type], library: Optional[str] = None) -> list[ScannedType]:
    """Select the mapping types from a collection of classes.

    A class implementing several mapping interfaces is reported once for each.
    """
    return [
        ScannedType(qualified_name(cls), cls, kind, library)
        for cls in classes
        for kind in mapping_kinds(cls)
    ]


def scan_modules(module_names: Iterable[str], library: Optional[str] = None) -> list[ScannedType]:
    """Import the named modules and their submodules, and find the mapping types they define.

    Args:
        module_names: Names of the modules to scan.
        library: Name of the library the modules belong to, recorded on each result.

    Raises:
        ScanError: If a module or submodule cannot be imported.
    """
    scanned_types: list[ScannedType] = []
    for module_name in module_names:
        for module in _walk(module_name, library):
            found = find_mapping_types(_defined_classes(module), library)
            if found:
                logger.debug("Found %d mapping types in %s", len(found), module.__name__)
            scanned_types.extend(found)
    return scanned_types


def scan_libraries(libraries: Iterable[Library]) -> list[ScannedType]:
    """Scan the top-level modules of each library for mapping types.

    Raises:
        ScanError: If a module of any library cannot be imported.
    """
    scanned_types: list[ScannedType] = []
    for library in libraries:
        if not library.modules:
            logger.warning("Library %s has no importable modules to scan", library.name)
            continue
        scanned_types.extend(scan_modules(library.modules, library.name))
    logger.info("Found %d mapping types", len(scanned_types))
    return scanned_types


def _walk(module_name: str, library: Optional[str]) -> Iterator[ModuleType]:
    module = _import(module_name, library)
    yield module

    if not hasattr(module, "__path__"):
        return

    def on_error(name: str):
        raise ScanError(_import_failure_message(name, library)) from sys.exc_info()[1]

    for module_info in pkgutil.walk_packages(
        module.__path__, prefix=f"{module.__name__}.", onerror=on_error
    ):
        yield _import(module_info.name, library)


def _import(module_name: str, library: Optional[str]) -> ModuleType:
    logger.debug("Scanning module %s", module_name)
    try:
        return importlib.import_module(module_name)
    except Exception as e:
        raise ScanError(_import_failure_message(module_name, library)) from e


def _import_failure_message(module_name: str, library: Optional[str]) -> str:
    if library is None:
        return f"Unable to import module {module_name} for scanning"
    return f"Unable to import module {module_name} of library {library} for scanning"


def _defined_classes(module: ModuleType) -> list[type]:
    return [
        member
        for name, member in vars(module).items()
        if inspect.isclass(member)
        and member.__module__ == module.__name__
        and not name.startswith("_")
    ]
