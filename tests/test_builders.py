import pytest

from mapperscan.builders import add_mapping_types, resolve_candidates
from mapperscan.config import REFERENCE_LIBRARIES_ENV_VAR
from mapperscan.distributions import requirement_names
from mapperscan.domain import Library
from mapperscan.errors import DuplicateLibraryError, ScanError
from mapperscan.registry import TypeRegistry


@pytest.fixture
def manifest(mappings_package, make_package):
    unrelated = make_package({"__init__.py": "raise RuntimeError('must not be scanned')\n"})
    return [
        Library("my-app", ("web-framework", "mapperscan"), modules=(mappings_package,)),
        Library("web-framework", ("http-lib",), modules=(unrelated,)),
        Library("http-lib", ()),
        Library("mapperscan", (), modules=("mapperscan",)),
    ]


def test_resolve_candidates_uses_given_references():
    libraries = [Library.of("app", ["lib"]), Library.of("lib", ["ref"]), Library.of("ref")]

    assert [library.name for library in resolve_candidates(libraries, {"ref"})] == ["app", "lib"]


def test_resolve_candidates_reads_references_from_environment(monkeypatch):
    monkeypatch.setenv(REFERENCE_LIBRARIES_ENV_VAR, "web-framework")
    libraries = [Library.of("site", ["web-framework"]), Library.of("web-framework")]

    assert [library.name for library in resolve_candidates(libraries)] == ["site"]


def test_resolve_candidates_defaults_to_mapping_library(monkeypatch):
    monkeypatch.delenv(REFERENCE_LIBRARIES_ENV_VAR, raising=False)
    libraries = [Library.of("app", ["MapperScan"]), Library.of("MapperScan"), Library.of("other")]

    assert [library.name for library in resolve_candidates(libraries)] == ["app"]


@pytest.mark.parametrize("spelling", ["Dep_Lib", "dep.lib", "DEP-LIB"])
def test_environment_reference_matches_installed_distribution_name(monkeypatch, spelling):
    monkeypatch.setenv(REFERENCE_LIBRARIES_ENV_VAR, spelling)
    libraries = [Library("app", requirement_names(["Dep_Lib>=1.0"])), Library("dep-lib")]

    assert [library.name for library in resolve_candidates(libraries)] == ["app"]


def test_resolve_candidates_rejects_duplicates():
    with pytest.raises(DuplicateLibraryError):
        resolve_candidates([Library.of("Foo"), Library.of("foo")], {"ref"})


def test_add_mapping_types_scans_only_candidates(manifest, mappings_package):
    registry = add_mapping_types(libraries=manifest, reference_names={"mapperscan"})

    assert {t.cls.__name__ for t in registry.registered_types()} == {
        "OrderProfile",
        "CustomerProfile",
        "UpperName",
        "Trim",
        "ParseInt",
    }
    assert {t.library for t in registry.registered_types()} == {"my-app"}


def test_add_mapping_types_adds_to_given_registry(manifest):
    registry = TypeRegistry()

    assert add_mapping_types(registry, manifest, {"mapperscan"}) is registry
    assert len(registry.profiles()) == 2


def test_add_mapping_types_scans_additional_modules(mappings_package):
    registry = add_mapping_types(
        libraries=[], reference_names={"mapperscan"}, modules=[f"{mappings_package}.nested"]
    )

    assert [cls.__name__ for cls in registry.profiles()] == ["CustomerProfile"]
    assert registry.registered_types()[0].library is None


def test_add_mapping_types_fails_when_candidate_cannot_be_imported(manifest):
    with pytest.raises(ScanError, match="of library web-framework"):
        add_mapping_types(libraries=manifest, reference_names={"mapperscan", "http-lib"})
