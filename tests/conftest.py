import importlib
import textwrap
import uuid

import pytest

MAPPINGS_PACKAGE = {
    "__init__.py": """
        from mapperscan.profiles import Profile


        class OrderProfile(Profile):
            def configure(self, config):
                pass
    """,
    "resolvers.py": """
        from mapperscan.profiles import MemberValueResolver, Profile, TypeConverter, ValueResolver

        from {package} import OrderProfile


        class UpperName(ValueResolver[dict, dict, str]):
            def resolve(self, source, destination, destination_member, context):
                return source["name"].upper()


        class Trim(MemberValueResolver[dict, dict, str, str]):
            def resolve(self, source, destination, source_member, destination_member, context):
                return source_member.strip()


        class BaseConverter(TypeConverter[str, int]):
            pass


        class ParseInt(BaseConverter):
            def convert(self, source, destination, context):
                return int(source)


        class _HiddenProfile(Profile):
            def configure(self, config):
                pass


        class NotAMapping:
            pass
    """,
    "nested/__init__.py": "",
    "nested/profiles.py": """
        from mapperscan.profiles import Profile


        class CustomerProfile(Profile):
            def configure(self, config):
                pass
    """,
}


@pytest.fixture
def make_package(tmp_path, monkeypatch):
    """Write a package with a unique name to a directory on ``sys.path``.

    File contents may refer to the package's own name as ``{package}``.
    """
    monkeypatch.syspath_prepend(str(tmp_path))

    def make(files: dict[str, str]) -> str:
        package = f"pkg_{uuid.uuid4().hex}"
        for path, content in files.items():
            target = tmp_path / package / path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(textwrap.dedent(content.replace("{package}", package)))
        importlib.invalidate_caches()
        return package

    return make


@pytest.fixture
def mappings_package(make_package):
    return make_package(MAPPINGS_PACKAGE)
