import pytest

from mapperscan.errors import RegistrationError
from mapperscan.profiles import MemberValueResolver, Profile, TypeConverter
from mapperscan.registry import ScannedType, TypeRegistry


@pytest.fixture
def registry():
    return TypeRegistry()


@pytest.fixture
def order_profile(registry):
    @registry.registers()
    class OrderProfile(Profile):
        def configure(self, config):
            pass

    return OrderProfile


def test_profile_is_registered(registry, order_profile):
    assert registry.profiles() == [order_profile]
    registered = registry.registered_types()[0]
    assert registered.kind == "profile"
    assert registered.library is None
    assert registered.name.endswith("OrderProfile")


def test_decorator_returns_the_class(order_profile):
    assert order_profile.__name__ == "OrderProfile"


def test_class_implementing_several_interfaces_is_registered_for_each(registry):
    @registry.registers()
    class Parse(TypeConverter[str, int], MemberValueResolver[dict, dict, str, int]):
        def convert(self, source, destination, context):
            return int(source)

        def resolve(self, source, destination, source_member, destination_member, context):
            return int(source_member)

    assert {t.kind for t in registry.registered_types()} == {
        "type_converter",
        "member_value_resolver",
    }
    assert registry.registered_types({"type_converter"})[0].cls is Parse


def test_retrieve_types_by_kind(registry, order_profile):
    @registry.registers()
    class Length(TypeConverter[str, int]):
        def convert(self, source, destination, context):
            return len(source)

    def kinds_in(*kinds):
        return {t.cls for t in registry.registered_types(set(kinds))}

    assert kinds_in() == set()
    assert kinds_in("profile") == {order_profile}
    assert kinds_in("type_converter") == {Length}
    assert kinds_in("profile", "type_converter") == {order_profile, Length}


def test_registration_is_idempotent(registry, order_profile):
    registry.register(ScannedType("elsewhere.OrderProfile", order_profile, "profile", "lib"))

    assert len(registry) == 1
    assert registry.registered_types()[0].library is None


def test_register_all(registry, order_profile):
    class Other(Profile):
        def configure(self, config):
            pass

    registry.register_all(
        [
            ScannedType("a.Other", Other, "profile", "lib"),
            ScannedType("a.OrderProfile", order_profile, "profile", "lib"),
        ]
    )

    assert registry.profiles() == [order_profile, Other]


def test_throws_registration_error_on_non_class(registry):
    with pytest.raises(RegistrationError, match="is not a class"):

        @registry.registers()
        def make_profile():
            pass


def test_throws_registration_error_on_abstract_mapping_type(registry):
    with pytest.raises(RegistrationError, match="is not a concrete profile"):

        @registry.registers()
        class Unfinished(Profile):
            pass
