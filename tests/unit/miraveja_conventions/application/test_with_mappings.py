"""Unit tests for the built-in mapping selectors."""

from miraveja_conventions.application import with_mappings
from miraveja_conventions.domain import GenericParameter, InterfaceDescriptor, TypeDescriptor

MODULE = "app.services"
OTHER_MODULE = "app.contracts"

T = GenericParameter(name="T", position=0)
U = GenericParameter(name="U", position=1)
STRING = TypeDescriptor(name="str", declaring_module="builtins")
INT = TypeDescriptor(name="int", declaring_module="builtins")


def interface(name, *arguments, arity=None, module=MODULE):
    return InterfaceDescriptor(
        name=name,
        declaring_module=module,
        generic_arity=len(arguments) if arity is None else arity,
        type_arguments=arguments,
    )


def concrete(name, *interfaces, parameters=(), module=MODULE):
    return TypeDescriptor(
        name=name,
        declaring_module=module,
        generic_parameters=parameters,
        implemented_interfaces=interfaces,
    )


class TestNone:
    """Test cases for with_mappings.none."""

    def test_returns_nothing_for_any_type(self):
        """Test that no type is mapped from anything."""
        assert with_mappings.none(concrete("Plain")) == []
        assert with_mappings.none(concrete("Service", interface("IService"))) == []
        assert with_mappings.none(concrete("Pair", interface("IPair", T, U), parameters=(T, U))) == []


class TestFromAllInterfaces:
    """Test cases for with_mappings.from_all_interfaces."""

    def test_type_without_interfaces(self):
        """Test that a type implementing nothing maps from nothing."""
        assert with_mappings.from_all_interfaces(concrete("Plain")) == []

    def test_closed_type_returns_interfaces_unchanged(self):
        """Test that a closed type maps from every interface, in order."""
        interfaces = (
            interface("IAnotherInterface"),
            interface("ITestObject"),
            interface("SupportsInt", module="typing"),
        )
        descriptor = concrete("TestObject", *interfaces)

        result = with_mappings.from_all_interfaces(descriptor)

        assert result == list(interfaces)
        assert all(actual is expected for actual, expected in zip(result, interfaces))

    def test_closed_type_keeps_closed_generic_interfaces(self):
        """Test that closed generic interfaces keep their arguments."""
        list_of_string = interface("list", STRING, module="builtins")
        interfaces = (
            interface("IGenericTestObject", STRING, INT),
            interface("SupportsAbs", INT, module="typing"),
            interface("Iterable", list_of_string, module="collections.abc"),
        )
        descriptor = concrete("ClosedGenericTestObject", *interfaces)

        result = with_mappings.from_all_interfaces(descriptor)

        assert result == list(interfaces)
        assert result[0].type_arguments == (STRING, INT)

    def test_open_type_maps_from_unbound_interface(self):
        """Test that an interface written with the type's own parameters is unbound."""
        descriptor = concrete("GenericTestObject", interface("IGenericTestObject", T, U), parameters=(T, U))

        result = with_mappings.from_all_interfaces(descriptor)

        assert len(result) == 1
        assert result[0].name == "IGenericTestObject"
        assert result[0].generic_arity == 2
        assert result[0].type_arguments == ()

    def test_open_type_excludes_reordered_parameters(self):
        """Test that an interface using the parameters in another order is excluded."""
        descriptor = concrete("GenericTestObjectAlt", interface("IGenericTestObject", U, T), parameters=(T, U))

        assert with_mappings.from_all_interfaces(descriptor) == []

    def test_open_type_excludes_partially_closed_interface(self):
        """Test that mixing concrete arguments with parameters excludes the interface."""
        descriptor = concrete("Half", interface("IGenericTestObject", T, INT), parameters=(T,))

        assert with_mappings.from_all_interfaces(descriptor) == []

    def test_open_type_excludes_omitted_parameter(self):
        """Test that an interface using only some of the parameters is excluded."""
        descriptor = concrete("Pair", interface("SupportsAbs", T, module="typing"), parameters=(T, U))

        assert with_mappings.from_all_interfaces(descriptor) == []

    def test_open_type_excludes_repeated_parameter(self):
        """Test that an interface using a parameter twice is excluded."""
        descriptor = concrete("Twice", interface("IGenericTestObject", T, T), parameters=(T, U))

        assert with_mappings.from_all_interfaces(descriptor) == []

    def test_open_type_excludes_nested_parameter(self):
        """Test that a parameter nested inside another argument is excluded."""
        list_of_t = interface("list", T, module="builtins")
        descriptor = concrete("Sequence", interface("Iterable", list_of_t, module="collections.abc"), parameters=(T,))

        assert with_mappings.from_all_interfaces(descriptor) == []

    def test_open_type_excludes_non_generic_interface(self):
        """Test that an open type cannot be mapped from a non-generic interface."""
        descriptor = concrete("Box", interface("IDisposable"), parameters=(T,))

        assert with_mappings.from_all_interfaces(descriptor) == []

    def test_open_type_mixed_interfaces(self):
        """Test that only the matching interfaces of an open type survive, in order."""
        descriptor = concrete(
            "SingleGenericTestObject",
            interface("IGenericTestObject", T, INT),
            interface("SupportsInt", module="typing"),
            interface("SupportsAbs", T, module="typing"),
            interface("IBox", T),
            parameters=(T,),
        )

        result = with_mappings.from_all_interfaces(descriptor)

        assert [item.name for item in result] == ["SupportsAbs", "IBox"]
        assert all(item.type_arguments == () for item in result)

    def test_open_results_are_unbound(self):
        """Test that every interface returned for an open type is in unbound form."""
        descriptor = concrete(
            "Pair",
            interface("IPair", T, U),
            interface("IReadOnlyPair", T, U),
            parameters=(T, U),
        )

        for result in with_mappings.from_all_interfaces(descriptor):
            assert result.type_arguments == ()
            assert result.generic_arity == descriptor.generic_arity


class TestFromMatchingInterface:
    """Test cases for with_mappings.from_matching_interface."""

    def test_type_without_interfaces(self):
        """Test that a type implementing nothing has no matching interface."""
        assert with_mappings.from_matching_interface(concrete("Plain")) == []

    def test_matches_i_prefixed_name(self):
        """Test that the interface named I<TypeName> is selected."""
        expected = interface("ITestObject")
        descriptor = concrete("TestObject", interface("IAnotherInterface"), expected, interface("IComparable"))

        assert with_mappings.from_matching_interface(descriptor) == [expected]

    def test_no_match_for_other_names(self):
        """Test that a type with no I<TypeName> interface maps from nothing."""
        descriptor = concrete("AnotherTestObject", interface("IAnotherInterface"), interface("ITestObject"))

        assert with_mappings.from_matching_interface(descriptor) == []

    def test_open_type_matches_unbound_interface(self):
        """Test that an open type matches its same-arity interface in unbound form."""
        descriptor = concrete("GenericTestObject", interface("IGenericTestObject", T, U), parameters=(T, U))

        result = with_mappings.from_matching_interface(descriptor)

        assert len(result) == 1
        assert result[0].name == "IGenericTestObject"
        assert result[0].type_arguments == ()

    def test_open_type_with_reordered_parameters_has_no_match(self):
        """Test that the generic pattern check applies to the matching interface."""
        descriptor = concrete("GenericTestObjectAlt", interface("IGenericTestObjectAlt", U, T), parameters=(T, U))

        assert with_mappings.from_matching_interface(descriptor) == []

    def test_arity_must_match(self):
        """Test that a same-named interface of a different arity does not match."""
        descriptor = concrete("GenericTestObject", interface("IGenericTestObject", STRING, INT))

        assert with_mappings.from_matching_interface(descriptor) == []

    def test_returns_at_most_one_interface(self):
        """Test that duplicates by name still produce a single mapping."""
        first = interface("IService")
        second = interface("IService", module=OTHER_MODULE)
        descriptor = concrete("Service", first, second)

        result = with_mappings.from_matching_interface(descriptor)

        assert len(result) == 1
        assert result[0] is first


class TestFromAllInterfacesInSameModule:
    """Test cases for with_mappings.from_all_interfaces_in_same_module."""

    def test_keeps_only_same_module_interfaces(self):
        """Test that interfaces from other modules are filtered out."""
        same = interface("ITestObject")
        descriptor = concrete("TestObject", interface("IAnotherInterface", module=OTHER_MODULE), same)

        assert with_mappings.from_all_interfaces_in_same_module(descriptor) == [same]

    def test_closed_generic_interfaces(self):
        """Test that closed generic interfaces are filtered by module too."""
        closed = interface("IGenericTestObject", STRING, INT)
        descriptor = concrete(
            "ClosedGenericTestObject",
            closed,
            interface("SupportsAbs", INT, module="typing"),
        )

        assert with_mappings.from_all_interfaces_in_same_module(descriptor) == [closed]

    def test_open_type_filtered_after_generic_pattern(self):
        """Test that excluded generic interfaces stay excluded whatever their module."""
        descriptor = concrete(
            "SingleGenericTestObject",
            interface("IGenericTestObject", T, INT),
            interface("SupportsAbs", T, module="typing"),
            parameters=(T,),
        )

        assert with_mappings.from_all_interfaces_in_same_module(descriptor) == []

    def test_open_type_same_module_match(self):
        """Test an open type mapped from an unbound interface of its own module."""
        descriptor = concrete("GenericTestObject", interface("IGenericTestObject", T, U), parameters=(T, U))

        result = with_mappings.from_all_interfaces_in_same_module(descriptor)

        assert [item.display_name for item in result] == ["IGenericTestObject`2"]

    def test_is_subset_of_all_interfaces(self):
        """Test that the same-module mapping never adds interfaces."""
        descriptors = [
            concrete("Plain"),
            concrete("TestObject", interface("IAnotherInterface", module=OTHER_MODULE), interface("ITestObject")),
            concrete("Pair", interface("IPair", T, U), interface("IOther", U, T), parameters=(T, U)),
        ]

        for descriptor in descriptors:
            all_interfaces = with_mappings.from_all_interfaces(descriptor)
            for item in with_mappings.from_all_interfaces_in_same_module(descriptor):
                assert item in all_interfaces
