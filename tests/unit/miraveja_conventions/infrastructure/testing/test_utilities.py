"""Unit tests for testing utilities."""

from miraveja_conventions.domain import Lifetime, LifetimeTag, TypeDescriptor
from miraveja_conventions.infrastructure.registry import InMemoryRegistry
from miraveja_conventions.infrastructure.testing.utilities import TestRegistry, create_seeded_registry

OBJECT = TypeDescriptor(name="object", declaring_module="builtins")
STRING = TypeDescriptor(name="str", declaring_module="builtins")
INT = TypeDescriptor(name="int", declaring_module="builtins")


class TestTestRegistryInitialization:
    """Test cases for TestRegistry initialization."""

    def test_is_in_memory_registry(self):
        """Test that TestRegistry is usable as a regular registry."""
        registry = TestRegistry()

        assert isinstance(registry, InMemoryRegistry)
        assert len(registry) == 0

    def test_starts_without_recorded_calls(self):
        """Test that TestRegistry starts with empty call and lookup records."""
        registry = TestRegistry()

        assert registry.calls == []
        assert registry.lookups == []


class TestRecording:
    """Test cases for call recording."""

    def test_records_register_calls_in_order(self):
        """Test that every register call is recorded, replacements included."""
        registry = TestRegistry()
        lifetime = LifetimeTag(kind=Lifetime.TRANSIENT)

        registry.register(OBJECT, STRING, None, lifetime, ("directive",))
        registry.register(OBJECT, INT)

        assert [call.mapped_type for call in registry.calls] == [STRING, INT]
        assert registry.calls[0].lifetime == lifetime
        assert registry.calls[0].injection_members == ("directive",)
        assert len(registry) == 1

    def test_records_lookups(self):
        """Test that get_mapped_type calls are recorded."""
        registry = TestRegistry()

        registry.get_mapped_type(OBJECT, "name")

        assert registry.lookups == [(OBJECT, "name")]

    def test_seed_is_not_recorded(self):
        """Test that seeding adds a mapping without recording a call."""
        registry = TestRegistry()

        registry.seed(OBJECT, STRING, "string")

        assert registry.calls == []
        assert registry.get_mapped_type(OBJECT, "string") == STRING

    def test_reset_calls_keeps_registrations(self):
        """Test that reset_calls forgets records but not mappings."""
        registry = TestRegistry()
        registry.register(OBJECT, STRING)
        registry.get_mapped_type(OBJECT, None)

        registry.reset_calls()

        assert registry.calls == []
        assert registry.lookups == []
        assert len(registry) == 1


class TestContextManager:
    """Test cases for using TestRegistry as a context manager."""

    def test_enter_returns_registry(self):
        """Test that entering returns the registry itself."""
        registry = TestRegistry()

        with registry as entered:
            assert entered is registry

    def test_exit_clears_everything(self):
        """Test that exiting clears registrations and records."""
        with TestRegistry() as registry:
            registry.register(OBJECT, STRING)

        assert len(registry) == 0
        assert registry.calls == []


class TestCreateSeededRegistry:
    """Test cases for create_seeded_registry."""

    def test_without_mappings(self):
        """Test that no mappings yield an empty registry."""
        registry = create_seeded_registry()

        assert isinstance(registry, TestRegistry)
        assert len(registry) == 0

    def test_with_mappings(self):
        """Test that the given mappings are present and not recorded."""
        registry = create_seeded_registry((OBJECT, STRING, None), (OBJECT, INT, "int"))

        assert registry.get_mapped_type(OBJECT, None) == STRING
        assert registry.get_mapped_type(OBJECT, "int") == INT
        assert registry.calls == []
