"""Unit tests for EntityKey value object."""

import pytest

from domain.user.core.value_objects.entity_key import EntityKey


class TestEntityKey:
    """Test EntityKey value object."""

    def test_create_key(self):
        """Test creating key from kind and name."""
        key = EntityKey("User", "pedro@pedrocelso.com.br")

        assert key.kind == "User"
        assert key.name == "pedro@pedrocelso.com.br"

    def test_str(self):
        """Test string form shows kind and name."""
        assert str(EntityKey("User", "a@b.c")) == "User('a@b.c')"

    def test_keys_are_hashable_and_comparable(self):
        """Test equal keys collapse in a dict."""
        records = {EntityKey("User", "a@b.c"): 1}
        records[EntityKey("User", "a@b.c")] = 2

        assert len(records) == 1
        assert EntityKey("User", "a@b.c") != EntityKey("Task", "a@b.c")

    def test_key_is_immutable(self):
        """Test key fields cannot be reassigned."""
        key = EntityKey("User", "a@b.c")

        with pytest.raises(AttributeError):
            key.name = "other@b.c"  # type: ignore[misc]

    @pytest.mark.parametrize("kind,name", [("", "a@b.c"), ("User", "")])
    def test_empty_parts_raise_error(self, kind, name):
        """Test empty kind or name is rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            EntityKey(kind, name)
