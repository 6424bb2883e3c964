"""
Tests for the DropdownItem record.
"""
import dataclasses
import pytest
from multiselect.ui.models.dropdown_item import DropdownItem


class TestDropdownItem:
    """Tests for DropdownItem value semantics."""

    def test_create_basic_item(self):
        item = DropdownItem(label="Apple", value=1)

        assert item.label == "Apple"
        assert item.value == 1
        assert item.disabled is False

    def test_equality_uses_value_only(self):
        """Items with the same value are equal whatever their label or flags."""
        a = DropdownItem(label="Apple", value=1)
        b = DropdownItem(label="Green apple", value=1, disabled=True)
        c = DropdownItem(label="Apple", value=2)

        assert a == b
        assert hash(a) == hash(b)
        assert a != c

    def test_is_immutable(self):
        item = DropdownItem(label="Apple", value=1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            item.disabled = True  # type: ignore[misc]

    def test_copy_with(self):
        item = DropdownItem(label="Apple", value=1)
        disabled = item.copy_with(disabled=True)

        assert disabled is not item
        assert disabled.disabled is True
        assert disabled.label == "Apple"
        assert item.disabled is False

    def test_copy_with_no_changes(self):
        item = DropdownItem(label="Apple", value=1)
        copy = item.copy_with()

        assert copy == item
        assert copy is not item

    def test_matches_text(self):
        item = DropdownItem(label="Vacation Photo", value="v")

        assert item.matches_text("vacation")
        assert item.matches_text("PHOTO")
        assert not item.matches_text("beach")
        assert item.matches_text("")

    def test_matches_text_case_sensitive(self):
        item = DropdownItem(label="Apple", value="a")

        assert item.matches_text("App", case_sensitive=True)
        assert not item.matches_text("app", case_sensitive=True)
