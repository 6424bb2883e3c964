"""
DropdownItem Data Model.

Immutable record for one selectable option of a multiselect dropdown.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class DropdownItem(Generic[T]):
    """
    A selectable option.

    Equality and hashing use ``value`` only, so two items with the same
    value but different labels are the same option.

    Attributes:
        label: Display text (used by the search filter)
        value: Domain value identifying the option
        disabled: Disabled options cannot be picked by index

    Example:
        item = DropdownItem(label="Apple", value=1)
        locked = item.copy_with(disabled=True)
    """
    label: str = field(compare=False)
    value: T
    disabled: bool = field(default=False, compare=False)

    def copy_with(self, **changes: Any) -> "DropdownItem[T]":
        """
        Return a copy with the given fields replaced.

        Args:
            **changes: Field values to override (label, value, disabled)
        """
        return replace(self, **changes)

    def matches_text(self, text: str, case_sensitive: bool = False) -> bool:
        """Check if the label contains text."""
        if not text:
            return True
        if case_sensitive:
            return text in self.label
        return text.lower() in self.label.lower()
