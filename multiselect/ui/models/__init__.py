"""
Multiselect Models Package.
"""
from multiselect.ui.models.dropdown_item import DropdownItem

__all__ = ["DropdownItem"]
