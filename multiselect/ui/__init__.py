"""
Multiselect UI state layer.

Provides:
- DropdownItem: immutable selectable option
- MultiSelectController: catalog, selection, search and open state

The Qt adapter lives in multiselect.ui.bridge and is imported explicitly.

Usage:
    from multiselect.ui import DropdownItem, MultiSelectController
"""
from .models import DropdownItem
from .controllers import MultiSelectController

__all__ = ["DropdownItem", "MultiSelectController"]
