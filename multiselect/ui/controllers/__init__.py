"""
Multiselect Controllers Package.
"""
from multiselect.ui.controllers.multiselect_controller import MultiSelectController

__all__ = ["MultiSelectController"]
