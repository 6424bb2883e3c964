"""
Qt bridge for MultiSelectController.

Re-emits controller changes as Qt signals so widgets and QML can bind to
them, and exposes slots that forward user gestures to the controller.
"""
from typing import Any, List, Optional
from PySide6.QtCore import QObject, Signal, Slot
from loguru import logger

from multiselect.core.events import Subscription
from multiselect.ui.controllers.multiselect_controller import MultiSelectController


class ControllerBridge(QObject):
    """
    Qt signal adapter around a MultiSelectController.

    Usage:
        bridge = ControllerBridge(controller)
        bridge.selectionChanged.connect(list_widget.on_selection)
        bridge.openChanged.connect(popup.setVisible)
    """

    changed = Signal()
    selectionChanged = Signal(list)  # selected values
    searchChanged = Signal(str)  # query
    openChanged = Signal(bool)

    def __init__(self, controller: MultiSelectController, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._controller = controller
        self._last_values: List[Any] = controller.selected_values
        self._last_query: str = controller.search_query
        self._last_open: bool = controller.is_open
        self._subscription: Optional[Subscription] = controller.subscribe(self._on_controller_changed)

    @property
    def controller(self) -> MultiSelectController:
        return self._controller

    @property
    def is_attached(self) -> bool:
        return self._subscription is not None and self._subscription.is_active

    def detach(self) -> None:
        """Stop listening to the controller."""
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
            logger.debug("ControllerBridge detached")

    def _on_controller_changed(self) -> None:
        self.changed.emit()

        values = self._controller.selected_values
        if values != self._last_values:
            self._last_values = values
            self.selectionChanged.emit(values)

        query = self._controller.search_query
        if query != self._last_query:
            self._last_query = query
            self.searchChanged.emit(query)

        is_open = self._controller.is_open
        if is_open != self._last_open:
            self._last_open = is_open
            self.openChanged.emit(is_open)

    # --- Slots ---

    @Slot()
    def openDropdown(self):
        self._controller.open_dropdown()

    @Slot()
    def closeDropdown(self):
        self._controller.close_dropdown()

    @Slot(int)
    def toggleAt(self, index: int):
        """
        Toggle the visible row at index (filtered view while searching).

        Disabled rows are ignored, as in select_at_index().
        """
        items = self._controller.items
        if not 0 <= index < len(items) or items[index].disabled:
            return
        self._controller.toggle(items[index])

    @Slot(str)
    def setSearchQuery(self, query: str):
        self._controller.set_search_query(query)

    @Slot()
    def clearAll(self):
        self._controller.clear_all()
