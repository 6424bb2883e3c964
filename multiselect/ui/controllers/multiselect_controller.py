"""
MultiSelectController - Selection state for a multiselect dropdown.

Owns the item catalog, the selected items, the search-filtered view and
the open/closed state of the dropdown. Every change is broadcast through
subscribe() so views can re-render.
"""
from typing import Callable, Generic, Iterable, List, Optional, Tuple, TypeVar
from loguru import logger

from multiselect.core.config import ConfigManager, ControllerSettings
from multiselect.core.events import Signal, Subscription
from multiselect.ui.models.dropdown_item import DropdownItem

T = TypeVar('T')

OnSelectionChanged = Callable[[List[T]], None]
OnSearchChanged = Callable[[str], None]
ItemPredicate = Callable[[DropdownItem[T]], bool]


class MultiSelectController(Generic[T]):
    """
    Controller for a multiselect dropdown.

    Invalid calls (index out of range, selecting a disabled item, any
    mutation after dispose()) are ignored instead of raising, so a view
    can forward user gestures without guarding them.

    Selected items are kept when the catalog is replaced; an option picked
    before a reload stays selected even if the new catalog lacks it.

    Equality compares only the catalog and the open state. Two controllers
    with different selections or search queries compare equal.

    Example:
        controller = MultiSelectController(on_selection_changed=print)
        controller.set_items([DropdownItem("Apple", 1), DropdownItem("Pear", 2)])
        handle = controller.subscribe(view.refresh)
        controller.select_at_index(0)   # prints [1]
        handle.dispose()
    """

    def __init__(
        self,
        settings: Optional[ControllerSettings] = None,
        on_selection_changed: Optional[OnSelectionChanged] = None,
        on_search_changed: Optional[OnSearchChanged] = None,
        config: Optional[ConfigManager] = None,
    ):
        """
        Initialize an empty controller.

        Args:
            settings: Behaviour flags (defaults when omitted)
            on_selection_changed: Called with the selected values after
                every catalog or selection change
            on_search_changed: Called with the new query after every
                search change
            config: Live configuration; its controller section replaces
                settings and later updates are applied as they happen
        """
        self._settings = settings or ControllerSettings()
        self._items: List[DropdownItem[T]] = []
        self._selected_items: List[DropdownItem[T]] = []
        self._filtered_items: List[DropdownItem[T]] = []
        self._search_query: str = ""
        self._open: bool = False
        self._disposed: bool = False
        self._on_selection_changed = on_selection_changed
        self._on_search_changed = on_search_changed
        self._changed = Signal("MultiSelectController.changed")
        self._config_subscription: Optional[Subscription] = None
        if config is not None:
            self.attach_config(config)

    # --- State ---

    @property
    def settings(self) -> ControllerSettings:
        return self._settings

    @property
    def items(self) -> List[DropdownItem[T]]:
        """Items to display: the filtered view while searching, else the catalog."""
        if self._search_query:
            return list(self._filtered_items)
        return list(self._items)

    @property
    def selected_items(self) -> List[DropdownItem[T]]:
        return list(self._selected_items)

    @property
    def selected_values(self) -> List[T]:
        return [item.value for item in self._selected_items]

    @property
    def disabled_items(self) -> List[DropdownItem[T]]:
        return [item for item in self._items if item.disabled]

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def is_item_selected(self, item: DropdownItem[T]) -> bool:
        """Check if an item with the same value is selected."""
        return any(selected.value == item.value for selected in self._selected_items)

    # --- Observers ---

    def subscribe(self, listener: Callable[[], None]) -> Subscription:
        """
        Register a listener called after every state change.

        Returns:
            Handle whose dispose() removes the listener
        """
        if self._disposed:
            logger.debug("subscribe() on disposed controller ignored")
            handle = Subscription(self._changed, listener)
            handle.dispose()
            return handle
        return self._changed.connect(listener)

    def unsubscribe(self, listener: Callable[[], None]) -> None:
        self._changed.disconnect(listener)

    @property
    def subscriber_count(self) -> int:
        return self._changed.subscriber_count

    def attach_config(self, config: ConfigManager) -> None:
        """
        Follow a ConfigManager's controller section.

        The current section is applied at once. A later change to the
        search case rule refilters the visible items and notifies.
        """
        if not self._usable("attach_config"):
            return
        if self._config_subscription is not None:
            self._config_subscription.dispose()
        self._settings = config.data.controller

        def on_config_changed(section: str, key: str, value) -> None:
            if section != "controller" or self._disposed:
                return
            self._settings = config.data.controller
            logger.debug(f"Controller setting {key} = {value!r}")
            if key == "case_sensitive_search" and self._search_query:
                self._filtered_items = self._filter(self._items)
                self._notify()

        self._config_subscription = config.on_changed.connect(on_config_changed)

    def set_on_selection_changed(self, callback: Optional[OnSelectionChanged]) -> None:
        """Attach (or detach with None) the selection-changed hook."""
        if self._usable("set_on_selection_changed"):
            self._on_selection_changed = callback

    def set_on_search_changed(self, callback: Optional[OnSearchChanged]) -> None:
        """Attach (or detach with None) the search-changed hook."""
        if self._usable("set_on_search_changed"):
            self._on_search_changed = callback

    # --- Catalog ---

    def set_items(self, items: Iterable[DropdownItem[T]]) -> None:
        """
        Replace the catalog.

        The selection is left untouched.
        """
        if not self._usable("set_items"):
            return
        self._items = list(items)
        logger.debug(f"Catalog replaced: {len(self._items)} items")
        self._commit()

    def add_item(self, item: DropdownItem[T], index: int = -1) -> None:
        """
        Add an item to the catalog.

        Args:
            item: Item to add
            index: Insert position; -1 or any position outside the
                catalog appends
        """
        if not self._usable("add_item"):
            return
        if index == -1 or not 0 <= index <= len(self._items):
            self._items.append(item)
        else:
            self._items.insert(index, item)
        self._commit()

    def add_items(self, items: Iterable[DropdownItem[T]]) -> None:
        if not self._usable("add_items"):
            return
        self._items.extend(items)
        self._commit()

    def disable_where(self, predicate: ItemPredicate) -> None:
        """Disable every catalog item matching predicate."""
        if not self._usable("disable_where"):
            return
        self._items = [
            item.copy_with(disabled=True) if predicate(item) and not item.disabled else item
            for item in self._items
        ]
        self._commit()

    # --- Selection ---

    def clear_all(self) -> None:
        """Clear the selection."""
        if not self._usable("clear_all"):
            return
        self._selected_items.clear()
        self._commit()

    def select_all(self) -> None:
        """
        Select every catalog item.

        Disabled items are included unless
        settings.select_all_includes_disabled is False.
        """
        if not self._usable("select_all"):
            return
        include_disabled = self._settings.select_all_includes_disabled
        for item in self._items:
            if item.disabled and not include_disabled:
                continue
            if self.is_item_selected(item):
                continue
            self._selected_items.append(item.copy_with())
        self._commit()

    def select_at_index(self, index: int) -> None:
        """
        Select the catalog item at index.

        Out-of-range indexes, disabled items and already selected items
        are ignored without notifying.
        """
        if not self._usable("select_at_index"):
            return
        if index < 0 or index >= len(self._items):
            logger.debug(f"select_at_index({index}) out of range, catalog has {len(self._items)} items")
            return

        item = self._items[index]
        if item.disabled or self.is_item_selected(item):
            return

        self.select_where(lambda element: element is item)

    def select_where(self, predicate: ItemPredicate) -> None:
        """Select the catalog items matching predicate."""
        if not self._usable("select_where"):
            return
        for item in self._items:
            if self.is_item_selected(item):
                continue
            if predicate(item):
                self._selected_items.append(item.copy_with())
        self._commit()

    def select_list(self, items: Iterable[DropdownItem[T]]) -> None:
        """Select the given items; they do not need to be in the catalog."""
        if not self._usable("select_list"):
            return
        for item in items:
            if self.is_item_selected(item):
                continue
            self._selected_items.append(item.copy_with())
        self._commit()

    def unselect_where(self, predicate: ItemPredicate) -> None:
        """Unselect the selected items matching predicate."""
        if not self._usable("unselect_where"):
            return
        self._selected_items = [item for item in self._selected_items if not predicate(item)]
        self._commit()

    def toggle_where(self, predicate: ItemPredicate) -> None:
        """
        Flip the selection state of every item matching predicate.

        Both catalog items and selected items missing from the catalog
        are considered; each value is flipped once.
        """
        if not self._usable("toggle_where"):
            return

        # (value, select) pairs; values only need equality, not hashing
        decisions: List[Tuple[T, bool]] = []

        def decided(value: T) -> bool:
            return any(seen == value for seen, _ in decisions)

        for item in self._items:
            if predicate(item) and not decided(item.value):
                decisions.append((item.value, not self.is_item_selected(item)))

        for item in self._selected_items:
            if predicate(item) and not decided(item.value):
                decisions.append((item.value, not self.is_item_selected(item)))

        for value, select in decisions:
            if select:
                source = next(item for item in self._items if item.value == value)
                self._selected_items.append(source.copy_with())
            else:
                self._remove_value(value)

        self._commit()

    def toggle(self, item: DropdownItem[T]) -> None:
        """Select item if unselected, unselect it otherwise."""
        if not self._usable("toggle"):
            return
        if self.is_item_selected(item):
            self._remove_value(item.value)
        else:
            self._selected_items.append(item.copy_with())
        self._commit()

    # --- Search ---

    def set_search_query(self, query: str) -> None:
        """
        Set the search query and rebuild the filtered view.

        The selection is not changed.
        """
        if not self._usable("set_search_query"):
            return
        self._search_query = query
        if not self._search_query:
            self._filtered_items = list(self._items)
        else:
            self._filtered_items = self._filter(self._items)
        logger.debug(f"Search query set: '{query}' ({len(self._filtered_items)} matches)")

        if self._on_search_changed is not None:
            try:
                self._on_search_changed(query)
            except Exception as e:
                logger.error(f"on_search_changed callback failed: {e}")
        self._notify()

    def clear_search_query(self, notify: bool = False) -> None:
        """
        Reset the search query.

        The filtered view is not rebuilt; items falls back to the catalog.
        """
        if not self._usable("clear_search_query"):
            return
        self._search_query = ""
        if notify:
            self._notify()

    # --- Dropdown ---

    def open_dropdown(self) -> None:
        """Show the dropdown, if it is not already open."""
        if not self._usable("open_dropdown") or self._open:
            return
        self._open = True
        self._notify()

    def close_dropdown(self) -> None:
        """Hide the dropdown, if it is not already closed."""
        if not self._usable("close_dropdown") or not self._open:
            return
        self._open = False
        self._notify()

    # --- Lifecycle ---

    def dispose(self) -> None:
        """Release subscribers and callbacks. Safe to call more than once."""
        if self._disposed:
            return
        self._disposed = True
        self._changed.clear()
        if self._config_subscription is not None:
            self._config_subscription.dispose()
            self._config_subscription = None
        self._on_selection_changed = None
        self._on_search_changed = None
        logger.debug("MultiSelectController disposed")

    # --- Internals ---

    def _usable(self, operation: str) -> bool:
        if self._disposed:
            logger.debug(f"{operation}() on disposed controller ignored")
            return False
        return True

    def _filter(self, items: List[DropdownItem[T]]) -> List[DropdownItem[T]]:
        case_sensitive = self._settings.case_sensitive_search
        return [item for item in items if item.matches_text(self._search_query, case_sensitive)]

    def _remove_value(self, value: T) -> None:
        self._selected_items = [item for item in self._selected_items if item.value != value]

    def _commit(self) -> None:
        """Refresh the filtered view, notify listeners, report selected values."""
        if self._search_query:
            self._filtered_items = self._filter(self._items)
        self._notify()
        if self._on_selection_changed is not None:
            try:
                self._on_selection_changed(self.selected_values)
            except Exception as e:
                logger.error(f"on_selection_changed callback failed: {e}")

    def _notify(self) -> None:
        if not self._disposed:
            self._changed.emit()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, MultiSelectController):
            return NotImplemented
        return self._items == other._items and self._open == other._open

    def __hash__(self) -> int:
        return hash((tuple(self._items), self._open))

    def __repr__(self) -> str:
        return f"MultiSelectController(items={self._items!r}, open={self._open})"
