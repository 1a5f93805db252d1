"""
Component menus shared by the CLI and the web application.
"""
from typing import Callable, Dict, List, Optional, Protocol, Tuple

MenuAction = Callable[[], None]


class MenuHost(Protocol):
    """What a feature needs from the host application to add menu entries."""

    def add_component_menu(self, name: str) -> None:
        ...

    def add_component_menu_element(self, menu: str, item: str, action: MenuAction) -> None:
        ...


def _normalize(name: str) -> str:
    return name.replace("-", " ").replace("_", " ").strip().lower()


class ComponentMenus:
    """Named menus holding parameterless actions, in registration order."""

    def __init__(self):
        self._menus: Dict[str, List[Tuple[str, MenuAction]]] = {}

    def add_component_menu(self, name: str) -> None:
        self._menus.setdefault(name, [])

    def add_component_menu_element(self, menu: str, item: str, action: MenuAction) -> None:
        # Duplicate names are kept; lookups return the first one
        self._menus.setdefault(menu, []).append((item, action))

    def find_action(self, menu: str, item: str) -> Optional[MenuAction]:
        """Look up an action by menu and item name (case-insensitive, '-'/'_' match spaces)."""
        for menu_name, items in self._menus.items():
            if _normalize(menu_name) != _normalize(menu):
                continue
            for item_name, action in items:
                if _normalize(item_name) == _normalize(item):
                    return action
        return None

    def find_item(self, item: str) -> Optional[MenuAction]:
        """Look up an action by item name in any menu."""
        for menu_name in self._menus:
            action = self.find_action(menu_name, item)
            if action is not None:
                return action
        return None

    def menus(self) -> Dict[str, List[str]]:
        return {name: [item for item, _ in items] for name, items in self._menus.items()}
