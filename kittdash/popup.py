"""Modal error dialogs and full-screen overlays on a simple widget tree."""

from __future__ import annotations

import enum
from typing import Optional

from .colors import BLACK, GRAY_LIGHT, GREEN, Color
from .config import POPUP_HEIGHT, POPUP_WIDTH

OPA_50 = 127
OPA_COVER = 255
DIALOG_PADDING = 20
DIALOG_RADIUS = 10
OK_BUTTON_HEIGHT = 70
OK_BUTTON_RADIUS = 5


class ScrollDir(enum.Enum):
    """Directions in which a container may scroll."""

    NONE = enum.auto()
    HORIZONTAL = enum.auto()
    VERTICAL = enum.auto()
    ALL = enum.auto()


class Widget:
    """A node of the screen tree: a sized box with ordered children."""

    def __init__(
        self, width: int, height: int, parent: Optional[Widget] = None
    ) -> None:
        self.width = width
        self.height = height
        self.parent: Optional[Widget] = None
        self.children: list[Widget] = []
        self.scroll_dir = ScrollDir.ALL
        if parent is not None:
            parent.children.append(self)
            self.parent = parent

    def remove_child(self, child: Widget) -> None:
        """Detach ``child`` from this widget."""
        try:
            self.children.remove(child)
        except ValueError:
            raise ValueError("widget is not a child of this widget") from None
        child.parent = None

    def move_foreground(self) -> None:
        """Make this widget the last-drawn child of its parent."""
        if self.parent is not None:
            self.parent.children.remove(self)
            self.parent.children.append(self)


class Popup(Widget):
    """A clickable overlay, optionally holding a message dialog with an OK button."""

    color: Color = BLACK
    box_width = POPUP_WIDTH
    box_height = POPUP_HEIGHT
    box_color = GRAY_LIGHT
    label_width = POPUP_WIDTH - 2 * DIALOG_PADDING
    button_width = POPUP_WIDTH - 2 * DIALOG_PADDING
    button_height = OK_BUTTON_HEIGHT
    button_color = GREEN
    button_label = "OK"

    def __init__(
        self,
        width: int,
        height: int,
        parent: Optional[Widget] = None,
        *,
        opacity: int = OPA_COVER,
        message: Optional[str] = None,
    ) -> None:
        super().__init__(width, height, parent)
        self.opacity = opacity
        self.message = message
        self.clickable = True

    @property
    def has_dialog(self) -> bool:
        return self.message is not None

    def dismiss(self) -> None:
        """Close the overlay and let the tile view scroll horizontally again."""
        tile = self.parent
        if tile is None:
            return
        if tile.parent is not None:
            tile.parent.scroll_dir = ScrollDir.HORIZONTAL
        tile.remove_child(self)


def show_error_popup(
    parent_tile: Optional[Widget], message: str
) -> Optional[Popup]:
    """Cover ``parent_tile`` with a dimmed overlay holding ``message``.

    Scrolling of the tile's container is locked until the popup is dismissed.
    """
    if parent_tile is None:
        return None
    if parent_tile.parent is not None:
        parent_tile.parent.scroll_dir = ScrollDir.NONE
    return Popup(
        parent_tile.width,
        parent_tile.height,
        parent_tile,
        opacity=OPA_50,
        message=message,
    )


def show_fullscreen_popup(
    host: Optional[Widget], width: int, height: int
) -> Popup:
    """Cover a ``width`` x ``height`` screen with an opaque black overlay.

    With no ``host`` the overlay is itself the top layer.
    """
    overlay = Popup(width, height, host, opacity=OPA_COVER)
    overlay.move_foreground()
    return overlay