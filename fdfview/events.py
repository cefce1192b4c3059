"""Windows, event hooks and the event loop that routes events to them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterable, NamedTuple, Optional

MAX_EVENT = 36


class EventType(enum.IntEnum):
    """Event codes, numbered as in the X protocol."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


class EventMask(enum.IntFlag):
    """Event selection masks, with the X protocol bit values."""

    NONE = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    POINTER_MOTION_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


@dataclass(frozen=True)
class Event:
    """One input event aimed at a window.

    ``delete_request`` marks a client message asking the window to close.
    """

    type: EventType
    window: Optional["Window"]
    keysym: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0
    delete_request: bool = False


class _Hook(NamedTuple):
    mask: EventMask
    callback: Callable[..., object]


class Window:
    """A window with its own table of event hooks."""

    def __init__(self, width: int, height: int, title: str) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.title = title
        self.destroyed = False
        self._hooks: dict[EventType, _Hook] = {}

    def __repr__(self) -> str:
        return f"Window({self.width}x{self.height}, {self.title!r})"

    def hook(self, event: int, mask: int, callback: Callable[..., object]) -> None:
        """Install ``callback`` for ``event``, selecting input with ``mask``."""
        self._hooks[EventType(event)] = _Hook(EventMask(mask), callback)

    def key_hook(self, callback: Callable[[int], object]) -> None:
        """Call ``callback(keysym)`` when a key is released."""
        self.hook(EventType.KEY_RELEASE, EventMask.KEY_RELEASE, callback)

    def mouse_hook(self, callback: Callable[[int, int, int], object]) -> None:
        """Call ``callback(button, x, y)`` when a mouse button is pressed."""
        self.hook(EventType.BUTTON_PRESS, EventMask.BUTTON_PRESS, callback)

    def expose_hook(self, callback: Callable[[], object]) -> None:
        """Call ``callback()`` when the window needs redrawing."""
        self.hook(EventType.EXPOSE, EventMask.EXPOSURE, callback)

    def event_mask(self) -> EventMask:
        """Return the union of the masks of all installed hooks."""
        mask = EventMask.NONE
        for installed in self._hooks.values():
            mask |= installed.mask
        return mask

    def _callback(self, event_type: EventType) -> Optional[Callable[..., object]]:
        installed = self._hooks.get(event_type)
        return installed.callback if installed is not None else None


def _deliver(callback: Callable[..., object], event: Event) -> None:
    kind = event.type
    if kind in (EventType.KEY_PRESS, EventType.KEY_RELEASE):
        callback(event.keysym)
    elif kind in (EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE):
        callback(event.button, event.x, event.y)
    elif kind == EventType.MOTION_NOTIFY:
        callback(event.x, event.y)
    elif kind == EventType.EXPOSE:
        if event.count == 0:
            callback()
    else:
        callback()


_EXHAUSTED = object()


class Display:
    """A connection holding the open windows and the loop hook."""

    def __init__(self) -> None:
        self.windows: list[Window] = []
        self._loop_hook: Optional[Callable[[], object]] = None
        self._ended = False

    def new_window(self, width: int, height: int, title: str) -> Window:
        """Open a window; the newest window comes first in ``windows``."""
        window = Window(width, height, title)
        self.windows.insert(0, window)
        return window

    def destroy_window(self, window: Window) -> None:
        """Close ``window`` and forget it."""
        self.windows = [w for w in self.windows if w is not window]
        window.destroyed = True

    def loop_hook(self, callback: Optional[Callable[[], object]]) -> None:
        """Call ``callback()`` each time the event queue runs empty."""
        self._loop_hook = callback

    def dispatch(self, event: Event) -> None:
        """Route one event to the hooks of the window it is aimed at."""
        window = next((w for w in self.windows if w is event.window), None)
        if window is None:
            return
        if event.type == EventType.CLIENT_MESSAGE and event.delete_request:
            on_close = window._callback(EventType.DESTROY_NOTIFY)
            if on_close is not None:
                on_close()
        if event.type < MAX_EVENT:
            callback = window._callback(event.type)
            if callback is not None:
                _deliver(callback, event)

    def loop(self, events: Iterable[Optional[Event]]) -> None:
        """Process events until no window is left, the loop is ended or input runs out.

        A ``None`` item marks a point where the queue is empty; the loop hook,
        if any, runs there.
        """
        stream = iter(events)
        while self.windows and not self._ended:
            while not self._ended:
                item = next(stream, _EXHAUSTED)
                if item is _EXHAUSTED:
                    return
                if item is None:
                    if self._loop_hook is not None:
                        break
                    continue
                self.dispatch(item)
            if self._loop_hook is not None:
                self._loop_hook()

    def loop_end(self) -> bool:
        """Make the running loop, and any later one, stop."""
        self._ended = True
        return True