import pytest

from fdfview.events import Display, Event, EventMask, EventType, Window


def test_new_windows_are_prepended():
    display = Display()
    first = display.new_window(300, 300, "win1")
    second = display.new_window(600, 600, "win2")
    assert display.windows == [second, first]
    assert (second.width, second.height, second.title) == (600, 600, "win2")


def test_window_rejects_bad_size():
    with pytest.raises(ValueError):
        Display().new_window(0, 10, "bad")


def test_hook_rejects_unknown_event():
    window = Window(10, 10, "w")
    with pytest.raises(ValueError):
        window.hook(99, 0, lambda: None)


def test_event_mask_is_union_of_hook_masks():
    window = Window(10, 10, "w")
    assert window.event_mask() == EventMask.NONE
    window.key_hook(lambda key: None)
    window.mouse_hook(lambda b, x, y: None)
    window.expose_hook(lambda: None)
    window.hook(EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION, lambda x, y: None)
    assert window.event_mask() == (
        EventMask.KEY_RELEASE
        | EventMask.BUTTON_PRESS
        | EventMask.EXPOSURE
        | EventMask.POINTER_MOTION
    )


def test_key_hook_receives_keysym_on_release_only():
    display = Display()
    window = display.new_window(242, 242, "Title1")
    keys = []
    window.key_hook(keys.append)
    display.dispatch(Event(EventType.KEY_PRESS, window, keysym=0x61))
    display.dispatch(Event(EventType.KEY_RELEASE, window, keysym=0xFF1B))
    assert keys == [0xFF1B]


def test_key_hook_replaces_previous():
    display = Display()
    window = display.new_window(10, 10, "w")
    old, new = [], []
    window.key_hook(old.append)
    window.key_hook(new.append)
    display.dispatch(Event(EventType.KEY_RELEASE, window, keysym=7))
    assert (old, new) == ([], [7])


def test_mouse_and_motion_arguments():
    display = Display()
    window = display.new_window(10, 10, "w")
    seen = []
    window.mouse_hook(lambda b, x, y: seen.append(("press", b, x, y)))
    window.hook(EventType.MOTION_NOTIFY, EventMask.POINTER_MOTION,
                lambda x, y: seen.append(("move", x, y)))
    display.dispatch(Event(EventType.BUTTON_PRESS, window, button=1, x=3, y=4))
    display.dispatch(Event(EventType.MOTION_NOTIFY, window, x=5, y=6))
    assert seen == [("press", 1, 3, 4), ("move", 5, 6)]


def test_expose_only_fires_on_last_in_series():
    display = Display()
    window = display.new_window(10, 10, "w")
    calls = []
    window.expose_hook(lambda: calls.append("expose"))
    display.dispatch(Event(EventType.EXPOSE, window, count=2))
    display.dispatch(Event(EventType.EXPOSE, window, count=0))
    assert calls == ["expose"]


def test_events_for_unknown_window_are_ignored():
    display = Display()
    window = display.new_window(10, 10, "w")
    stray = Window(10, 10, "stray")
    keys = []
    window.key_hook(keys.append)
    stray.key_hook(keys.append)
    display.dispatch(Event(EventType.KEY_RELEASE, stray, keysym=1))
    assert keys == []


def test_delete_request_calls_destroy_hook():
    display = Display()
    window = display.new_window(10, 10, "w")
    closed = []
    window.hook(EventType.DESTROY_NOTIFY, EventMask.NONE, lambda: closed.append(True))
    display.dispatch(Event(EventType.CLIENT_MESSAGE, window, delete_request=True))
    display.dispatch(Event(EventType.CLIENT_MESSAGE, window))
    assert closed == [True]


def test_destroy_window_removes_it():
    display = Display()
    first = display.new_window(10, 10, "a")
    second = display.new_window(10, 10, "b")
    display.destroy_window(first)
    assert display.windows == [second]
    assert first.destroyed is True


def test_mouse_handler_replaces_window():
    display = Display()
    state = {"win1": display.new_window(300, 300, "win1")}
    win2 = display.new_window(600, 600, "win2")
    sizes = iter([(123, 45), (67, 89)])

    def on_mouse(button, x, y):
        display.destroy_window(state["win1"])
        width, height = next(sizes)
        state["win1"] = display.new_window(width, height, "new win")
        state["win1"].mouse_hook(on_mouse)

    state["win1"].mouse_hook(on_mouse)
    win2.mouse_hook(on_mouse)
    original = state["win1"]
    display.dispatch(Event(EventType.BUTTON_PRESS, original, button=1))
    assert original.destroyed
    assert len(display.windows) == 2
    assert (state["win1"].width, state["win1"].height) == (123, 45)
    display.dispatch(Event(EventType.BUTTON_PRESS, win2, button=3))
    assert (state["win1"].width, state["win1"].height) == (67, 89)
    assert display.windows[1] is win2


def test_loop_stops_when_last_window_is_gone():
    display = Display()
    window = display.new_window(10, 10, "w")
    handled = []

    def on_key(key):
        handled.append(key)
        display.destroy_window(window)

    window.key_hook(on_key)
    other = Window(10, 10, "x")
    events = [
        Event(EventType.KEY_RELEASE, window, keysym=1),
        None,
        Event(EventType.KEY_RELEASE, other, keysym=2),
    ]
    display.loop_hook(lambda: handled.append("idle"))
    display.loop(events)
    assert handled == [1, "idle"]


def test_loop_hook_runs_when_queue_is_empty():
    display = Display()
    window = display.new_window(10, 10, "w")
    log = []
    window.key_hook(log.append)
    display.loop_hook(lambda: log.append("tick"))
    display.loop([Event(EventType.KEY_RELEASE, window, keysym=1), None, None,
                  Event(EventType.KEY_RELEASE, window, keysym=2)])
    assert log == [1, "tick", "tick", 2]


def test_idle_marks_ignored_without_loop_hook():
    display = Display()
    window = display.new_window(10, 10, "w")
    keys = []
    window.key_hook(keys.append)
    display.loop([None, Event(EventType.KEY_RELEASE, window, keysym=5), None])
    assert keys == [5]


def test_loop_end_stops_processing():
    display = Display()
    window = display.new_window(10, 10, "w")
    keys = []

    def on_key(key):
        keys.append(key)
        display.loop_end()

    window.key_hook(on_key)
    display.loop([Event(EventType.KEY_RELEASE, window, keysym=1),
                  Event(EventType.KEY_RELEASE, window, keysym=2)])
    assert keys == [1]
    assert display.windows == [window]
    display.loop([Event(EventType.KEY_RELEASE, window, keysym=3)])
    assert keys == [1]


def test_loop_without_windows_does_nothing():
    display = Display()
    ticks = []
    display.loop_hook(lambda: ticks.append(1))
    display.loop([None, None])
    assert ticks == []