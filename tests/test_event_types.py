import pytest

from dfengine.event_types import (
    ApplicationEvent,
    ClipboardEvent,
    DisplayEvent,
    EventCategory,
    KeyboardEvent,
    MouseEvent,
    RenderEvent,
    WindowEvent,
    category_of,
    events_of,
)


def test_pinned_values():
    assert ApplicationEvent(0x100) is ApplicationEvent.QUIT
    assert KeyboardEvent(0x300) is KeyboardEvent.KEY_DOWN
    assert MouseEvent(0x400) is MouseEvent.MOUSE_MOTION
    assert category_of(0x100) is EventCategory.APPLICATION
    assert category_of(0x300) is EventCategory.KEYBOARD
    assert category_of(0x400) is EventCategory.MOUSE


def test_events_of_returns_matching_enum():
    assert events_of(EventCategory.WINDOW) is WindowEvent
    assert events_of(EventCategory.CLIPBOARD) is ClipboardEvent
    assert events_of(int(EventCategory.RENDER)) is RenderEvent


def test_events_of_unknown_category():
    with pytest.raises(ValueError):
        events_of(len(EventCategory) + 5)


@pytest.mark.parametrize("category", list(EventCategory))
def test_every_member_maps_back_to_its_category(category):
    enum_type = events_of(category)
    assert len(enum_type) > 0
    for member in enum_type:
        assert category_of(member) == category
        assert category_of(int(member)) == category


def test_categories_do_not_overlap():
    value_sets = [set(events_of(c)._value2member_map_) for c in EventCategory]
    union = set().union(*value_sets)
    assert sum(len(values) for values in value_sets) == len(union)


def test_first_last_are_aliases():
    display = events_of(EventCategory.DISPLAY)
    window = events_of(EventCategory.WINDOW)
    assert display.DISPLAY_FIRST is DisplayEvent.DISPLAY_ORIENTATION
    assert display.DISPLAY_LAST is DisplayEvent.DISPLAY_CONTENT_SCALE_CHANGED
    assert window.WINDOW_FIRST is WindowEvent.WINDOW_SHOWN
    assert window.WINDOW_LAST is WindowEvent.WINDOW_HDR_STATE_CHANGED
    assert category_of(DisplayEvent.DISPLAY_FIRST) is EventCategory.DISPLAY


def test_window_range_contains_all_window_events():
    window = events_of(EventCategory.WINDOW)
    for member in window:
        assert window.WINDOW_FIRST <= member <= window.WINDOW_LAST


def test_category_of_unknown_raises():
    with pytest.raises(ValueError):
        category_of(0)


def test_input_related_categories():
    assert category_of(KeyboardEvent.KEY_UP) is EventCategory.KEYBOARD
    assert category_of(MouseEvent.MOUSE_WHEEL) is EventCategory.MOUSE
    assert category_of(WindowEvent.WINDOW_RESIZED) is EventCategory.WINDOW