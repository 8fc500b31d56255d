import copy

import pytest

from dfengine.event_manager import EventManager
from dfengine.event_types import ApplicationEvent
from dfengine.input_manager import InputManager, MotionInput, SystemInput
from dfengine.singleton import Singleton, SingletonError


def _reset():
    for cls in (EventManager, InputManager):
        if cls.instance() is not None:
            cls.deinitialize()


@pytest.fixture(autouse=True)
def _clean():
    _reset()
    yield
    _reset()


def test_instance_is_none_before_initialize():
    assert EventManager.instance() is None
    assert InputManager.instance() is None


def test_initialize_returns_registered_instance():
    created = EventManager.initialize()
    assert EventManager.instance() is created
    assert isinstance(created, Singleton)


def test_initialize_passes_arguments():
    quits = []
    InputManager.initialize(on_quit=lambda: quits.append(True))
    InputManager.update([SystemInput(ApplicationEvent.QUIT)])
    assert quits == [True]


def test_initialize_twice_raises():
    EventManager.initialize()
    with pytest.raises(SingletonError):
        EventManager.initialize()


def test_deinitialize_clears_instance_and_state():
    InputManager.initialize()
    InputManager.update([MotionInput(3, 4)])
    assert InputManager.inputs().mouse_cursor.x_current == 3.0
    InputManager.deinitialize()
    assert InputManager.instance() is None
    InputManager.initialize()
    assert InputManager.inputs().mouse_cursor.x_current == -1.0


def test_deinitialize_without_instance_raises():
    with pytest.raises(SingletonError):
        EventManager.deinitialize()


def test_subclasses_are_independent():
    events = EventManager.initialize()
    assert InputManager.instance() is None
    inputs = InputManager.initialize()
    assert EventManager.instance() is events
    assert InputManager.instance() is inputs


def test_reinitialize_after_deinitialize_gives_new_instance():
    first = EventManager.initialize()
    EventManager.deinitialize()
    second = EventManager.initialize()
    assert second is not first
    assert EventManager.instance() is second


def test_instances_cannot_be_copied():
    created = EventManager.initialize()
    with pytest.raises(TypeError):
        copy.copy(created)
    with pytest.raises(TypeError):
        copy.deepcopy(created)
    assert EventManager.instance() is created