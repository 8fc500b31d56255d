import pytest

from dfengine.render_callback import RenderCallback
from dfengine.render_callback_manager import RenderCallbackManager
from dfengine.singleton import SingletonError


class Item:
    def __init__(self, source):
        self.source = source
        self.closed = False
        self.rendered = []

    def close(self):
        self.closed = True


@pytest.fixture
def manager():
    instance = RenderCallbackManager.initialize()
    yield instance
    if RenderCallbackManager.instance() is not None:
        RenderCallbackManager.deinitialize()


def _recorder():
    calls = []

    def callback(item, *args):
        calls.append((item.source, args))
        item.rendered.append(args)

    return calls, callback


def test_create_registers_by_name(manager):
    _, callback = _recorder()
    created = RenderCallbackManager.create("mesh", "shader_a", Item, callback)
    assert created.name == "mesh"
    assert RenderCallbackManager.get("mesh") is created
    assert [item.source for item in created.data] == ["shader_a"]


def test_create_with_several_sources(manager):
    _, callback = _recorder()
    created = RenderCallbackManager.create("multi", ["a", "b"], Item, callback)
    assert [item.source for item in created.data] == ["a", "b"]


def test_create_duplicate_returns_none_and_keeps_first(manager):
    _, callback = _recorder()
    first = RenderCallbackManager.create("mesh", "a", Item, callback)
    assert RenderCallbackManager.create("mesh", "b", Item, callback) is None
    assert RenderCallbackManager.get("mesh") is first


def test_get_missing_returns_none(manager):
    assert RenderCallbackManager.get("missing") is None


def test_destroy_by_name_closes_items(manager):
    _, callback = _recorder()
    created = RenderCallbackManager.create("mesh", "a", Item, callback)
    item = created.data[0]
    assert RenderCallbackManager.destroy("mesh") is True
    assert item.closed is True
    assert RenderCallbackManager.get("mesh") is None


def test_destroy_missing_name_returns_false(manager):
    assert RenderCallbackManager.destroy("missing") is False


def test_destroy_by_object(manager):
    _, callback = _recorder()
    created = RenderCallbackManager.create("mesh", "a", Item, callback)
    item = created.data[0]
    assert RenderCallbackManager.destroy(created) is True
    assert item.closed is True
    assert "mesh" not in manager


def test_destroy_none_returns_false(manager):
    assert RenderCallbackManager.destroy(None) is False


def test_destroy_unmanaged_object_returns_false(manager):
    _, callback = _recorder()
    stray = RenderCallback("stray", "a", Item, callback)
    assert RenderCallbackManager.destroy(stray) is False
    assert stray.data[0].closed is False


def test_clear_closes_everything(manager):
    _, callback = _recorder()
    first = RenderCallbackManager.create("one", "a", Item, callback)
    second = RenderCallbackManager.create("two", "b", Item, callback)
    items = first.data + second.data
    RenderCallbackManager.clear()
    assert all(item.closed for item in items)
    assert len(manager) == 0


def test_render_by_name_passes_arguments(manager):
    calls, callback = _recorder()
    created = RenderCallbackManager.create("multi", ["a", "b"], Item, callback)
    RenderCallbackManager.render("multi", 1, "x")
    assert [item.rendered for item in created.data] == [[(1, "x")], [(1, "x")]]
    assert calls == [("a", (1, "x")), ("b", (1, "x"))]


def test_render_by_object(manager):
    calls, callback = _recorder()
    created = RenderCallbackManager.create("mesh", "a", Item, callback)
    RenderCallbackManager.render(created, 7)
    assert created.data[0].rendered == [(7,)]
    assert calls == [("a", (7,))]


def test_render_missing_name_does_nothing(manager):
    calls, callback = _recorder()
    created = RenderCallbackManager.create("mesh", "a", Item, callback)
    RenderCallbackManager.render("other")
    assert created.data[0].rendered == []
    assert calls == []


def test_deinitialize_closes_callbacks(manager):
    _, callback = _recorder()
    created = RenderCallbackManager.create("mesh", "a", Item, callback)
    item = created.data[0]
    RenderCallbackManager.deinitialize()
    assert item.closed is True
    assert RenderCallbackManager.instance() is None


def test_use_without_instance_raises():
    with pytest.raises(SingletonError):
        RenderCallbackManager.get("mesh")