import copy

import pytest

from dfengine.render_callback import RenderCallback


class Pipeline:
    def __init__(self, shader):
        self.shader = shader
        self.closed = False

    def close(self):
        self.closed = True


def test_single_source_builds_one_item():
    callback = RenderCallback("model", "model", Pipeline, lambda item: None)
    assert callback.name == "model"
    assert [item.shader for item in callback.data] == ["model"]


def test_list_of_sources_keeps_order():
    callback = RenderCallback("quads", ["first", "second", "third"], Pipeline, lambda item: None)
    assert [item.shader for item in callback.data] == ["first", "second", "third"]


def test_render_calls_callback_for_each_item_with_args():
    calls = []
    callback = RenderCallback("multi", ("a", "b"), Pipeline, lambda item, *args: calls.append((item.shader, args)))
    callback.render(1, "x")
    assert calls == [("a", (1, "x")), ("b", (1, "x"))]


def test_non_sequence_source_is_single():
    info = {"vertex": "v", "fragment": "f"}
    callback = RenderCallback("pipe", info, lambda source: source["vertex"], lambda item: None)
    assert callback.data == ["v"]


def test_close_releases_items_and_stops_rendering():
    calls = []
    callback = RenderCallback("model", ["a", "b"], Pipeline, lambda item: calls.append(item.shader))
    items = callback.data
    callback.close()
    callback.render()
    assert all(item.closed for item in items)
    assert calls == []
    assert callback.data == []


def test_close_tolerates_items_without_close():
    callback = RenderCallback("plain", ["a"], str.upper, lambda item: None)
    callback.close()
    assert callback.data == []


def test_context_manager_closes():
    with RenderCallback("ctx", ["a"], Pipeline, lambda item: None) as callback:
        items = callback.data
        assert items[0].closed is False
    assert items[0].closed is True


def test_cannot_be_copied():
    callback = RenderCallback("model", "model", Pipeline, lambda item: None)
    with pytest.raises(TypeError):
        copy.deepcopy(callback)