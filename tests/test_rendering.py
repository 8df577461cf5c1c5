import logging

import pytest

from krok.rendering import RenderLayer, Renderable, Renderer


class FakeWindow:
    def __init__(self):
        self.events = []

    def clear(self):
        self.events.append("clear")

    def draw(self, renderable):
        self.events.append(renderable)

    def display(self):
        self.events.append("display")


def _make(layer=0, visible=True):
    renderable = Renderable()
    renderable.set_render_layer(layer)
    if visible:
        renderable.on_enable()
    return renderable


@pytest.fixture
def renderer():
    return Renderer(FakeWindow())


def test_renderable_layer_change_tracking():
    renderable = Renderable()
    renderable.set_render_layer(4)
    assert renderable.has_changed_layer()
    assert renderable.previous_layer == 0
    renderable.set_layer_unchanged()
    assert not renderable.has_changed_layer()
    assert renderable.previous_layer == renderable.layer


def test_renderable_visibility_hooks():
    renderable = Renderable()
    assert renderable.visible is False
    renderable.on_enable()
    assert renderable.visible is True
    renderable.on_disable()
    assert renderable.visible is False


def test_render_layer_add_single_and_many():
    a, b, c = Renderable(), Renderable(), Renderable()
    layer = RenderLayer(3, a)
    layer.add([b, c])
    assert layer.renderables == [a, b, c]
    assert len(layer) == 3


def test_renderer_starts_with_layer_zero(renderer):
    assert [layer.layer for layer in renderer.layers] == [0]


def test_layers_stay_sorted(renderer):
    for layer in (5, -2, 3, 0, 5):
        renderer.add(_make(layer))
    numbers = [layer.layer for layer in renderer.layers]
    assert numbers == sorted(numbers)
    assert len(numbers) == len(set(numbers))


def test_render_draws_in_layer_order(renderer):
    high, low, mid = _make(2), _make(-1), _make(0)
    for renderable in (high, low, mid):
        renderer.add(renderable)
    renderer.render()
    assert renderer.window.events == ["clear", low, mid, high, "display"]


def test_render_skips_invisible_and_inactive(renderer):
    shown = _make(0)
    hidden = _make(0, visible=False)
    inactive = _make(0)
    inactive.active = False
    for renderable in (shown, hidden, inactive):
        renderer.add(renderable)
    renderer.render()
    assert renderer.window.events == ["clear", shown, "display"]


def test_add_marks_layer_unchanged(renderer):
    renderable = _make(7)
    renderer.add(renderable)
    assert not renderable.has_changed_layer()


def test_remove(renderer):
    renderable = _make(1)
    renderer.add(renderable)
    assert renderer.remove(renderable) is True
    assert list(renderer) == []


def test_remove_missing_warns(renderer, caplog):
    with caplog.at_level(logging.WARNING):
        assert renderer.remove(_make(0)) is False
    assert "could not remove" in caplog.text


def test_check_and_fix_moves_changed_renderables(renderer):
    a, b = _make(0), _make(0)
    renderer.add(a)
    renderer.add(b)
    a.set_render_layer(9)
    renderer.check_and_fix()
    by_layer = {layer.layer: layer.renderables for layer in renderer.layers}
    assert by_layer[9] == [a]
    assert by_layer[0] == [b]
    assert not a.has_changed_layer()


def test_render_fixes_layers_afterwards(renderer):
    a, b = _make(0), _make(1)
    renderer.add(a)
    renderer.add(b)
    a.set_render_layer(2)
    renderer.render()
    assert list(renderer) == [b, a]


def test_clear_all(renderer):
    renderer.add(_make(3))
    renderer.add(_make(-3))
    renderer.clear_all()
    assert [layer.layer for layer in renderer.layers] == [0]
    assert list(renderer) == []