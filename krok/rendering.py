"""Layered drawing of renderable objects onto a window."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Protocol, Union

_log = logging.getLogger(__name__)


class Window(Protocol):
    """What the renderer needs from a drawing surface."""

    def clear(self) -> None: ...

    def draw(self, renderable: Renderable) -> None: ...

    def display(self) -> None: ...


class Renderable:
    """Something drawn on a render layer; lower layers are drawn first."""

    def __init__(self) -> None:
        self._layer = 0
        self._previous_layer = 0
        self.visible = False
        self.active = True

    @property
    def layer(self) -> int:
        return self._layer

    @property
    def previous_layer(self) -> int:
        return self._previous_layer

    def set_render_layer(self, layer: int) -> None:
        self._layer = layer

    def has_changed_layer(self) -> bool:
        return self._layer != self._previous_layer

    def set_layer_unchanged(self) -> None:
        self._previous_layer = self._layer

    def on_load(self) -> None:
        self.set_layer_unchanged()

    def on_enable(self) -> None:
        self.visible = True

    def on_disable(self) -> None:
        self.visible = False


class RenderLayer:
    """The renderables that share one layer number, in drawing order."""

    def __init__(
        self,
        layer: int,
        renderables: Union[Renderable, Iterable[Renderable], None] = None,
    ) -> None:
        self.layer = layer
        self.renderables: list[Renderable] = []
        if renderables is not None:
            self.add(renderables)

    def add(self, renderables: Union[Renderable, Iterable[Renderable]]) -> None:
        if isinstance(renderables, Renderable):
            self.renderables.append(renderables)
        else:
            self.renderables.extend(renderables)

    def __iter__(self) -> Iterator[Renderable]:
        return iter(self.renderables)

    def __len__(self) -> int:
        return len(self.renderables)


class Renderer:
    """Keeps renderables sorted by layer and draws them onto a window."""

    def __init__(self, window: Window) -> None:
        self.window = window
        self._layers: list[RenderLayer] = [RenderLayer(0)]

    @property
    def layers(self) -> tuple[RenderLayer, ...]:
        return tuple(self._layers)

    def __iter__(self) -> Iterator[Renderable]:
        for render_layer in self._layers:
            yield from render_layer

    def render(self) -> None:
        """Draw every visible, active renderable, then re-sort those that changed layer."""
        self.window.clear()
        for renderable in self:
            if renderable.visible and renderable.active:
                self.window.draw(renderable)
        self.window.display()
        self.check_and_fix()

    def add(self, renderable: Renderable) -> None:
        layer = renderable.layer
        renderable.set_layer_unchanged()

        if layer > self._layers[-1].layer:
            self._layers.append(RenderLayer(layer, renderable))
            return

        for position, render_layer in enumerate(self._layers):
            if render_layer.layer == layer:
                render_layer.add(renderable)
                return
            if render_layer.layer > layer:
                self._layers.insert(position, RenderLayer(layer, renderable))
                return

    def remove(self, renderable: Renderable) -> bool:
        """Remove ``renderable`` from the layer it was last sorted into.

        Returns False, with a warning, if it was not found there.
        """
        for render_layer in self._layers:
            if render_layer.layer != renderable.previous_layer:
                continue
            for position, item in enumerate(render_layer.renderables):
                if item is renderable:
                    del render_layer.renderables[position]
                    return True
        _log.warning("Renderer: could not remove renderable %r", renderable)
        return False

    def check_and_fix(self) -> None:
        """Move renderables whose layer changed to the matching render layer."""
        to_fix = [renderable for renderable in self if renderable.has_changed_layer()]
        for renderable in to_fix:
            self.remove(renderable)
            self.add(renderable)

    def clear_all(self) -> None:
        self._layers = [RenderLayer(0)]