"""Level slider -- keyboard-driven stepped value with a bar readout."""

from __future__ import annotations

from textual.binding import Binding
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget

_FILLED = '━'
_EMPTY = '─'
_KNOB = '●'


class LevelSlider(Widget, can_focus=True):
    """Horizontal slider; ←/→ step, Home/End jump to the limits."""

    DEFAULT_CSS = """
    LevelSlider {
        height: 1;
        width: 1fr;
    }
    LevelSlider:focus {
        background: $boost;
    }
    """

    BINDINGS = [
        Binding('left', 'step(-1)', 'Decrease', show=False),
        Binding('right', 'step(1)', 'Increase', show=False),
        Binding('home', 'jump_min', 'Minimum', show=False),
        Binding('end', 'jump_max', 'Maximum', show=False),
    ]

    value: reactive[float] = reactive(0.0)

    class Changed(Message):
        def __init__(self, slider: LevelSlider, value: float) -> None:
            super().__init__()
            self.slider = slider
            self.value = value

        @property
        def control(self) -> LevelSlider:
            return self.slider

    def __init__(
        self,
        value: float,
        *,
        minimum: float = 0.0,
        maximum: float = 100.0,
        step: float = 1.0,
        suffix: str = '',
        show_value: bool = True,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.minimum = minimum
        self.maximum = maximum
        self.step = step
        self.suffix = suffix
        self.show_value = show_value
        self.set_reactive(LevelSlider.value, self._clamp(value))

    def _clamp(self, value: float) -> float:
        return min(max(value, self.minimum), self.maximum)

    def validate_value(self, value: float) -> float:
        return self._clamp(value)

    def watch_value(self, old: float, new: float) -> None:
        if old != new:
            self.post_message(self.Changed(self, new))

    def sync(self, value: float) -> None:
        """Move the knob to *value* without posting Changed."""
        self.set_reactive(LevelSlider.value, self._clamp(value))
        self.refresh()

    def action_step(self, direction: int) -> None:
        self.value = self.value + direction * self.step

    def action_jump_min(self) -> None:
        self.value = self.minimum

    def action_jump_max(self) -> None:
        self.value = self.maximum

    @property
    def fraction(self) -> float:
        span = self.maximum - self.minimum
        return 0.0 if span <= 0 else (self.value - self.minimum) / span

    def render(self) -> str:
        label = f' {self.value:g}{self.suffix}' if self.show_value else ''
        track = max((self.size.width or 24) - len(label) - 1, 4)
        knob = min(int(self.fraction * track), track - 1)
        return _FILLED * knob + _KNOB + _EMPTY * (track - knob - 1) + label
