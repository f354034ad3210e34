"""Sampling an expression in ``x`` over a range for plotting."""

from __future__ import annotations

from dataclasses import dataclass, replace

from smartcalc.evaluator import calculate

_DEFAULT_X_MAX = 5.0
_DEFAULT_Y_MAX = 5.0
_DEFAULT_X_MIN = -5.0
_DEFAULT_Y_MIN = -5.0
_DEFAULT_STEP = 0.5


@dataclass(frozen=True)
class GraphSettings:
    """Plot window and the step between sampled ``x`` values."""

    x_max: float = _DEFAULT_X_MAX
    y_max: float = _DEFAULT_Y_MAX
    x_min: float = _DEFAULT_X_MIN
    y_min: float = _DEFAULT_Y_MIN
    step: float = _DEFAULT_STEP

    def normalized(self) -> GraphSettings:
        """Settings with unusable ranges reset to defaults and a positive step."""
        result = self
        bounds = (self.x_max, self.x_min, self.y_max, self.y_min)
        if (
            not all(bounds)
            or self.x_max == self.x_min
            or self.y_max == self.y_min
        ):
            result = replace(
                result,
                x_max=_DEFAULT_X_MAX,
                y_max=_DEFAULT_Y_MAX,
                x_min=_DEFAULT_X_MIN,
                y_min=_DEFAULT_Y_MIN,
            )
        step = result.step
        if not step:
            step = _DEFAULT_STEP
        if step < 0:
            step = -step
        return replace(result, step=step)


def default_settings() -> GraphSettings:
    """The default plot window."""
    return GraphSettings()


def sample(
    expression: str, settings: GraphSettings | None = None
) -> list[tuple[float, float]]:
    """Evaluate ``expression`` from x_min to x_max; raises ExpressionError."""
    window = (settings or default_settings()).normalized()
    points: list[tuple[float, float]] = []
    x = window.x_min
    while x <= window.x_max:
        points.append((x, float(calculate(expression, x))))
        x += window.step
    return points