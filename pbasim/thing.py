"""A simulated thing driven by viewer events."""

from __future__ import annotations

from typing import Any, Callable

_USAGE_LINES = (
    "=== PbaThing ===",
    "SPACEBAR     start/stop animation",
    "t/T          reduce/increase animation time step",
)


class PbaThing:
    """Holds a time step and an animation switch, and steps a simulation.

    ``step`` is called with the current time step on every ``solve``.
    """

    def __init__(self, name: str, step: Callable[[float], None] | None = None) -> None:
        self.name = name
        self.viewer: Any = None
        self.visible = True
        self.dt = 1.0 / 24.0
        self.animate = True
        self._step = step

    def keyboard(self, key: str, x: int = 0, y: int = 0) -> None:
        """Space toggles animation; ``t`` / ``T`` shrink / grow the time step."""
        if key == " ":
            self.animate = not self.animate
            print("START" if self.animate else "STOP")
        if key == "t":
            self.dt /= 1.1
            print(f"time step {self.dt:g}")
        if key == "T":
            self.dt *= 1.1
            print(f"time step {self.dt:g}")

    def idle(self) -> None:
        """Advance the simulation when animation is on."""
        if self.animate:
            self.solve()

    def usage(self) -> str:
        """Print the key bindings and return them as text."""
        text = "\n".join(_USAGE_LINES)
        print(text)
        return text

    def metadata(self) -> dict[str, str]:
        """Descriptive values keyed by ``<name>:<field>``."""
        return {f"{self.name}:dt": f"{self.dt:g}"}

    def solve(self) -> None:
        """Run one simulation step of length ``dt``."""
        if self._step is not None:
            self._step(self.dt)