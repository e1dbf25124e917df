"""Interactive matplotlib window driving a search frontier."""

from __future__ import annotations
from typing import Optional

import matplotlib.pyplot as plt

from .renderer import BoardRenderer
from ..solvers.frontier import SearchFrontier, StepResult


STEP_KEY = " "
RESET_KEY = "r"


def keymap_overrides() -> dict:
    """Default key bindings minus the reset key (r is "home view" by default)."""
    return {
        "keymap.home": [k for k in plt.rcParams["keymap.home"] if k != RESET_KEY],
    }


class InteractiveViewer:
    """
    Shows the active board of a frontier and forwards key presses to it.

    space steps the search, r resets it, closing the window (or q) quits.
    """

    def __init__(self, frontier: SearchFrontier, renderer: Optional[BoardRenderer] = None):
        self.frontier = frontier
        self.renderer = renderer or BoardRenderer()
        self.last_result: Optional[StepResult] = None

        self.fig, self.ax = self.renderer.new_figure()
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title("Sudoku")
        self.fig.canvas.mpl_connect("key_press_event", self.on_key)

    def on_key(self, event) -> None:
        if event.key == STEP_KEY:
            self.step()
        elif event.key == RESET_KEY:
            self.reset()
        else:
            return
        self.redraw()

    def step(self) -> Optional[StepResult]:
        """Advance one collapse, only while the active board is incomplete."""
        if self.frontier.active_board().is_complete():
            return None
        self.last_result = self.frontier.step()
        return self.last_result

    def reset(self) -> None:
        self.frontier.reset()
        self.last_result = None

    def status_line(self) -> str:
        return (
            f"{self.frontier.status.value.capitalize()} | "
            f"boards: {len(self.frontier)} | steps: {self.frontier.steps}"
        )

    def redraw(self) -> None:
        self.renderer.draw(self.frontier.active_board(), self.ax)
        self.ax.set_title(self.status_line(), fontsize=12)
        self.fig.canvas.draw_idle()

    def show(self) -> None:
        """Open the window and block until it is closed."""
        self.redraw()
        with plt.rc_context(keymap_overrides()):
            plt.show()
