"""Application skeleton with lifecycle hooks and the loop that drives them."""

from __future__ import annotations

from typing import Callable, Optional


class BaseApp:
    """Lifecycle hooks; each default records the stage it was called in."""

    stage: Optional[str] = None

    def _enter(self, name: str) -> None:
        self.stage = name

    def start(self) -> None:
        """Called first, before initialisation."""
        self._enter("start")

    def init(self) -> None:
        """Called after ``start``."""
        self._enter("init")

    def setup(self) -> None:
        """Called after ``init``, before the first frame."""
        self._enter("setup")

    def update_start(self) -> None:
        """Called at the beginning of each frame."""
        self._enter("update_start")

    def update(self) -> None:
        """Called once per frame to advance state."""
        self._enter("update")

    def draw(self) -> None:
        """Called once per frame after ``update``."""
        self._enter("draw")

    def update_end(self) -> None:
        """Called at the end of each frame."""
        self._enter("update_end")

    def exit(self) -> None:
        """Called first when the loop has finished."""
        self._enter("exit")

    def quit(self) -> None:
        """Called after ``exit``."""
        self._enter("quit")

    def end(self) -> None:
        """Called last."""
        self._enter("end")


def run_app(app: BaseApp, keep_running: Callable[[], bool]) -> int:
    """Run ``app`` while ``keep_running()`` is true; return the number of frames run."""
    if app is None:
        raise ValueError("no application to run")
    app.start()
    app.init()
    app.setup()
    frames = 0
    while keep_running():
        app.update_start()
        app.update()
        app.draw()
        app.update_end()
        frames += 1
    app.exit()
    app.quit()
    app.end()
    return frames