import logging
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.widgets import Button, Slider, TextBox

from animation.scheduler import MatplotlibScheduler

from .plot_adapter import MatplotlibPlotAdapter
from .session import Exporter, Session, ViewerConfig

logger = logging.getLogger(__name__)

MIN_INTERVAL_MS = 50
MAX_INTERVAL_MS = 1500


class BoundaryViewerApp:
    """
    Matplotlib window around a Session: scatter plot, buttons, speed slider,
    weights box and a status line. Each widget forwards to one command.
    """

    def __init__(self, config: Optional[ViewerConfig] = None, exporter: Optional[Exporter] = None):
        self.fig = plt.figure(figsize=(10, 7.5))
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title("Decision boundary stepper")
        self.ax = self.fig.add_axes([0.08, 0.30, 0.88, 0.64])
        self.ax.set_title("Two-feature binary dataset")

        self.plot = MatplotlibPlotAdapter(self.ax)
        self.session = Session(self.plot, MatplotlibScheduler(self.fig.canvas), exporter=exporter, config=config)

        self._build_widgets()
        self.session.animator.add_listener(lambda _animator: self._update_status())
        self.session.render()
        self._update_status()

    def _button(self, rect, label, command):
        button = Button(self.fig.add_axes(rect), label)
        button.on_clicked(lambda _event: self._run(command))
        return button

    def _build_widgets(self) -> None:
        self.regen_btn = self._button([0.08, 0.17, 0.14, 0.05], "Regenerate", "regenerate")
        self.export_btn = self._button([0.23, 0.17, 0.14, 0.05], "Download CSV", "export")
        self.step_btn = self._button([0.45, 0.17, 0.10, 0.05], "Step", "step")
        self.animate_btn = self._button([0.56, 0.17, 0.12, 0.05], "Animate", "toggle_animate")
        self.reset_btn = self._button([0.69, 0.17, 0.12, 0.05], "Reset", "reset_animation")

        self.weights_box = TextBox(self.fig.add_axes([0.20, 0.10, 0.48, 0.045]), "Weights file or w0,w1,w2 ")
        self.load_btn = Button(self.fig.add_axes([0.69, 0.10, 0.12, 0.045]), "Load weights")
        self.load_btn.on_clicked(lambda _event: self._load_weights())

        self.speed_slider = Slider(
            self.fig.add_axes([0.20, 0.04, 0.48, 0.03]),
            "Speed (ms)",
            MIN_INTERVAL_MS,
            MAX_INTERVAL_MS,
            valinit=self.session.interval_ms,
            valstep=10,
        )
        self.speed_slider.on_changed(lambda value: self._run("set_speed", int(value)))

        self.status = self.fig.text(0.08, 0.24, "", fontsize=10)

    def _run(self, command: str, *args):
        try:
            result = self.session.dispatch(command, *args)
        except (OSError, ValueError) as exc:
            logger.error("%s failed: %s", command, exc)
            self.status.set_text(f"{command} failed: {exc}")
            self.fig.canvas.draw_idle()
            return None
        if command == "export":
            logger.info("Dataset exported to %s", result)
        self._update_status()
        return result

    def _load_weights(self) -> None:
        self._run("load_weights_input", self.weights_box.text)

    def _update_status(self) -> None:
        animator = self.session.animator
        self.animate_btn.label.set_text("Pause" if animator.is_running else "Animate")
        self.status.set_text(self.session.status_text())
        self.fig.canvas.draw_idle()

    def show(self) -> None:
        plt.show()
