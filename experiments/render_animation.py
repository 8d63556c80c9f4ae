import argparse
import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter
from tqdm import tqdm

from animation.scheduler import ManualScheduler
from viewer.plot_adapter import MatplotlibPlotAdapter
from viewer.session import Session, ViewerConfig

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


def render_gif(session: Session, scheduler: ManualScheduler, fig, save_path: Path) -> Path:
    """
    Play the loaded weight sequence frame by frame and save it as a GIF.

    Frame 0 shows the baseline; every further frame is one animation tick.
    """
    n_steps = len(session.animator.weights)
    title = session.plot.ax.set_title(session.status_text())

    session.reset_animation()
    session.toggle_animate()

    def update(frame):
        if frame > 0:
            scheduler.tick()
        title.set_text(session.status_text())
        return [title]

    anim = FuncAnimation(fig, update, frames=n_steps + 1, blit=False, repeat=False)
    fps = max(1.0, 1000.0 / session.interval_ms)

    save_path.parent.mkdir(parents=True, exist_ok=True)
    with tqdm(total=n_steps + 1, desc="frames") as bar:
        anim.save(
            str(save_path),
            writer=PillowWriter(fps=fps),
            progress_callback=lambda i, n: bar.update(1),
        )
    session.animator.stop()
    return save_path


def main():
    parser = argparse.ArgumentParser(description="Render the boundary step animation to a GIF.")
    parser.add_argument("--weights", type=str, default=None, help="CSV file with w0,w1,w2 rows")
    parser.add_argument("--checkpoints", type=str, nargs="*", default=None,
                        help="LinearClassifier .pth checkpoints, in step order")
    parser.add_argument("--n_points", type=int, default=200, help="Number of points in the dataset")
    parser.add_argument("--seed", type=int, default=123, help="Dataset seed")
    parser.add_argument("--interval_ms", type=int, default=300, help="Frame duration")
    parser.add_argument("--save_path", type=str, default="figures/boundary_steps.gif", help="Output GIF")

    args = parser.parse_args()
    if not args.weights and not args.checkpoints:
        parser.error("one of --weights or --checkpoints is required")

    fig, ax = plt.subplots(figsize=(8, 6))
    scheduler = ManualScheduler()
    session = Session(
        MatplotlibPlotAdapter(ax, interactive=False),
        scheduler,
        config=ViewerConfig(n_points=args.n_points, initial_seed=args.seed, interval_ms=args.interval_ms),
    )
    session.render()

    if args.weights:
        n = session.load_weights_file(args.weights)
    else:
        n = session.load_checkpoints(args.checkpoints)
    if n == 0:
        logger.warning("No weight steps loaded; nothing to animate")
        return

    out = render_gif(session, scheduler, fig, Path(args.save_path))
    plt.close(fig)
    logger.info("Animation saved to %s", out)


if __name__ == "__main__":
    main()
