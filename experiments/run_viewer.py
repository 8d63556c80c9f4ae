import argparse
import logging

from viewer.app import BoundaryViewerApp
from viewer.session import RegeneratePolicy, ViewerConfig, file_exporter

logging.basicConfig(
    level=logging.INFO,  # switch to DEBUG to see dropped weight rows
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Interactive decision-boundary stepper.")
    parser.add_argument("--n_points", type=int, default=200, help="Number of points in the dataset")
    parser.add_argument("--seed", type=int, default=123, help="Initial dataset seed")
    parser.add_argument("--interval_ms", type=int, default=300, help="Animation tick interval")
    parser.add_argument("--weights", type=str, default=None, help="CSV file with w0,w1,w2 rows to preload")
    parser.add_argument("--checkpoints", type=str, nargs="*", default=None,
                        help="LinearClassifier .pth checkpoints to preload, in step order")
    parser.add_argument(
        "--on_regenerate",
        type=str,
        default=RegeneratePolicy.PRESERVE.value,
        choices=[p.value for p in RegeneratePolicy],
        help="Keep the current boundary step or reset to baseline when regenerating",
    )
    parser.add_argument("--out_dir", type=str, default=".", help="Where 'Download CSV' writes the dataset")

    args = parser.parse_args()

    config = ViewerConfig(
        n_points=args.n_points,
        initial_seed=args.seed,
        interval_ms=args.interval_ms,
        on_regenerate=RegeneratePolicy(args.on_regenerate),
    )
    app = BoundaryViewerApp(config=config, exporter=file_exporter(args.out_dir))

    if args.weights:
        n = app.session.load_weights_file(args.weights)
        logger.info("Preloaded %d weight steps from %s", n, args.weights)
    elif args.checkpoints:
        n = app.session.load_checkpoints(args.checkpoints)
        logger.info("Preloaded %d weight steps from checkpoints", n)

    app.show()


if __name__ == "__main__":
    main()
