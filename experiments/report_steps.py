import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from boundary.checkpoints import load_checkpoint_sequence
from boundary.metrics import sequence_report
from boundary.weights import load_weight_sequence
from datagen.dataset_utils import dataset_to_arrays, generate_two_gaussians, load_dataset_from_csv

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Accuracy of every weight step on a dataset.")
    parser.add_argument("--weights", type=str, default=None, help="CSV file with w0,w1,w2 rows")
    parser.add_argument("--checkpoints", type=str, nargs="*", default=None,
                        help="LinearClassifier .pth checkpoints, in step order")
    parser.add_argument("--data_path", type=str, default=None,
                        help="Dataset CSV (x1,x2,y); generated from --seed when omitted")
    parser.add_argument("--n_points", type=int, default=200, help="Number of generated points")
    parser.add_argument("--seed", type=int, default=42, help="Seed of the generated dataset")
    parser.add_argument("--save_path", type=str, default="results/step_report.csv", help="Output CSV")

    args = parser.parse_args()
    if not args.weights and not args.checkpoints:
        parser.error("one of --weights or --checkpoints is required")

    if args.data_path:
        logger.info("Loading data from %s", args.data_path)
        points = load_dataset_from_csv(args.data_path)
    else:
        points = generate_two_gaussians(n=args.n_points, seed=args.seed)
    X, y = dataset_to_arrays(points)

    if args.weights:
        weights = load_weight_sequence(args.weights)
    else:
        weights = load_checkpoint_sequence(tqdm(args.checkpoints, desc="checkpoints"))
    logger.info("Evaluating %d weight steps on %d points", len(weights), len(y))

    df = sequence_report(X, y, weights)

    save_path = Path(args.save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(save_path, index=False)
    logger.info("Report saved to %s", save_path)

    if not df.empty:
        best = df.loc[df["accuracy"].idxmax()]
        logger.info("Best step %d with accuracy %.3f", int(best["step"]), best["accuracy"])


if __name__ == "__main__":
    main()
