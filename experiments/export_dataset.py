import argparse
import logging

from datagen.dataset_utils import generate_two_gaussians, plot_2d_dataset, save_dataset_to_csv

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Generate the two-feature binary dataset and save it as CSV")
    parser.add_argument("--n_points", type=int, default=200, help="Number of points")
    parser.add_argument("--seed", type=int, default=42, help="Generator seed")
    parser.add_argument("--out_dir", type=str, default=".", help="Output directory")
    parser.add_argument("--no_plot", action="store_true", help="Skip the scatter plot PNG")

    args = parser.parse_args()

    points = generate_two_gaussians(n=args.n_points, seed=args.seed)
    n_class0 = sum(1 for p in points if p.y == 0)
    logger.info("Generated %d points (class 0: %d, class 1: %d)", len(points), n_class0, len(points) - n_class0)

    csv_path = save_dataset_to_csv(points, out_dir=args.out_dir)
    logger.info("Data saved to: %s", csv_path)

    if not args.no_plot:
        plot_path = plot_2d_dataset(points, out_dir=args.out_dir, show=False)
        logger.info("Plot saved to: %s", plot_path)


if __name__ == "__main__":
    main()
