from .rng import Mulberry32, randn
from .dataset_utils import (
    GaussianBlobsConfig,
    Point,
    dataset_to_arrays,
    dataset_to_csv,
    generate_two_gaussians,
    load_dataset_from_csv,
    next_seed,
    plot_2d_dataset,
    save_dataset_to_csv,
    write_text_export,
)

__all__ = [
    "Mulberry32",
    "randn",
    "GaussianBlobsConfig",
    "Point",
    "dataset_to_arrays",
    "dataset_to_csv",
    "generate_two_gaussians",
    "load_dataset_from_csv",
    "next_seed",
    "plot_2d_dataset",
    "save_dataset_to_csv",
    "write_text_export",
]
