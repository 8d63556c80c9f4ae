from pathlib import Path
from typing import Iterable, Mapping, Tuple, Union

import torch
import torch.nn as nn

from .weights import WeightTriple

PathLike = Union[str, Path]


class LinearClassifier(nn.Module):
    """
    A strictly linear 2-feature classifier (logistic regression).
    Architecture: Input(2) -> Linear(num_classes)

    Only used to read checkpoints produced elsewhere; nothing here trains it.
    """
    def __init__(self, input_dim: int = 2, num_classes: int = 2):
        super().__init__()
        self.fc = nn.Linear(input_dim, num_classes)

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        return self.fc(x)


def weights_from_state_dict(state_dict: Mapping[str, torch.Tensor]) -> WeightTriple:
    """
    Convert a LinearClassifier state dict into the boundary weight triple.

    With two output logits the boundary is where ``logit_1 - logit_0 = 0``;
    with a single logit it is where that logit is zero.
    """
    if "fc.weight" not in state_dict or "fc.bias" not in state_dict:
        raise ValueError("State dict has no 'fc.weight' / 'fc.bias' entries")

    weight = state_dict["fc.weight"].detach().to(torch.float64).cpu()
    bias = state_dict["fc.bias"].detach().to(torch.float64).cpu()

    if weight.dim() != 2 or weight.shape[1] != 2:
        raise ValueError(f"Expected fc.weight of shape (k, 2), got {tuple(weight.shape)}")
    if bias.shape != (weight.shape[0],):
        raise ValueError(f"fc.bias shape {tuple(bias.shape)} does not match fc.weight {tuple(weight.shape)}")

    if weight.shape[0] == 1:
        w = weight[0]
        b = bias[0]
    elif weight.shape[0] == 2:
        w = weight[1] - weight[0]
        b = bias[1] - bias[0]
    else:
        raise ValueError(f"Only 1 or 2 output logits define a single line, got {weight.shape[0]}")

    return WeightTriple(w0=float(b), w1=float(w[0]), w2=float(w[1]))


def weights_from_model(model: LinearClassifier) -> WeightTriple:
    return weights_from_state_dict(model.state_dict())


def load_checkpoint_sequence(paths: Iterable[PathLike]) -> Tuple[WeightTriple, ...]:
    """
    Read one weight triple per checkpoint, in the order given.

    Args:
        paths: ``.pth`` files holding LinearClassifier state dicts, one per
            training snapshot.

    Returns:
        The weight sequence, ready for ``BoundaryAnimator.load_sequence``.
    """
    out = []
    for path in paths:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Checkpoint not found at {path}")
        state_dict = torch.load(path, map_location="cpu")
        out.append(weights_from_state_dict(state_dict))
    return tuple(out)
