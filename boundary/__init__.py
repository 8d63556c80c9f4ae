from .weights import WeightTriple, load_weight_sequence, parse_weight_sequence, weights_to_csv
from .geometry import EPSILON, AxisBounds, Segment, axis_bounds, line_for
from .checkpoints import LinearClassifier, load_checkpoint_sequence, weights_from_model, weights_from_state_dict
from .metrics import boundary_scores, sequence_report, step_accuracy

__all__ = [
    "WeightTriple",
    "load_weight_sequence",
    "parse_weight_sequence",
    "weights_to_csv",
    "EPSILON",
    "AxisBounds",
    "Segment",
    "axis_bounds",
    "line_for",
    "LinearClassifier",
    "load_checkpoint_sequence",
    "weights_from_model",
    "weights_from_state_dict",
    "boundary_scores",
    "sequence_report",
    "step_accuracy",
]
