from .plot_adapter import CLASS0_SERIES, CLASS1_SERIES, MatplotlibPlotAdapter, PlotAdapter, RecordingPlotAdapter
from .session import RegeneratePolicy, Session, ViewerConfig, file_exporter

__all__ = [
    "CLASS0_SERIES",
    "CLASS1_SERIES",
    "MatplotlibPlotAdapter",
    "PlotAdapter",
    "RecordingPlotAdapter",
    "RegeneratePolicy",
    "Session",
    "ViewerConfig",
    "file_exporter",
]
