from .clamp import ThresholdLengthError, clamp
from .config import ThresholdClampConfig

__version__ = "0.1.0"

__all__ = [
    "clamp",
    "ThresholdLengthError",
    "ThresholdClampConfig",
]
