from .tweet import Tweet
from .analysis import Analysis
from .correction import Correction

__all__ = ["Tweet", "Analysis", "Correction"]
