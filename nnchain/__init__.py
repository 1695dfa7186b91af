from .errors import NNError, DimensionMismatch
from .activation import Activation, Identity, Sigmoid, Tanh, ReLU
from .layers import LayerBase, InputLayer, FullyConnectedLayer, Layers
from .updater import (
    Updater,
    GradientDescentUpdater,
    LevenbergMarquardtUpdater,
    AdamWUpdater,
)
from .helpers.Backend import backend
from .helpers.logger import RunLogger

__version__ = "0.1.0"

__all__ = [
    "NNError",
    "DimensionMismatch",
    "Activation",
    "Identity",
    "Sigmoid",
    "Tanh",
    "ReLU",
    "LayerBase",
    "InputLayer",
    "FullyConnectedLayer",
    "Layers",
    "Updater",
    "GradientDescentUpdater",
    "LevenbergMarquardtUpdater",
    "AdamWUpdater",
    "backend",
    "RunLogger",
]
