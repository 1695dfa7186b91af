from .LayerBase import LayerBase
from .InputLayer import InputLayer
from .FullyConnectedLayer import FullyConnectedLayer
from .Layers import Layers

__all__ = [
    "LayerBase",
    "InputLayer",
    "FullyConnectedLayer",
    "Layers",
]
