from .Activation import Activation, Identity, Sigmoid, Tanh, ReLU

__all__ = [
    "Activation",
    "Identity",
    "Sigmoid",
    "Tanh",
    "ReLU",
]
