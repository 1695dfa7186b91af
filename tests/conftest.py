import os

os.environ.setdefault("MPLBACKEND", "Agg")
os.environ.setdefault("NNCHAIN_USE_GPU", "0")

import numpy as np
import pytest

from nnchain import Layers, FullyConnectedLayer, Updater, backend


class RecordingUpdater(Updater):
    """Leaves parameters alone and keeps a copy of everything it was given."""

    def __init__(self):
        self.calls = []

    def update(self, params, grads, hessians=None):
        self.calls.append(
            {
                "params": [np.array(backend.to_cpu(p), copy=True) for p in params],
                "grads": [np.array(backend.to_cpu(g), copy=True) for g in grads],
                "hessians": None
                if hessians is None
                else [np.array(backend.to_cpu(h), copy=True) for h in hessians],
            }
        )


@pytest.fixture(autouse=True)
def seeded():
    backend.seed(1234)


@pytest.fixture
def recorder():
    return RecordingUpdater()


@pytest.fixture
def chain():
    # [input] -> L1 (3 -> 2) -> L2 (2 -> 1)
    layers = Layers()
    layers.add(FullyConnectedLayer(3, 2))
    layers.add(FullyConnectedLayer(2, 1))
    layers.reset()
    return layers
