# nnchain/helpers/stats.py
import numpy as np

from .Backend import backend


def layer_stats(layer):
    """
    Summary numbers for one layer: L2 norms of weight and bias, mean and max
    of the concatenated Hessian diagonal. Parameter-free layers report zeros.
    """
    w = backend.to_cpu(layer.weight)
    b = backend.to_cpu(layer.bias)
    h = np.concatenate([backend.to_cpu(layer.weight_hessian), backend.to_cpu(layer.bias_hessian)])
    return {
        "weight_norm": float(np.linalg.norm(w)),
        "bias_norm": float(np.linalg.norm(b)),
        "hessian_mean": float(np.mean(h)) if h.size > 0 else 0.0,
        "hessian_max": float(np.max(h)) if h.size > 0 else 0.0,
    }
