# nnchain/helpers/Backend.py
import os
import numpy as np

USE_GPU = os.environ.get("NNCHAIN_USE_GPU", "1") != "0"
DEFAULT_FLOAT = np.dtype(os.environ.get("NNCHAIN_FLOAT", "float32")).type
VERBOSE_STARTUP = os.environ.get("NNCHAIN_VERBOSE", "0") == "1"

try:
    import cupy as cp

    # Quick runtime check
    try:
        _ = (cp.array([1, 2, 3]) + 1).sum()
        CUPY_AVAILABLE = True
    except Exception as e:
        if VERBOSE_STARTUP:
            print(f"CuPy installed but CUDA runtime error: {e}")
            print("Falling back to CPU (NumPy)")
        cp = None
        CUPY_AVAILABLE = False
except ImportError:
    cp = None
    CUPY_AVAILABLE = False


class Backend:
    """Backend abstraction for NumPy/CuPy compatibility."""
    def __init__(self, use_gpu=True, default_float=np.float32, verbose=False):
        self.use_gpu = bool(use_gpu and CUPY_AVAILABLE)
        self.default_float = default_float
        self.xp = cp if self.use_gpu else np
        if verbose:
            if self.use_gpu:
                print("Using GPU backend (CuPy)")
            else:
                print("Using CPU backend (NumPy)")

    # -------- device transfer --------
    def to_cpu(self, x):
        """Move array to CPU (NumPy)."""
        if self.use_gpu and x is not None and not isinstance(x, np.ndarray):
            return cp.asnumpy(x)
        return x

    def ensure_array(self, x, dtype=None):
        """
        Ensure 'x' is a 1-D-or-more array of the current backend.
        Accepts list/tuple/np/cp arrays; returns xp.ndarray without copying
        when it already is one of the right dtype.
        """
        if dtype is None:
            dtype = self.default_float
        if self.use_gpu and isinstance(x, np.ndarray):
            return cp.asarray(x, dtype=dtype)
        if (not self.use_gpu) and (cp is not None) and isinstance(x, cp.ndarray):
            return cp.asnumpy(x).astype(dtype, copy=False)
        return self.xp.asarray(x, dtype=dtype)

    # -------- array creation --------
    def zeros(self, n):
        return self.xp.zeros(n, dtype=self.default_float)

    def copy_into(self, dst, src):
        """
        Copy 'src' into 'dst' reusing its storage; returns a fresh buffer
        only when the lengths disagree.
        """
        src = self.ensure_array(src)
        if dst is not None and dst.shape == src.shape:
            dst[...] = src
            return dst
        return src.copy()

    # -------- random source --------
    @property
    def random(self):
        return self.xp.random

    def uniform_rand(self, dst, low, high):
        """Fill 'dst' in place with values drawn uniformly from [low, high]."""
        if dst.size == 0:
            return dst
        lo, hi = self._inner_bounds(dst.dtype.type, low, high)
        values = self.xp.random.uniform(low, high, size=dst.shape)
        dst[...] = self.xp.clip(values, lo, hi)
        return dst

    @staticmethod
    def _inner_bounds(dtype, low, high):
        # bounds representable in dtype that lie inside [low, high]
        lo, hi = dtype(low), dtype(high)
        if float(lo) < low:
            lo = np.nextafter(lo, dtype(np.inf))
        if float(hi) > high:
            hi = np.nextafter(hi, dtype(-np.inf))
        return lo, hi

    def seed(self, seed=42):
        """Seed RNG for reproducibility."""
        if self.use_gpu:
            cp.random.seed(seed)
        np.random.seed(seed)

    # -------- delegate unknown attrs to xp --------
    def __getattr__(self, name):
        return getattr(self.xp, name)


# Global backend instance - can be overridden
backend = Backend(use_gpu=USE_GPU, default_float=DEFAULT_FLOAT, verbose=VERBOSE_STARTUP)
