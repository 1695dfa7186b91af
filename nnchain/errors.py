class NNError(Exception):
    """Base class for errors raised by nnchain."""


class DimensionMismatch(NNError, ValueError):
    """Raised when a layer's output size disagrees with its successor's input size."""

    def __init__(self, out_size, in_size):
        self.out_size = out_size
        self.in_size = in_size
        super().__init__(
            f"dimension mismatch: out_size={out_size} cannot feed in_size={in_size}"
        )
