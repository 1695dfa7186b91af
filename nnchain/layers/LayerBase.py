import math
from ..activation import Identity
from ..errors import DimensionMismatch
from ..helpers.Backend import backend


class LayerBase:
    """
    Base class of all layers in a chain.

    Every layer owns its parameters (weight, bias), their diagonal Hessian
    estimates, and one buffer per propagation pass:

        output      : last forward result, size out_size
        delta       : last backward result (dE/d input), size in_size
        prev_delta2 : last second-order backward result, size in_size

    The buffers are allocated once and overwritten in place on every call.
    Callers must not hold on to a returned buffer across the next call.

    Propagation is chain-recursive: forward_propagation hands its output to
    next_layer and returns whatever the chain tail produces; the two backward
    passes hand their result to prev_layer the same way. The links are set by
    connect() and never changed afterwards.

    Subclasses implement:
      - forward_propagation(self, x)
      - back_propagation(self, current_delta, updater)
      - back_propagation_2nd(self, current_delta2)
      - fan_in_size(self), connection_size(self)
    """

    def __init__(self, in_dim, out_dim, weight_dim, bias_dim, activation=None):
        self.next_layer = None
        self.prev_layer = None
        self.activation = activation if activation is not None else Identity()
        self._set_size(in_dim, out_dim, weight_dim, bias_dim)

    def _set_size(self, in_dim, out_dim, weight_dim, bias_dim):
        self._in_size = int(in_dim)
        self._out_size = int(out_dim)
        self.output = backend.zeros(out_dim)
        self.delta = backend.zeros(in_dim)
        self.weight = backend.zeros(weight_dim)
        self.bias = backend.zeros(bias_dim)
        self.weight_hessian = backend.zeros(weight_dim)
        self.bias_hessian = backend.zeros(bias_dim)
        self.prev_delta2 = backend.zeros(in_dim)

    def _fit_out_size(self, n):
        # sizes are fixed at construction; InputLayer overrides this
        pass

    # ----- structure -----
    def connect(self, next_layer):
        if self.out_size() != 0 and next_layer.in_size() != self.out_size():
            raise DimensionMismatch(self.out_size(), next_layer.in_size())
        if self.out_size() == 0:
            self._fit_out_size(next_layer.in_size())
        self.next_layer = next_layer
        next_layer.prev_layer = self

    # ----- sizes -----
    def in_size(self):
        return self._in_size

    def out_size(self):
        return self._out_size

    def param_size(self):
        return int(self.weight.size + self.bias.size)

    def fan_in_size(self):
        raise NotImplementedError(f"{self.__class__.__name__}.fan_in_size not implemented.")

    def connection_size(self):
        raise NotImplementedError(f"{self.__class__.__name__}.connection_size not implemented.")

    # ----- parameters -----
    def init_weight(self):
        weight_base = 0.5 / math.sqrt(self.fan_in_size())

        backend.uniform_rand(self.weight, -weight_base, weight_base)
        backend.uniform_rand(self.bias, -weight_base, weight_base)
        self.clear_hessian()

    def reset(self):
        self.init_weight()

    def clear_hessian(self):
        self.weight_hessian[...] = 0.0
        self.bias_hessian[...] = 0.0

    def divide_hessian(self, denominator):
        # denominator == 0 is the caller's problem
        self.weight_hessian /= denominator
        self.bias_hessian /= denominator

    def activation_function(self):
        return self.activation

    # ----- propagation -----
    def forward_propagation(self, x):
        raise NotImplementedError(f"{self.__class__.__name__}.forward_propagation not implemented.")

    def back_propagation(self, current_delta, updater):
        raise NotImplementedError(f"{self.__class__.__name__}.back_propagation not implemented.")

    def back_propagation_2nd(self, current_delta2):
        raise NotImplementedError(f"{self.__class__.__name__}.back_propagation_2nd not implemented.")

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(in={self.in_size()}, out={self.out_size()}, "
            f"params={self.param_size()}, activation={self.activation!r})"
        )
