from .LayerBase import LayerBase
from ..activation import Identity
from ..helpers.Backend import backend


class InputLayer(LayerBase):
    """
    Transparent head of every chain.

    Has no parameters and performs no transform: forward copies the input into
    output and passes it on, both backward passes return their argument
    untouched. Starts with in_size = out_size = 0 and takes the size of the
    first layer it is connected to.
    """

    def __init__(self):
        super().__init__(0, 0, 0, 0, activation=Identity())

    def _fit_out_size(self, n):
        self._in_size = int(n)
        self._out_size = int(n)
        self.output = backend.zeros(n)
        self.delta = backend.zeros(n)
        self.prev_delta2 = backend.zeros(n)

    def forward_propagation(self, x):
        self.output = backend.copy_into(self.output, x)
        if self.next_layer is not None:
            return self.next_layer.forward_propagation(self.output)
        return self.output

    def back_propagation(self, current_delta, updater):
        return current_delta

    def back_propagation_2nd(self, current_delta2):
        return current_delta2

    def connection_size(self):
        return self.in_size()

    def fan_in_size(self):
        return 1
