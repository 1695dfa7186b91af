from .LayerBase import LayerBase
from ..helpers.Backend import backend


class FullyConnectedLayer(LayerBase):
    def __init__(self, in_features, out_features, activation=None):
        # weight: in_features * out_features, index c * out_features + r links
        # input c to output r, i.e. a row-major (in_features, out_features) matrix
        # bias: out_features
        super().__init__(
            in_features,
            out_features,
            in_features * out_features,
            out_features,
            activation=activation,
        )
        self.in_features = in_features
        self.out_features = out_features

    # ----- helpers -----
    def _W(self):
        return backend.reshape(self.weight, (self.in_features, self.out_features))

    def _W_hessian(self):
        return backend.reshape(self.weight_hessian, (self.in_features, self.out_features))

    def forward_propagation(self, x):
        # x shape: (in_features,)
        # output shape: (out_features,)
        x = backend.ensure_array(x)
        z = backend.matmul(x, self._W()) + self.bias
        self.output[...] = self.activation.f(z)
        if self.next_layer is not None:
            return self.next_layer.forward_propagation(self.output)
        return self.output

    def back_propagation(self, current_delta, updater):
        current_delta = backend.ensure_array(current_delta)
        prev_out = self.prev_layer.output
        prev_h = self.prev_layer.activation_function()

        # delta must see the weights as they were during forward
        self.delta[...] = backend.matmul(self._W(), current_delta) * prev_h.df(prev_out)

        dW = backend.ravel(backend.outer(prev_out, current_delta))
        db = current_delta
        updater.update(
            [self.weight, self.bias],
            [dW, db],
            [self.weight_hessian, self.bias_hessian],
        )
        return self.prev_layer.back_propagation(self.delta, updater)

    def back_propagation_2nd(self, current_delta2):
        current_delta2 = backend.ensure_array(current_delta2)
        prev_out = self.prev_layer.output
        prev_h = self.prev_layer.activation_function()

        self._W_hessian()[...] += backend.outer(prev_out * prev_out, current_delta2)
        self.bias_hessian += current_delta2

        W = self._W()
        self.prev_delta2[...] = backend.matmul(W * W, current_delta2) * prev_h.df(prev_out) ** 2
        return self.prev_layer.back_propagation_2nd(self.prev_delta2)

    def fan_in_size(self):
        return self.in_features

    def connection_size(self):
        return self.in_features
