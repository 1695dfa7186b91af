from .InputLayer import InputLayer
from ..helpers.stats import layer_stats


class Layers:
    """
    Append-only chain of layers headed by an owned InputLayer.

    The chain keeps its layers in an ordered list (head first) and walks that
    list for whole-network operations; propagation itself runs through the
    next_layer / prev_layer links that connect() sets.

    Only the input sentinel belongs to the chain. Layers passed to add() are
    borrowed: the caller keeps them alive, and a layer must not be added to
    more than one chain.
    """

    def __init__(self):
        self._first = InputLayer()
        self._layers = []
        self._head = None
        self._tail = None
        self.add(self._first)

    def add(self, new_tail):
        if self._tail is not None:
            # raises DimensionMismatch before anything below is touched
            self._tail.connect(new_tail)
        if self._head is None:
            self._head = new_tail
        self._tail = new_tail
        self._layers.append(new_tail)

    def empty(self):
        return self._head is None

    def head(self):
        return self._head

    def tail(self):
        return self._tail

    def __len__(self):
        return len(self._layers)

    def __iter__(self):
        return iter(self._layers)

    def __getitem__(self, idx):
        return self._layers[idx]

    # ----- whole-chain operations -----
    def reset(self):
        for layer in self._layers:
            layer.reset()

    def divide_hessian(self, denominator):
        for layer in self._layers:
            layer.divide_hessian(denominator)

    def clear_hessian(self):
        for layer in self._layers:
            layer.clear_hessian()

    # ----- propagation entry points -----
    def forward(self, x):
        return self._head.forward_propagation(x)

    def backward(self, delta, updater):
        return self._tail.back_propagation(delta, updater)

    def backward_2nd(self, delta2):
        return self._tail.back_propagation_2nd(delta2)

    def calc_hessian(self, inputs, max_samples=500):
        """
        Estimate the averaged diagonal Hessian over the first `max_samples`
        inputs and leave it in every layer's weight_hessian / bias_hessian.

        Each sample is propagated forward, then the second-order pass is seeded
        with h'(y)^2 of the tail activation (squared-error loss, whose second
        derivative w.r.t. the output is 1). Returns the number of samples used.
        """
        self.clear_hessian()
        h = self._tail.activation_function()
        count = 0
        for x in inputs:
            if count >= max_samples:
                break
            out = self.forward(x)
            self.backward_2nd(h.df(out) ** 2)
            count += 1
        if count > 0:
            self.divide_hessian(count)
        return count

    # ----- reporting -----
    def param_size(self):
        return sum(layer.param_size() for layer in self._layers)

    def connection_size(self):
        return sum(layer.connection_size() for layer in self._layers)

    def summary(self, verbose=True):
        lines = [f"{'#':>3}  {'layer':<22}{'in':>6}{'out':>6}{'params':>9}  activation"]
        for i, layer in enumerate(self._layers):
            lines.append(
                f"{i:>3}  {layer.__class__.__name__:<22}{layer.in_size():>6}"
                f"{layer.out_size():>6}{layer.param_size():>9}  {layer.activation_function()!r}"
            )
            stats = layer_stats(layer)
            if layer.param_size() > 0:
                lines.append(
                    f"     |W|={stats['weight_norm']:.4f} |b|={stats['bias_norm']:.4f} "
                    f"H_mean={stats['hessian_mean']:.4e} H_max={stats['hessian_max']:.4e}"
                )
        lines.append(f"Total params: {self.param_size()}")
        text = "\n".join(lines)
        if verbose:
            print(text)
        return text
