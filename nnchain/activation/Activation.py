from ..helpers.Backend import backend


class Activation:
    """
    Activation policy injected into a layer.

    f(x)   : activation value from the pre-activation x
    df(y)  : first derivative, written in terms of the output y = f(x)
    d2f(y) : second derivative, also in terms of y

    Derivatives take the output rather than the pre-activation because
    layers only keep their last output around.
    """

    def f(self, x):
        raise NotImplementedError

    def df(self, y):
        raise NotImplementedError

    def d2f(self, y):
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class Identity(Activation):
    def f(self, x):
        return x

    def df(self, y):
        return backend.ones_like(y)

    def d2f(self, y):
        return backend.zeros_like(y)


class Sigmoid(Activation):
    def f(self, x):
        return 1.0 / (1.0 + backend.exp(-x))

    def df(self, y):
        return y * (1.0 - y)

    def d2f(self, y):
        return y * (1.0 - y) * (1.0 - 2.0 * y)


class Tanh(Activation):
    def f(self, x):
        return backend.tanh(x)

    def df(self, y):
        return 1.0 - y * y

    def d2f(self, y):
        return -2.0 * y * (1.0 - y * y)


class ReLU(Activation):
    def f(self, x):
        return backend.maximum(0, x)

    def df(self, y):
        return (y > 0).astype(y.dtype)

    def d2f(self, y):
        return backend.zeros_like(y)
