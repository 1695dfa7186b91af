from .Updater import Updater
from ..helpers.Backend import backend


class AdamWUpdater(Updater):
    def __init__(
        self, lr=1e-3, weight_decay=0.0, beta1=0.9, beta2=0.999, eps=1e-8
    ):
        if lr < 0.0:
            raise ValueError(f"Invalid learning rate: {lr}")
        self.lr = lr
        self.weight_decay = weight_decay
        self.beta1 = beta1
        self.beta2 = beta2
        self.eps = eps
        # state keyed by param id; every layer calls update() once per
        # backward pass, so the step count is tracked per param too
        self._t = {}
        self._m = {}
        self._v = {}

    def update(self, params, grads, hessians=None):
        lr = self.lr
        wd = self.weight_decay

        for p, g in zip(params, grads):
            pid = id(p)
            if pid not in self._m:
                self._t[pid] = 0
                self._m[pid] = backend.zeros_like(p)
                self._v[pid] = backend.zeros_like(p)
            self._t[pid] += 1
            t = self._t[pid]
            m = self._m[pid]
            v = self._v[pid]
            # Adam moments (in-place)
            m[...] = self.beta1 * m + (1.0 - self.beta1) * g
            v[...] = self.beta2 * v + (1.0 - self.beta2) * (g * g)
            m_hat = m / (1.0 - self.beta1**t)
            v_hat = v / (1.0 - self.beta2**t)
            # decoupled weight decay
            if wd != 0.0:
                p -= lr * wd * p
            p -= lr * (m_hat / (backend.sqrt(v_hat) + self.eps))
