from .Updater import Updater


class LevenbergMarquardtUpdater(Updater):
    """
    Stochastic diagonal Levenberg-Marquardt step:

        p -= lr / (h + mu) * g

    h is the diagonal Hessian estimate of each parameter. It is expected to be
    averaged (Layers.calc_hessian or divide_hessian) before training; a raw sum
    over many samples shrinks the step accordingly.
    """

    requires_hessian = True

    def __init__(self, lr=0.00085, mu=0.02):
        if lr < 0.0:
            raise ValueError(f"Invalid learning rate: {lr}")
        if mu <= 0.0:
            raise ValueError(f"Invalid damping mu: {mu}")
        self.lr = lr
        self.mu = mu

    def update(self, params, grads, hessians=None):
        if hessians is None:
            raise ValueError("LevenbergMarquardtUpdater needs the Hessian diagonals")
        for p, g, h in zip(params, grads, hessians):
            p -= (self.lr / (h + self.mu)) * g
