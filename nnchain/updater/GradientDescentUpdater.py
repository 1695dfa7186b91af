from .Updater import Updater


class GradientDescentUpdater(Updater):
    def __init__(self, lr=1e-2, weight_decay=0.0):
        if lr < 0.0:
            raise ValueError(f"Invalid learning rate: {lr}")
        self.lr = lr
        self.wd = weight_decay

    def update(self, params, grads, hessians=None):
        for p, g in zip(params, grads):
            if self.wd != 0.0:
                p -= self.lr * (g + self.wd * p)  # L2 weight decay
            else:
                p -= self.lr * g
