class Updater:
    """
    Weight-update strategy invoked by a layer during back_propagation.

    update() receives matching lists of parameter arrays, their gradients and
    (optionally) their diagonal Hessian estimates, and mutates each parameter
    array in place. A layer calls it once per back_propagation.
    """

    requires_hessian = False

    def update(self, params, grads, hessians=None):
        raise NotImplementedError(f"{self.__class__.__name__}.update not implemented.")

    def __repr__(self):
        lr = getattr(self, "lr", None)
        if lr is None:
            return f"{self.__class__.__name__}()"
        return f"{self.__class__.__name__}(lr={lr})"
