from .Updater import Updater
from .GradientDescentUpdater import GradientDescentUpdater
from .LevenbergMarquardtUpdater import LevenbergMarquardtUpdater
from .AdamWUpdater import AdamWUpdater

__all__ = [
    "Updater",
    "GradientDescentUpdater",
    "LevenbergMarquardtUpdater",
    "AdamWUpdater",
]
