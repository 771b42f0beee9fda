"""math utility functions for the glicko 2 update"""
import math
import numpy as np
from scipy.special import expit
from glicko2py.utils.constants import THREE_OVER_PI_SQUARED


def sigmoid(x):
    """a little faster than implementing it in numpy for d < 100000"""
    return expit(x)


def sigmoid_scalar(x):
    """scalar version, saturates to 0.0 or 1.0 instead of overflowing"""
    return float(expit(x))


def g_scalar(phi):
    """dampens an opponent's influence by that opponent's uncertainty"""
    return 1.0 / math.sqrt(1.0 + (THREE_OVER_PI_SQUARED * (phi * phi)))


def g_vector(phi):
    """vector version"""
    return 1.0 / np.sqrt(1.0 + (THREE_OVER_PI_SQUARED * np.square(phi)))
