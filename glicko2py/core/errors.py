"""exceptions raised by the rating computations"""


class Glicko2Error(Exception):
    """Base class for every error raised by glicko2py."""


class InvalidArgumentError(Glicko2Error, ValueError):
    """A caller supplied a value outside the domain of the algorithm."""


class ConvergenceError(Glicko2Error, RuntimeError):
    """The volatility solver hit its iteration cap. Should not happen for valid inputs."""
