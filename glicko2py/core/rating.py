"""Immutable rating values and game results on the internal glicko 2 scale"""
import math
from dataclasses import dataclass
from glicko2py.core.errors import InvalidArgumentError
from glicko2py.utils.constants import INITIAL_RATING, INITIAL_DEVIATION, INITIAL_VOLATILITY


def _check_finite(name, x):
    try:
        finite = math.isfinite(x)
    except TypeError as exc:
        raise InvalidArgumentError(f'{name} must be a real number, got {x!r}') from exc
    if not finite:
        raise InvalidArgumentError(f'{name} must be finite, got {x}')


@dataclass(frozen=True)
class Rating:
    """
    A competitor's rating on the internal (glicko 2) scale.

    Attributes:
        value (float): rating strength, 0.0 is an average new player.
        deviation (float): phi, the uncertainty in value. Must be positive.
        volatility (float): sigma, the expected fluctuation of value over time. Must be positive.
    """

    value: float
    deviation: float
    volatility: float

    def __post_init__(self):
        _check_finite('value', self.value)
        _check_finite('deviation', self.deviation)
        _check_finite('volatility', self.volatility)
        if self.deviation <= 0.0:
            raise InvalidArgumentError(f'deviation must be positive, got {self.deviation}')
        if self.volatility <= 0.0:
            raise InvalidArgumentError(f'volatility must be positive, got {self.volatility}')

    def __iter__(self):
        return iter((self.value, self.deviation, self.volatility))


@dataclass(frozen=True)
class GameResult:
    """the outcome of one game from the rated player's point of view: 1 win, 0.5 draw, 0 loss"""

    opponent: Rating
    score: float

    def __post_init__(self):
        if not isinstance(self.opponent, Rating):
            raise InvalidArgumentError(f'opponent must be a Rating, got {type(self.opponent).__name__}')
        _check_finite('score', self.score)
        if not 0.0 <= self.score <= 1.0:
            raise InvalidArgumentError(f'score must be in [0, 1], got {self.score}')

    @classmethod
    def coerce(cls, result):
        """accept either a GameResult or a plain (opponent, score) pair"""
        if isinstance(result, cls):
            return result
        try:
            opponent, score = result
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f'expected an (opponent, score) pair, got {result!r}') from exc
        return cls(opponent=opponent, score=score)


def new_player():
    """Returns the default rating for a competitor who has never played"""
    return Rating(INITIAL_RATING, INITIAL_DEVIATION, INITIAL_VOLATILITY)
