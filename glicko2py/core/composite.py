"""composite ratings which let a team act as a single opponent"""
from typing import List
import numpy as np
from glicko2py.core.errors import InvalidArgumentError
from glicko2py.core.rating import Rating


def composite(ratings: List[Rating]) -> Rating:
    """
    Builds a composite rating whose value, deviation and volatility are each
    the arithmetic mean of the corresponding fields of the given ratings.

    Raises:
        InvalidArgumentError: if ratings is empty.
    """
    ratings = list(ratings)
    if not ratings:
        raise InvalidArgumentError('cannot build a composite rating from an empty list')
    for rating in ratings:
        if not isinstance(rating, Rating):
            raise InvalidArgumentError(f'expected a Rating, got {type(rating).__name__}')
    if len(ratings) == 1:
        return ratings[0]
    fields = np.array([tuple(rating) for rating in ratings], dtype=np.float64)
    value, deviation, volatility = fields.mean(axis=0)
    return Rating(float(value), float(deviation), float(volatility))


def composite_results(results) -> list:
    """turn (opposing team, score) pairs into (composite opponent, score) pairs"""
    composited = []
    for result in results:
        try:
            team, score = result
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f'expected an (opponent team, score) pair, got {result!r}') from exc
        composited.append((composite(team), score))
    return composited
