"""
Conversion between the glicko scale (new players at 1500/350) and the internal glicko 2 scale.
Applied at the boundary only, the update engine works on the internal scale throughout.
"""
from glicko2py.core.rating import Rating
from glicko2py.utils.constants import SCALE_FACTOR, UNRATED_RATING


def to_internal(rating, deviation, volatility):
    """
    Converts a glicko scale triple into a Rating.

    Parameters:
        rating (float): rating on the glicko scale, 1500 for a new player.
        deviation (float): rating deviation on the glicko scale.
        volatility (float): volatility, identical on both scales.

    Returns:
        Rating: the same competitor on the internal scale.
    """
    return Rating(
        value=(rating - UNRATED_RATING) / SCALE_FACTOR,
        deviation=deviation / SCALE_FACTOR,
        volatility=volatility,
    )


def to_external(rating: Rating):
    """Converts a Rating into a (rating, deviation, volatility) tuple on the glicko scale"""
    return (
        SCALE_FACTOR * rating.value + UNRATED_RATING,
        SCALE_FACTOR * rating.deviation,
        rating.volatility,
    )
