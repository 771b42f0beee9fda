"""
Glicko 2
paper: http://www.glicko.net/research/dpcmsv.pdf
example: http://www.glicko.net/glicko/glicko2.pdf

All quantities here are on the internal scale, see glicko2py.core.conversion for the boundary.
"""
import logging
import math
from typing import List, Optional, Tuple
import numpy as np
from glicko2py.core.base import RatingSystem
from glicko2py.core.errors import ConvergenceError, InvalidArgumentError
from glicko2py.core.rating import GameResult, Rating
from glicko2py.utils.constants import CONVERGENCE_TOLERANCE, DEFAULT_TAU, DEFAULT_TAU_RANGE, MAX_ITERATIONS
from glicko2py.utils.math_utils import g_scalar, g_vector, sigmoid, sigmoid_scalar

logger = logging.getLogger(__name__)


def g(phi):
    """this is DIFFERENT from g in regular Glicko"""
    return g_scalar(phi)


def expected_score(mu, mu_j, phi_j):
    """probability that a competitor rated mu beats an opponent rated mu_j with deviation phi_j"""
    return sigmoid_scalar(g_scalar(phi_j) * (mu - mu_j))


def check_tau(tau, tau_range: Optional[Tuple[float, float]] = None):
    """validate the system constant, optionally against a (low, high) range"""
    try:
        finite = math.isfinite(tau)
    except TypeError as exc:
        raise InvalidArgumentError(f'tau must be a real number, got {tau!r}') from exc
    if not finite or tau <= 0.0:
        raise InvalidArgumentError(f'tau must be finite and positive, got {tau}')
    if tau_range is not None:
        low, high = tau_range
        if not low <= tau <= high:
            raise InvalidArgumentError(f'tau must be in [{low}, {high}], got {tau}')
    return float(tau)


def _coerce_results(results) -> List[GameResult]:
    return [GameResult.coerce(result) for result in results]


def _score_terms(player: Rating, results: List[GameResult]):
    """returns the estimated variance v and the sum of g(phi_j) * (s_j - E_j) over the results"""
    opp_mus = np.array([result.opponent.value for result in results], dtype=np.float64)
    opp_phis = np.array([result.opponent.deviation for result in results], dtype=np.float64)
    scores = np.array([result.score for result in results], dtype=np.float64)

    gs = g_vector(opp_phis)
    probs = sigmoid(gs * (player.value - opp_mus))
    information = float(np.sum(np.square(gs) * probs * (1.0 - probs)))
    if information <= 0.0:
        raise InvalidArgumentError('expected scores are saturated, the results carry no information')
    v = 1.0 / information
    grad = float(np.sum(gs * (scores - probs)))
    delta = v * grad
    if not math.isfinite(v) or not math.isfinite(delta * delta):
        raise InvalidArgumentError('expected scores are saturated, the results carry no information')
    return v, grad


def variance(player: Rating, results) -> float:
    """
    Estimated variance of the player's rating based only on game outcomes.

    Raises:
        InvalidArgumentError: if results is empty, v is undefined when no games were played.
    """
    results = _coerce_results(results)
    if not results:
        raise InvalidArgumentError('variance is undefined without any game results')
    v, _ = _score_terms(player, results)
    return v


def improvement(player: Rating, results) -> float:
    """estimated improvement delta, the variance weighted surprise of the results"""
    results = _coerce_results(results)
    if not results:
        raise InvalidArgumentError('improvement is undefined without any game results')
    v, grad = _score_terms(player, results)
    return v * grad


def new_volatility(
    phi: float,
    sigma: float,
    v: float,
    delta: float,
    tau: float,
    epsilon: float = CONVERGENCE_TOLERANCE,
    max_iter: int = MAX_ITERATIONS,
) -> float:
    """
    Solves for the new volatility sigma' with the Illinois variant of regula falsi.

    The root x of f is ln(sigma'^2). The lower bracket starts at ln(sigma^2), the upper
    bracket either comes straight from delta or is found by stepping down in multiples of tau.

    Raises:
        ConvergenceError: if either the bracket search or the main loop exceeds max_iter steps.
        InvalidArgumentError: if delta or phi are too large to square in floating point.
    """
    delta2 = delta * delta
    phi2 = phi * phi
    if not math.isfinite(delta2 + phi2 + v):
        raise InvalidArgumentError('volatility update is out of floating point range')
    tau2 = tau**2.0
    a = math.log(sigma**2.0)

    def f(x):
        ex = math.exp(x)
        phi2_v_ex = phi2 + v + ex
        num_1 = ex * (delta2 - phi2_v_ex)
        denom_1 = 2.0 * (phi2_v_ex * phi2_v_ex)
        term_2 = (x - a) / tau2
        return (num_1 / denom_1) - term_2

    A = a
    if delta2 > (phi2 + v):
        B = math.log(delta2 - phi2 - v)
    else:
        k = 1
        while f(a - k * tau) < 0.0:
            k += 1
            if k > max_iter:
                raise ConvergenceError(f'no upper bracket for the volatility root within {max_iter} steps')
        B = a - k * tau

    f_A = f(A)
    f_B = f(B)
    iters = 0
    while math.fabs(B - A) > epsilon:
        if iters >= max_iter:
            raise ConvergenceError(f'volatility solver did not converge within {max_iter} iterations')
        C = A + ((A - B) * f_A) / (f_B - f_A)
        f_C = f(C)
        if (f_C * f_B) <= 0.0:
            A = B
            f_A = f_B
        else:
            # same side kept, halve to avoid stalling
            f_A = f_A / 2.0
        B = C
        f_B = f_C
        iters += 1
    logger.debug('volatility solver converged in %d iterations', iters)
    return math.exp(A / 2.0)


def increase_rating_dev(rating: Rating) -> Rating:
    """the pre-rating deviation of a player who did not compete, value and volatility are unchanged"""
    phi_star = math.hypot(rating.deviation, rating.volatility)
    return Rating(rating.value, phi_star, rating.volatility)


class Glicko2(RatingSystem):
    """
    Implements the Glicko 2 rating system, designed by Mark Glickman.
    """

    def __init__(
        self,
        tau: float = DEFAULT_TAU,
        tau_range: Optional[Tuple[float, float]] = DEFAULT_TAU_RANGE,
        epsilon: float = CONVERGENCE_TOLERANCE,
        max_iter: int = MAX_ITERATIONS,
    ):
        """
        Initializes the Glicko 2 rating system with the given parameters.

        Parameters:
            tau (float, optional): The system constant, constrains the change in volatility per update. Defaults to 0.5.
            tau_range (tuple, optional): Inclusive (low, high) bounds tau is validated against, None only requires
                                         tau to be positive. Defaults to (0.4, 1.2), the range suggested in the paper.
            epsilon (float, optional): Convergence tolerance of the volatility solver. Defaults to 1e-6.
            max_iter (int, optional): Iteration cap of the volatility solver. Defaults to 1000.
        """
        if tau_range is not None:
            low, high = tau_range
            if not low <= high:
                raise InvalidArgumentError(f'tau_range must be ordered (low, high), got {tau_range}')
        self.tau = check_tau(tau, tau_range)
        self.tau_range = tau_range
        if not epsilon > 0.0:
            raise InvalidArgumentError(f'epsilon must be positive, got {epsilon}')
        if max_iter < 1:
            raise InvalidArgumentError(f'max_iter must be at least 1, got {max_iter}')
        self.epsilon = epsilon
        self.max_iter = max_iter

    def predict(self, rating_1: Rating, rating_2: Rating) -> float:
        """win probability of rating_1 over rating_2, using the uncertainty of both competitors"""
        combined_phi = math.hypot(rating_1.deviation, rating_2.deviation)
        return sigmoid_scalar(g_scalar(combined_phi) * (rating_1.value - rating_2.value))

    def update(self, player: Rating, results) -> Rating:
        """apply one update based on all of the results of the rating period"""
        if not isinstance(player, Rating):
            raise InvalidArgumentError(f'player must be a Rating, got {type(player).__name__}')
        results = _coerce_results(results)
        if not results:
            # no games: only the deviation grows, there is no variance to speak of
            logger.debug('no games played, increasing rating deviation only')
            return increase_rating_dev(player)

        v, grad = _score_terms(player, results)
        delta = v * grad
        sigma_prime = new_volatility(
            phi=player.deviation,
            sigma=player.volatility,
            v=v,
            delta=delta,
            tau=self.tau,
            epsilon=self.epsilon,
            max_iter=self.max_iter,
        )
        phi_star = math.hypot(player.deviation, sigma_prime)
        phi_prime = 1.0 / math.sqrt((1.0 / (phi_star**2.0)) + (1.0 / v))
        mu_prime = player.value + (phi_prime**2.0) * grad
        return Rating(mu_prime, phi_prime, sigma_prime)


def update(
    player: Rating,
    results,
    tau: float = DEFAULT_TAU,
    tau_range: Optional[Tuple[float, float]] = None,
) -> Rating:
    """
    Update a player's rating based on one rating period of game results.

    Parameters:
        player (Rating): the player's rating going into the period.
        results (list): GameResult or (opponent Rating, score) pairs. May be empty.
        tau (float, optional): the system constant. Defaults to 0.5.
        tau_range (tuple, optional): inclusive (low, high) bounds to validate tau against. Defaults to None,
                                     which only requires tau to be finite and positive.

    Returns:
        Rating: the new rating.
    """
    return Glicko2(tau=tau, tau_range=tau_range).update(player, results)


def update_team(
    team: List[Rating],
    results,
    tau: float = DEFAULT_TAU,
    tau_range: Optional[Tuple[float, float]] = None,
) -> List[Rating]:
    """
    Update every member of a team based on team vs team results.

    Parameters:
        team (list of Rating): the members of the rated team.
        results (list): (opposing team, score) pairs, each opposing team is a list of Rating
                        and is collapsed into its composite before the update.
        tau (float, optional): the system constant. Defaults to 0.5.
        tau_range (tuple, optional): inclusive (low, high) bounds to validate tau against. Defaults to None.

    Returns:
        list of Rating: updated ratings in the same order as team.
    """
    return Glicko2(tau=tau, tau_range=tau_range).update_team(team, results)


def predict(rating_1: Rating, rating_2: Rating) -> float:
    """probability that rating_1 beats rating_2"""
    return Glicko2(tau_range=None).predict(rating_1, rating_2)
