"""base class for rating systems that update one competitor at a time"""
from abc import ABC
from typing import List
from glicko2py.core.composite import composite_results
from glicko2py.core.rating import Rating


class RatingSystem(ABC):
    """
    Base class for rating systems. Subclasses hold the configuration of the system
    (constants, solver settings) and turn a competitor's rating plus a rating period
    worth of game results into a new rating. Ratings are values, a rating system
    never mutates them and keeps no per-competitor state.
    """

    def predict(self, rating_1: Rating, rating_2: Rating) -> float:
        """
        Probability that the competitor rated rating_1 beats the competitor rated rating_2.
        """
        raise NotImplementedError

    def update(self, player: Rating, results: list) -> Rating:
        """
        Computes a player's rating after one rating period.

        Parameters:
            player (Rating): the rating going into the period.
            results (list): GameResult or (opponent Rating, score) pairs, score is 1 for a win,
                            0.5 for a draw and 0 for a loss. May be empty.

        Returns:
            Rating: the rating coming out of the period.
        """
        raise NotImplementedError

    def update_team(self, team: List[Rating], results: list) -> List[Rating]:
        """
        Updates every member of a team after team vs team games.

        Each opposing team is collapsed into one composite opponent, then every member
        is updated independently against the same composited results.

        Parameters:
            team (list of Rating): the members of the rated team.
            results (list): (opposing team, score) pairs where the opposing team is a list of Rating.

        Returns:
            list of Rating: updated ratings, in the same order as team.
        """
        composited = composite_results(results)
        return [self.update(member, composited) for member in team]
