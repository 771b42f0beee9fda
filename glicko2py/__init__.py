"""Glicko 2 rating updates for individual competitors and teams"""
from glicko2py.core.composite import composite
from glicko2py.core.conversion import to_external, to_internal
from glicko2py.core.errors import ConvergenceError, Glicko2Error, InvalidArgumentError
from glicko2py.core.rating import GameResult, Rating, new_player
from glicko2py.models.glicko2 import Glicko2, predict, update, update_team
