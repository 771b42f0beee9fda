"""
Models Module
=============

This module contains the Glicko 2 rating system, designed by Mark Glickman. Each competitor is
described by a rating, a rating deviation (how uncertain the rating is) and a volatility (how
consistently the competitor performs over time).

The update takes a competitor's rating and one rating period worth of game results and computes
the estimated variance and improvement of the rating from the results, solves for the new
volatility with a bounded Illinois regula falsi iteration, then derives the new deviation and the
new rating. Team games are handled by collapsing each opposing team into a composite rating.
"""
