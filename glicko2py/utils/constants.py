"""mathematical constants computed once here to avoid recomputation"""
import math

# general math constants
PI2 = math.pi**2.0
THREE_OVER_PI_SQUARED = 3.0 / PI2

# scale conversion between the glicko (1500 centred) and glicko 2 scales
SCALE_FACTOR = 173.7178
UNRATED_RATING = 1500.0

# new player defaults on the internal scale
INITIAL_RATING = 0.0
INITIAL_DEVIATION = 2.0
INITIAL_VOLATILITY = 0.06

# system constant
DEFAULT_TAU = 0.5
DEFAULT_TAU_RANGE = (0.4, 1.2)

# volatility solver
CONVERGENCE_TOLERANCE = 1e-6
MAX_ITERATIONS = 1000
