from .log import LOGGER
from .errors import PocketCubeError, InvalidTurnError, InvalidStateError, SolverError, SearchExhaustedError, SearchLimitExceededError
from .state import Color, Face, Slot, Strip, face_color, extract_face_colors
from .turns import Turn, inverse
from .cube import CubeState
from .solver import Solver, solve
from .notation import parse_turns, format_turns, invert_sequence, random_scramble
