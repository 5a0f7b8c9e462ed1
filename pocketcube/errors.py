import typing

class PocketCubeError(Exception): pass

class InvalidTurnError(PocketCubeError, ValueError):
    turn: typing.Any

    def __init__(self, turn):
        super().__init__(f"Invalid turn: {turn!r}")
        self.turn = turn

class InvalidStateError(PocketCubeError, ValueError): pass

class SolverError(PocketCubeError): pass

class SearchExhaustedError(SolverError):
    num_states: int

    def __init__(self, num_states: int):
        super().__init__(f"Search exhausted after {num_states} states without reaching the solved state")
        self.num_states = num_states

class SearchLimitExceededError(SolverError):
    max_states: int
    num_states: int

    def __init__(self, max_states: int, num_states: int):
        super().__init__(f"Search discovered {num_states} states, exceeding the limit of {max_states}")
        self.max_states = max_states
        self.num_states = num_states
