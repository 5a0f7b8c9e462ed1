import collections, logging, random, pytest
from pocketcube import (CubeState, Turn, Solver, solve, parse_turns, random_scramble, invert_sequence,
                        SearchExhaustedError, SearchLimitExceededError, SolverError)

def assert_solves(state: CubeState, path):
    assert state.copy().apply(path).is_solved

def test_solved_input_gives_empty_path(solved):
    assert solve(solved) == []

def test_single_u_turn_is_undone_by_u_prime(solved):
    solved.turn_u()
    assert solve(solved) == [Turn.UP]

@pytest.mark.parametrize("turn", list(Turn))
def test_single_turn_is_undone_by_its_inverse(turn, solved):
    solved.turn(turn)
    assert solve(solved) == [turn.inverse]

@pytest.mark.parametrize("scramble, length", [
    ("R U", 2),
    ("U U", 2),
    ("R L'", 2),
    ("U D", 2),
    ("F R' D", 3),
    ("R U F", 3)
])
def test_known_distances(scramble, length, solved):
    solved.apply(parse_turns(scramble))
    path = solve(solved)
    assert len(path) == length
    assert_solves(solved, path)

def test_scrambled_state_is_solved_within_scramble_length(scrambled):
    path = solve(scrambled)
    assert len(path) <= 8
    assert_solves(scrambled, path)

@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_random_scrambles(seed):
    scramble = random_scramble(6, random.Random(seed))
    state = CubeState.solved().apply(scramble)
    path = solve(state)
    assert len(path) <= len(scramble)
    assert_solves(state, path)

def test_path_lengths_match_breadth_first_distances():
    #Plain single-ended BFS from the solved state
    dist = { CubeState.solved(): 0 }
    queue = collections.deque(dist)
    while queue:
        node = queue.popleft()
        if dist[node] == 4: continue
        for turn in Turn:
            neigh = node.copy()
            neigh.turn(turn)
            if neigh in dist: continue
            dist[neigh] = dist[node] + 1
            queue.append(neigh)

    for state, d in list(dist.items())[::250]:
        path = solve(state)
        assert len(path) == d
        assert_solves(state, path)

def test_solve_does_not_mutate_input(scrambled):
    before = scrambled.copy()
    solve(scrambled)
    assert scrambled == before

def test_inverted_scramble_is_a_valid_solution(solved):
    scramble = parse_turns("F R' D")
    solved.apply(scramble)
    assert_solves(solved, invert_sequence(scramble))
    assert len(solve(solved)) <= len(scramble)

def test_state_limit(scrambled):
    with pytest.raises(SearchLimitExceededError) as e: Solver(max_states=50).solve(scrambled)
    assert e.value.max_states == 50 and e.value.num_states > 50
    assert isinstance(e.value, SolverError)

def test_generous_state_limit_still_solves(solved):
    solved.apply(parse_turns("R U"))
    assert len(Solver(max_states=10000).solve(solved)) == 2

def test_disconnected_state_exhausts_search():
    #Every turn maps an all-blue cube onto itself
    with pytest.raises(SearchExhaustedError): solve(CubeState(0, 0, 0, 0, 0, 0))

@pytest.mark.parametrize("max_states", [0, -5])
def test_rejects_non_positive_limit(max_states):
    with pytest.raises(ValueError): Solver(max_states=max_states)

def test_logs_solution(caplog, solved):
    solved.turn_r()
    with caplog.at_level(logging.INFO, logger="pocketcube"): solve(solved)
    assert "in 1 turns" in caplog.text and "R'" in caplog.text
