import pytest
from pocketcube import CubeState, parse_turns

@pytest.fixture
def solved() -> CubeState: return CubeState.solved()

#Eight turns that never undo the previous one
@pytest.fixture
def scrambled() -> CubeState: return CubeState.solved().apply(parse_turns("R U F' D L B' U' R"))
