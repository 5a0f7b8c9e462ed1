import collections, logging, typing
from . import log, errors
from .cube import CubeState
from .turns import Turn

class SearchTree:
    name: str
    root: CubeState

    frontier: typing.Deque[CubeState]
    visited: typing.Set[CubeState]
    parents: typing.Dict[CubeState, typing.Optional[Turn]]
    depths: typing.Dict[CubeState, int]

    def __init__(self, name: str, root: CubeState):
        self.name, self.root = name, root

        self.frontier = collections.deque([root])
        self.visited = set()
        self.parents = { root: None }
        self.depths = { root: 0 }

    @property
    def depth(self) -> int: return self.depths[self.frontier[0]] if self.frontier else -1

    def expand(self, node: CubeState) -> typing.List[CubeState]:
        self.visited.add(node)
        depth = self.depths[node] + 1

        discovered = []
        for turn in Turn:
            neigh = node.copy()
            neigh.turn(turn)

            #First discovery wins
            if neigh in self.parents: continue
            self.parents[neigh] = turn
            self.depths[neigh] = depth
            self.frontier.append(neigh)
            discovered.append(neigh)

        return discovered

    def path_to(self, node: CubeState) -> typing.List[Turn]:
        #Walk back to the root, undoing each move on the way
        turns = []
        node = node.copy()
        turn = self.parents[node]
        while turn is not None:
            turns.append(turn)
            node.turn(turn.inverse)
            turn = self.parents[node]

        if node != self.root: raise errors.SolverError(f"[{self.name}] parent chain ended at {node} instead of the root")
        return turns

class Solver:
    max_states: typing.Optional[int]

    def __init__(self, max_states: typing.Optional[int] = None):
        if max_states is not None and max_states <= 0: raise ValueError(f"max_states must be positive, got {max_states}")
        self.max_states = max_states

    def solve(self, start: CubeState) -> typing.List[Turn]:
        start, goal = start.copy(), CubeState.solved()
        log.LOGGER.log(logging.DEBUG, f"solving {start}")
        if start == goal: return []

        fwd, bwd = SearchTree("forward", start), SearchTree("backward", goal)
        meet = self._search(fwd, bwd)

        #Forward half runs root -> meet, backward half must be undone from meet -> solved
        path = fwd.path_to(meet)[::-1] + [t.inverse for t in bwd.path_to(meet)]
        log.LOGGER.log(logging.INFO, f"solved {start} in {len(path)} turns ({len(fwd.parents) + len(bwd.parents)} states): {' '.join(str(t) for t in path)}")
        return path

    def _search(self, fwd: SearchTree, bwd: SearchTree) -> CubeState:
        while True:
            if not fwd.frontier or not bwd.frontier:
                raise errors.SearchExhaustedError(len(fwd.parents) + len(bwd.parents))

            #Drain one whole level of the tree with the smaller frontier
            tree, other = (fwd, bwd) if len(fwd.frontier) <= len(bwd.frontier) else (bwd, fwd)
            log.LOGGER.log(logging.DEBUG, f"[{tree.name}] expanding depth {tree.depth}: {len(tree.frontier)} frontier, {len(tree.parents)} discovered")

            for _ in range(len(tree.frontier)):
                node = tree.frontier.popleft()
                if node in tree.visited: continue

                for neigh in tree.expand(node):
                    if neigh in other.parents:
                        log.LOGGER.log(logging.DEBUG, f"trees met at {neigh} (forward depth {fwd.depths[neigh]}, backward depth {bwd.depths[neigh]})")
                        return neigh

                num_states = len(fwd.parents) + len(bwd.parents)
                if self.max_states is not None and num_states > self.max_states:
                    raise errors.SearchLimitExceededError(self.max_states, num_states)

def solve(start: CubeState, max_states: typing.Optional[int] = None) -> typing.List[Turn]:
    return Solver(max_states).solve(start)
