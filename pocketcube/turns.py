import typing, enum, dataclasses
from .state import Face, Strip

class Turn(enum.IntEnum):
    U = 0
    L = 1
    F = 2
    R = 3
    B = 4
    D = 5
    UP = 6
    LP = 7
    FP = 8
    RP = 9
    BP = 10
    DP = 11

    @property
    def face(self) -> Face: return Face[self.name[0:1]]
    @property
    def is_ccw(self) -> bool: return self.name.endswith('P')
    @property
    def inverse(self) -> "Turn": return inverse(self)
    @property
    def rule(self) -> "TurnRule": return TURN_RULES[self]

    def __str__(self): return self.name.replace('P', '\'')
    def __format__(self, spec): return format(str(self), spec)

def inverse(turn: int) -> Turn: return Turn((turn + 6) % 12)

@dataclasses.dataclass(frozen=True)
class Transfer:
    src_face: Face
    src_strip: Strip
    dst_face: Face
    dst_strip: Strip
    invert: bool = False

    @property
    def reversed(self) -> "Transfer": return Transfer(self.dst_face, self.dst_strip, self.src_face, self.src_strip, self.invert)

@dataclasses.dataclass(frozen=True)
class TurnRule:
    face: Face
    ccw: bool
    transfers: typing.Tuple[Transfer, ...]

    @property
    def reversed(self) -> "TurnRule": return TurnRule(self.face, not self.ccw, tuple(t.reversed for t in self.transfers))

def _cycle(*steps: typing.Tuple[Face, Strip, bool]) -> typing.Tuple[Transfer, ...]:
    #Each step hands its strip to the next one, the last wraps around to the first
    return tuple(
        Transfer(face, strip, steps[(i+1) % len(steps)][0], steps[(i+1) % len(steps)][1], invert)
        for i, (face, strip, invert) in enumerate(steps)
    )

#Clockwise rules; the flag marks transfers whose strip is swapped on its way to the next face
_CW_TRANSFERS = {
    Face.U: _cycle((Face.R, Strip.UPPER, False), (Face.F, Strip.UPPER, False), (Face.L, Strip.UPPER, False), (Face.B, Strip.UPPER, False)),
    Face.D: _cycle((Face.L, Strip.LOWER, False), (Face.F, Strip.LOWER, False), (Face.R, Strip.LOWER, False), (Face.B, Strip.LOWER, False)),
    Face.F: _cycle((Face.U, Strip.LOWER, False), (Face.R, Strip.LEFT, False), (Face.D, Strip.UPPER, True), (Face.L, Strip.RIGHT, True)),
    Face.B: _cycle((Face.U, Strip.UPPER, False), (Face.L, Strip.LEFT, False), (Face.D, Strip.LOWER, True), (Face.R, Strip.RIGHT, True)),
    Face.L: _cycle((Face.U, Strip.LEFT, False), (Face.F, Strip.LEFT, False), (Face.D, Strip.LEFT, True), (Face.B, Strip.RIGHT, True)),
    Face.R: _cycle((Face.F, Strip.RIGHT, False), (Face.U, Strip.RIGHT, True), (Face.B, Strip.LEFT, True), (Face.D, Strip.RIGHT, False))
}

def _build_rules() -> typing.Dict[Turn, TurnRule]:
    rules = {}
    for face, transfers in _CW_TRANSFERS.items():
        cw = TurnRule(face, False, transfers)
        rules[Turn[face.name]] = cw
        rules[Turn[face.name + 'P']] = cw.reversed
    return rules

TURN_RULES: typing.Dict[Turn, TurnRule] = _build_rules()
