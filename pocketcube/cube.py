import typing
from . import errors
from .state import Color, Face, SOLVED_WORDS, WORD_MASK, face_color, extract_face_colors, rotate_cw, rotate_ccw, invert_strip
from .turns import Turn, TurnRule, TURN_RULES

class CubeState:
    # {(U)p, (L)eft, (F)ront, (R)ight, (B)ack, (D)own}, each viewed from outside as laid out in the net
    #
    #       UU
    #       UU
    #    LL FF RR BB
    #    LL FF RR BB
    #       DD
    #       DD
    _words: typing.List[int]

    def __init__(self, u: int, l: int, f: int, r: int, b: int, d: int):
        self._words = [w & WORD_MASK for w in (u, l, f, r, b, d)]

    @staticmethod
    def solved() -> "CubeState": return CubeState(*SOLVED_WORDS)

    @staticmethod
    def from_colors(colors: typing.Sequence[int]) -> "CubeState":
        if len(colors) != 24: raise errors.InvalidStateError(f"Expected 24 cubie colors, got {len(colors)}")
        return CubeState(*(face_color(*colors[4*i:4*i+4]) for i in range(6)))

    @staticmethod
    def from_string(s: str) -> "CubeState":
        letters = "".join(s.split())
        if len(letters) != 24: raise errors.InvalidStateError(f"Expected 24 facelets, got {len(letters)}: {s!r}")
        return CubeState.from_colors([Color.from_letter(c) for c in letters])

    def copy(self) -> "CubeState": return CubeState(*self._words)
    def __copy__(self): return self.copy()

    @property
    def words(self) -> typing.Tuple[int, ...]: return tuple(self._words)

    @property
    def is_solved(self) -> bool: return tuple(self._words) == SOLVED_WORDS

    def face_colors(self, face: Face) -> typing.List[Color]: return [Color(c) for c in extract_face_colors(self._words[face])]
    def cubie_colors(self) -> typing.List[Color]: return [c for f in Face for c in self.face_colors(f)]

    def _apply_rule(self, rule: TurnRule):
        w = self._words
        w[rule.face] = rotate_ccw(w[rule.face]) if rule.ccw else rotate_cw(w[rule.face])

        #Lift all strips off their faces first, then drop each one onto its destination
        carried = [(t, t.src_strip.read(w[t.src_face])) for t in rule.transfers]
        for t, bits in carried:
            if t.invert: bits = invert_strip(bits)
            w[t.dst_face] = t.dst_strip.write(w[t.dst_face], bits)

    def turn_u(self): self._apply_rule(TURN_RULES[Turn.U])
    def turn_l(self): self._apply_rule(TURN_RULES[Turn.L])
    def turn_f(self): self._apply_rule(TURN_RULES[Turn.F])
    def turn_r(self): self._apply_rule(TURN_RULES[Turn.R])
    def turn_b(self): self._apply_rule(TURN_RULES[Turn.B])
    def turn_d(self): self._apply_rule(TURN_RULES[Turn.D])
    def turn_up(self): self._apply_rule(TURN_RULES[Turn.UP])
    def turn_lp(self): self._apply_rule(TURN_RULES[Turn.LP])
    def turn_fp(self): self._apply_rule(TURN_RULES[Turn.FP])
    def turn_rp(self): self._apply_rule(TURN_RULES[Turn.RP])
    def turn_bp(self): self._apply_rule(TURN_RULES[Turn.BP])
    def turn_dp(self): self._apply_rule(TURN_RULES[Turn.DP])

    #Indexed by turn ID
    TURN_METHODS: typing.Tuple[typing.Callable[["CubeState"], None], ...] = (
        turn_u, turn_l, turn_f, turn_r, turn_b, turn_d,
        turn_up, turn_lp, turn_fp, turn_rp, turn_bp, turn_dp
    )

    def turn(self, turn: int):
        if isinstance(turn, bool) or not isinstance(turn, int) or not 0 <= turn < len(CubeState.TURN_METHODS):
            raise errors.InvalidTurnError(turn)
        CubeState.TURN_METHODS[turn](self)

    def apply(self, turns: typing.Iterable[int]) -> "CubeState":
        for t in turns: self.turn(t)
        return self

    def __eq__(self, other):
        if not isinstance(other, CubeState): return NotImplemented
        return self._words == other._words

    def __hash__(self):
        #Concatenate all six words into a single 96-bit integer
        key = 0
        for w in self._words: key = (key << 16) | w
        return hash(key)

    @property
    def net(self) -> str:
        def row(face: Face, top: bool) -> str:
            cols = self.face_colors(face)[0:2] if top else self.face_colors(face)[2:4]
            return "".join(c.letter for c in cols)

        lines = []
        for top in (True, False): lines.append("   " + row(Face.U, top))
        for top in (True, False): lines.append(" ".join(row(f, top) for f in (Face.L, Face.F, Face.R, Face.B)))
        for top in (True, False): lines.append("   " + row(Face.D, top))
        return "\n".join(lines)

    def __str__(self): return " ".join("".join(Color(c).letter for c in extract_face_colors(w)) for w in self._words)
    def __repr__(self): return f"CubeState({', '.join(f'0x{w:04x}' for w in self._words)})"
