import typing, enum
from . import errors

class Color(enum.IntEnum):
    BLUE = 0
    GREEN = 1
    ORANGE = 2
    RED = 3
    WHITE = 4
    YELLOW = 5

    @property
    def letter(self) -> str: return self.name[0:1]

    @staticmethod
    def from_letter(letter: str) -> "Color":
        for c in Color:
            if c.letter == letter.upper(): return c
        raise errors.InvalidStateError(f"Unknown color letter: {letter!r}")

class Face(enum.IntEnum):
    U = 0
    L = 1
    F = 2
    R = 3
    B = 4
    D = 5

    @property
    def color(self) -> Color: return {
        Face.U: Color.YELLOW,
        Face.L: Color.RED,
        Face.F: Color.GREEN,
        Face.R: Color.ORANGE,
        Face.B: Color.BLUE,
        Face.D: Color.WHITE
    }[self]

#Nibble index of a cubie inside a face word, ordered so that rotating the word by one nibble turns the face by 90 degrees
#  TL TR    2 3
#  BL BR -> 1 0
class Slot(enum.IntEnum):
    BOT_RIGHT = 0
    BOT_LEFT = 1
    TOP_LEFT = 2
    TOP_RIGHT = 3

    @property
    def shift(self) -> int: return 4 * self.value

NIBBLE_MASK = 0xf
WORD_MASK = 0xffff

def face_color(top_left: int, top_right: int, bot_left: int, bot_right: int) -> int:
    return (
        (top_left << Slot.TOP_LEFT.shift) |
        (top_right << Slot.TOP_RIGHT.shift) |
        (bot_left << Slot.BOT_LEFT.shift) |
        (bot_right << Slot.BOT_RIGHT.shift)
    )

def extract_face_colors(word: int) -> typing.List[int]:
    return [(word >> s.shift) & NIBBLE_MASK for s in (Slot.TOP_LEFT, Slot.TOP_RIGHT, Slot.BOT_LEFT, Slot.BOT_RIGHT)]

def rotate_cw(word: int) -> int: return ((word << 4) | (word >> 12)) & WORD_MASK
def rotate_ccw(word: int) -> int: return ((word >> 4) | (word << 12)) & WORD_MASK

#Swaps the two cubies of a strip: 0xAB -> 0xBA
def invert_strip(bits: int) -> int: return ((bits >> 4) | (bits << 4)) & 0xff

#A strip is the row or column of two cubies bordering a neighbouring face, packed as (high nibble, low nibble)
#  UPPER: (TOP_RIGHT, TOP_LEFT)
#  LOWER: (BOT_LEFT, BOT_RIGHT)
#  LEFT:  (TOP_LEFT, BOT_LEFT)
#  RIGHT: (TOP_RIGHT, BOT_RIGHT)
class Strip(enum.Enum):
    UPPER = enum.auto()
    LOWER = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()

    def read(self, word: int) -> int:
        if self == Strip.UPPER: return (word >> 8) & 0xff
        if self == Strip.LOWER: return word & 0xff
        if self == Strip.LEFT: return (word >> 4) & 0xff
        return (word & 0xf) | ((word >> 12) << 4)

    def write(self, word: int, bits: int) -> int:
        if self == Strip.UPPER: return (word & 0x00ff) | (bits << 8)
        if self == Strip.LOWER: return (word & 0xff00) | bits
        if self == Strip.LEFT: return (word & 0xf00f) | (bits << 4)
        return (word & 0x0ff0) | (bits & 0xf) | ((bits & 0xf0) << 8)

SOLVED_WORDS: typing.Tuple[int, ...] = tuple(face_color(f.color, f.color, f.color, f.color) for f in Face)
