import pytest
from pocketcube import Color, Face, Slot, Strip, InvalidStateError, face_color, extract_face_colors
from pocketcube.state import SOLVED_WORDS, rotate_cw, rotate_ccw, invert_strip

WORD = 0x2134 # TL=1 TR=2 BL=3 BR=4

def test_face_color_packing():
    assert face_color(1, 2, 3, 4) == WORD
    assert face_color(Color.YELLOW, Color.YELLOW, Color.YELLOW, Color.YELLOW) == 0x5555

@pytest.mark.parametrize("colors", [
    [Color.BLUE, Color.BLUE, Color.BLUE, Color.BLUE],
    [Color.YELLOW, Color.WHITE, Color.RED, Color.ORANGE],
    [Color.GREEN, Color.BLUE, Color.YELLOW, Color.GREEN],
    [5, 0, 5, 0]
])
def test_extract_face_colors_inverts_packing(colors):
    assert extract_face_colors(face_color(*colors)) == list(colors)

def test_solved_words():
    assert SOLVED_WORDS == (0x5555, 0x3333, 0x1111, 0x2222, 0x0000, 0x4444)
    assert [f.color for f in Face] == [Color.YELLOW, Color.RED, Color.GREEN, Color.ORANGE, Color.BLUE, Color.WHITE]

def test_rotate_cw_turns_grid_clockwise():
    assert extract_face_colors(rotate_cw(WORD)) == [3, 1, 4, 2]

def test_rotate_ccw_turns_grid_counterclockwise():
    assert extract_face_colors(rotate_ccw(WORD)) == [2, 4, 1, 3]
    assert rotate_ccw(rotate_cw(WORD)) == WORD

def test_four_rotations_are_identity():
    w = WORD
    for _ in range(4): w = rotate_cw(w)
    assert w == WORD

@pytest.mark.parametrize("strip, bits", [
    (Strip.UPPER, 0x21),
    (Strip.LOWER, 0x34),
    (Strip.LEFT, 0x13),
    (Strip.RIGHT, 0x24)
])
def test_strip_read(strip, bits):
    assert strip.read(WORD) == bits

@pytest.mark.parametrize("strip, word", [
    (Strip.UPPER, 0x5534),
    (Strip.LOWER, 0x2155),
    (Strip.LEFT, 0x2554),
    (Strip.RIGHT, 0x5135)
])
def test_strip_write_only_touches_strip(strip, word):
    assert strip.write(WORD, 0x55) == word
    assert strip.read(word) == 0x55

def test_invert_strip():
    assert invert_strip(0x21) == 0x12
    assert invert_strip(invert_strip(0x4b)) == 0x4b

def test_slot_shifts():
    assert [s.shift for s in Slot] == [0, 4, 8, 12]

def test_color_letters():
    assert "".join(c.letter for c in Color) == "BGORWY"
    assert Color.from_letter("o") == Color.ORANGE
    with pytest.raises(InvalidStateError): Color.from_letter("X")
