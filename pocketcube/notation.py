import random, re, typing
from . import errors
from .turns import Turn

def parse_turns(text: str) -> typing.List[Turn]:
    turns = []
    for tok in re.split(r"[\s,]+", text.strip()):
        if not tok: continue

        #Accept U, U', UP and U2 (two quarter turns)
        name, count = tok.upper(), 1
        if name.endswith('2'): name, count = name[:-1], 2
        name = name.replace('\'', 'P')

        if name not in Turn.__members__: raise errors.InvalidTurnError(tok)
        turns += [Turn[name]] * count
    return turns

def format_turns(turns: typing.Iterable[int]) -> str: return " ".join(str(Turn(t)) for t in turns)

def invert_sequence(turns: typing.Sequence[int]) -> typing.List[Turn]: return [Turn(t).inverse for t in reversed(turns)]

def random_scramble(length: int, rng: typing.Optional[random.Random] = None) -> typing.List[Turn]:
    rng = rng or random.Random()

    turns = []
    while len(turns) < length:
        turn = rng.choice(list(Turn))
        if turns and turn == turns[-1].inverse: continue
        turns.append(turn)
    return turns
