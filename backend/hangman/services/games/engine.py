"""Pure hangman rules: hidden-word rendering, scoring and guess application.

Nothing here touches the database. The orchestrator builds a ``GameSnapshot``
from a persisted game in progress, runs a guess through ``apply_guess`` and
writes the resulting snapshot back.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, List, Tuple

from hangman.errors import InvalidInput

MAX_ATTEMPTS = 7
WIN_SCORE = 20
POINTS_PER_LETTER = 1
PLACEHOLDER = '_'


@dataclass(frozen=True)
class GameSnapshot:
    word: str
    attempted_letters: FrozenSet[str] = field(default_factory=frozenset)
    remaining_attempts: int = MAX_ATTEMPTS

    def __post_init__(self):
        object.__setattr__(self, 'word', self.word.upper())
        object.__setattr__(self, 'attempted_letters', frozenset(self.attempted_letters))


@dataclass(frozen=True)
class GameView:
    hidden_word: str
    attempted_letters: List[str]
    remaining_attempts: int
    is_complete: bool
    score: int

    @property
    def terminated(self) -> bool:
        return self.is_complete or self.remaining_attempts == 0

    def to_dict(self):
        return {
            'hidden_word': self.hidden_word,
            'attempted_letters': list(self.attempted_letters),
            'remaining_attempts': self.remaining_attempts,
            'is_complete': self.is_complete,
            'score': self.score,
        }


def normalize_letter(letter) -> str:
    if letter is None:
        raise InvalidInput('Letter must not be null')
    if not isinstance(letter, str) or len(letter) != 1 or not letter.isalpha():
        raise InvalidInput(f'Letter must be a single alphabetic character, got {letter!r}')
    upper = letter.upper()
    # e.g. German sharp s uppercases to two characters
    if len(upper) != 1:
        raise InvalidInput(f'Letter {letter!r} has no single-character uppercase form')
    return upper


def hidden_word(word: str, attempted_letters) -> str:
    return ''.join(c if c == ' ' or c in attempted_letters else PLACEHOLDER for c in word)


def calculate_score(word: str, attempted_letters, is_complete: bool, remaining_attempts: int) -> int:
    if is_complete:
        return WIN_SCORE
    if remaining_attempts == 0:
        correct = sum(1 for letter in attempted_letters if letter in word)
        return correct * POINTS_PER_LETTER
    return 0


def render_state(state: GameSnapshot) -> GameView:
    """Build the response view for a snapshot without applying a guess."""
    hidden = hidden_word(state.word, state.attempted_letters)
    is_complete = hidden == state.word
    return GameView(
        hidden_word=hidden,
        attempted_letters=sorted(state.attempted_letters),
        remaining_attempts=state.remaining_attempts,
        is_complete=is_complete,
        score=calculate_score(state.word, state.attempted_letters, is_complete, state.remaining_attempts),
    )


def apply_guess(state: GameSnapshot, letter) -> Tuple[GameSnapshot, GameView]:
    """Apply one guessed letter.

    A letter that was already attempted leaves the snapshot untouched. A miss
    costs one attempt, never taking ``remaining_attempts`` below zero.
    """
    letter = normalize_letter(letter)
    if letter in state.attempted_letters:
        return state, render_state(state)

    remaining = state.remaining_attempts
    if letter not in state.word and remaining > 0:
        remaining -= 1

    new_state = replace(
        state,
        attempted_letters=state.attempted_letters | {letter},
        remaining_attempts=remaining,
    )
    return new_state, render_state(new_state)
