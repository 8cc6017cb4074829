import pytest

from hangman.errors import InvalidInput
from hangman.services.games.engine import (
    GameSnapshot,
    MAX_ATTEMPTS,
    WIN_SCORE,
    apply_guess,
    hidden_word,
    normalize_letter,
    render_state,
)


def guess_all(word, letters):
    state = GameSnapshot(word=word)
    views = []
    for letter in letters:
        state, view = apply_guess(state, letter)
        views.append(view)
    return state, views


def test_hidden_word_reveals_spaces_and_attempted_letters():
    assert hidden_word('ICE CREAM', set()) == '___ _____'
    assert hidden_word('ICE CREAM', {'E', 'C'}) == '_CE C_E__'
    assert hidden_word('ICE CREAM', set('ICERAM')) == 'ICE CREAM'


def test_cat_scenario():
    _, views = guess_all('CAT', ['A', 'C', 'T'])
    assert views[0].hidden_word == '_A_'
    assert views[0].remaining_attempts == MAX_ATTEMPTS
    assert views[1].hidden_word == 'CA_'
    assert views[2].hidden_word == 'CAT'
    assert views[2].is_complete is True
    assert views[2].score == WIN_SCORE
    assert views[2].terminated


def test_dog_scenario_exhausts_attempts_with_zero_score():
    state, views = guess_all('DOG', list('XYZQWER'))
    last = views[-1]
    assert last.remaining_attempts == 0
    assert last.is_complete is False
    assert last.score == 0
    assert last.terminated
    assert [v.remaining_attempts for v in views] == [6, 5, 4, 3, 2, 1, 0]
    assert state.remaining_attempts == 0


def test_loss_scores_one_point_per_correct_letter():
    _, views = guess_all('HANGMAN', ['A', 'N'] + list('XYZQWER'))
    last = views[-1]
    assert last.remaining_attempts == 0
    assert last.hidden_word == '_AN__AN'
    assert last.score == 2


def test_win_scores_twenty_regardless_of_misses():
    _, views = guess_all('CAT', list('XYZQWE') + ['C', 'A', 'T'])
    last = views[-1]
    assert last.remaining_attempts == 1
    assert last.score == WIN_SCORE


def test_repeat_guess_is_noop():
    state, view = apply_guess(GameSnapshot(word='DOG'), 'x')
    again_state, again_view = apply_guess(state, 'X')
    assert again_state == state
    assert again_view == view
    assert again_view.remaining_attempts == MAX_ATTEMPTS - 1


def test_lowercase_word_and_letter_are_normalized():
    _, view = apply_guess(GameSnapshot(word='cat'), 'c')
    assert view.hidden_word == 'C__'
    assert view.attempted_letters == ['C']


def test_remaining_attempts_floor_at_zero():
    state = GameSnapshot(word='DOG', attempted_letters=frozenset(), remaining_attempts=0)
    new_state, view = apply_guess(state, 'Z')
    assert new_state.remaining_attempts == 0
    assert view.remaining_attempts == 0
    assert 'Z' in new_state.attempted_letters


def test_render_state_does_not_mutate():
    state = GameSnapshot(word='CAT', attempted_letters=frozenset({'A'}), remaining_attempts=5)
    view = render_state(state)
    assert view.hidden_word == '_A_'
    assert view.score == 0
    assert not view.terminated
    assert state.attempted_letters == frozenset({'A'})


def test_view_to_dict_shape():
    _, view = apply_guess(GameSnapshot(word='CAT'), 'T')
    assert view.to_dict() == {
        'hidden_word': '__T',
        'attempted_letters': ['T'],
        'remaining_attempts': MAX_ATTEMPTS,
        'is_complete': False,
        'score': 0,
    }


@pytest.mark.parametrize('bad', [None, '', 'AB', '1', ' ', 5])
def test_invalid_letters_rejected(bad):
    with pytest.raises(InvalidInput):
        apply_guess(GameSnapshot(word='CAT'), bad)


def test_normalize_letter_accepts_accented_letters():
    assert normalize_letter('ñ') == 'Ñ'
