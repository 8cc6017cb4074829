import threading
from contextlib import contextmanager
from typing import Dict, List

from flask import current_app
from sqlalchemy.exc import IntegrityError

from hangman import db
from hangman.errors import NoActiveGame, NoWordsAvailable, PlayerNotFound
from hangman.models import Game, GameInProgress, RESULT_LOST, RESULT_WON, utcnow
from . import engine, stores


# Keyed by existing player ids only
_player_locks: Dict[int, threading.RLock] = {}
_locks_lock = threading.Lock()


def _player_lock(player_id) -> threading.RLock:
    with _locks_lock:
        if player_id not in _player_locks:
            _player_locks[player_id] = threading.RLock()
        return _player_locks[player_id]


def _require_player(player_id):
    player = stores.find_player(player_id)
    if player is None:
        raise PlayerNotFound(player_id)
    return player


@contextmanager
def unit_of_work(player_id):
    """Serialize work for one player and commit it as a single transaction.

    Yields the resolved player; unknown ids fail before any lock is taken.
    """
    player = _require_player(player_id)
    with _player_lock(player.id):
        try:
            yield player
            db.session.commit()
        except Exception as exc:
            db.session.rollback()
            current_app.logger.info(f"[game-rollback] player={player_id} reason={type(exc).__name__}")
            raise


def snapshot_of(game: GameInProgress) -> engine.GameSnapshot:
    return engine.GameSnapshot(
        word=game.word.text,
        attempted_letters=frozenset(game.letters),
        remaining_attempts=game.remaining_attempts,
    )


def _current_game(player_id):
    active = stores.find_active_by_player(player_id, newest_first=True)
    return active[0] if active else None


def _claim_random_word():
    tried = set()
    while True:
        word = stores.find_random_unused_word(exclude_ids=tried)
        if word is None:
            raise NoWordsAvailable()
        if stores.claim_word(word):
            return word
        current_app.logger.info(f"[word-taken] word={word.id} drawing again")
        tried.add(word.id)


def start_game(player_id) -> engine.GameView:
    try:
        with unit_of_work(player_id) as player:
            existing = _current_game(player.id)
            if existing is not None:
                current_app.logger.info(f"[game-resume] player={player.id} game={existing.id}")
                return engine.render_state(snapshot_of(existing))

            word = _claim_random_word()

            game = GameInProgress(
                player=player,
                word=word,
                remaining_attempts=int(current_app.config.get('MAX_ATTEMPTS', engine.MAX_ATTEMPTS)),
                started_at=utcnow(),
            )
            game.letters = set()
            game = stores.save_in_progress(game)
            current_app.logger.info(f"[game-start] player={player.id} word={word.id} game={game.id}")
            return engine.render_state(snapshot_of(game))
    except IntegrityError:
        # A concurrent start for this player committed first
        existing = _current_game(player_id)
        if existing is None:
            raise
        current_app.logger.info(f"[game-resume] player={player_id} game={existing.id} after conflict")
        return engine.render_state(snapshot_of(existing))


def make_guess(player_id, letter) -> engine.GameView:
    with unit_of_work(player_id) as player:
        letter = engine.normalize_letter(letter)

        game = _current_game(player.id)
        if game is None:
            raise NoActiveGame(player.id)

        new_state, view = engine.apply_guess(snapshot_of(game), letter)
        game.letters = new_state.attempted_letters
        game.remaining_attempts = new_state.remaining_attempts
        game = stores.save_in_progress(game)
        current_app.logger.info(
            f"[guess] player={player.id} game={game.id} letter={letter} remaining={view.remaining_attempts}"
        )

        if view.terminated:
            _finish(player, game, view)
        return view


def _finish(player, game: GameInProgress, view: engine.GameView) -> Game:
    word = game.word
    stores.mark_used(word)
    record = stores.save_game(Game(
        player=player,
        word=word,
        result=RESULT_WON if view.is_complete else RESULT_LOST,
        score=view.score,
        played_at=utcnow(),
    ))
    stores.delete_in_progress(game)
    current_app.logger.info(
        f"[game-finish] player={player.id} word={word.id} result={record.result} score={record.score}"
    )
    return record


def get_games_by_player(player_id) -> List[dict]:
    return [g.to_dict() for g in stores.find_games_by_player(player_id)]


def get_all_games() -> List[dict]:
    return [g.to_dict() for g in stores.find_all_games()]
