"""Persistence boundary for players, words and games.

Functions here add, delete and flush on the shared session but never commit;
the orchestrator owns the transaction.
"""

from typing import Iterable, List, Optional

from flask import current_app
from sqlalchemy import func, update

from hangman import db
from hangman.models import Game, GameInProgress, Player, Word


# ---- Player store ----

def find_player(player_id) -> Optional[Player]:
    if player_id is None:
        return None
    return db.session.get(Player, player_id)


# ---- Word store ----

def find_random_unused_word(exclude_ids=()) -> Optional[Word]:
    query = Word.query.filter_by(used=False)
    if exclude_ids:
        query = query.filter(Word.id.notin_(list(exclude_ids)))
    return query.order_by(func.random()).first()


def claim_word(word: Word) -> bool:
    """Flip ``used`` false->true in the database; False if another request got there first."""
    result = db.session.execute(
        update(Word)
        .where(Word.id == word.id, Word.used.is_(False))
        .values(used=True)
        .execution_options(synchronize_session=False)
    )
    db.session.expire(word, ['used'])
    return result.rowcount == 1


def mark_used(word: Word) -> None:
    if not word.used:
        word.used = True
        db.session.add(word)


def all_words() -> List[Word]:
    return Word.query.order_by(Word.id).all()


def is_playable(text: str) -> bool:
    # Only letters and spaces can ever be revealed
    return bool(text.strip()) and all(c == ' ' or c.isalpha() for c in text)


def add_words(texts: Iterable[str]) -> List[Word]:
    """Add words that are not already in the pool (case-insensitive).

    Text holding anything other than letters and spaces is skipped.
    """
    existing = {w.text.upper() for w in Word.query.all()}
    added = []
    for text in texts:
        normalized = (text or '').strip().upper()
        if not normalized or normalized in existing:
            continue
        if not is_playable(normalized):
            current_app.logger.warning(f"[seed-skip] word={normalized!r} reason=not letters and spaces")
            continue
        word = Word(text=normalized)
        db.session.add(word)
        existing.add(normalized)
        added.append(word)
    db.session.flush()
    return added


# ---- Game in progress store ----

def find_by_player_and_word(player_id, word_id) -> Optional[GameInProgress]:
    return GameInProgress.query.filter_by(player_id=player_id, word_id=word_id).first()


def find_active_by_player(player_id, newest_first=True) -> List[GameInProgress]:
    order = GameInProgress.started_at.desc() if newest_first else GameInProgress.started_at.asc()
    return (
        GameInProgress.query.filter_by(player_id=player_id)
        .order_by(order, GameInProgress.id.desc() if newest_first else GameInProgress.id.asc())
        .all()
    )


def save_in_progress(game: GameInProgress) -> GameInProgress:
    db.session.add(game)
    db.session.flush()
    return game


def delete_in_progress(game: GameInProgress) -> None:
    db.session.delete(game)
    db.session.flush()


# ---- Finished game store ----

def save_game(record: Game) -> Game:
    db.session.add(record)
    db.session.flush()
    return record


def find_games_by_player(player_id) -> List[Game]:
    return Game.query.filter_by(player_id=player_id).order_by(Game.id).all()


def find_all_games() -> List[Game]:
    return Game.query.order_by(Game.id).all()
