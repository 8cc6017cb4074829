from datetime import datetime, timezone
from hangman import db

RESULT_WON = 'WON'
RESULT_LOST = 'LOST'


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Player(db.Model):
    __tablename__ = 'player'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(64), nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
        }


class Word(db.Model):
    __tablename__ = 'word'
    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.String(128), unique=True, nullable=False)
    used = db.Column(db.Boolean, default=False, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'text': self.text,
            'used': self.used,
        }


class GameInProgress(db.Model):
    __tablename__ = 'game_in_progress'
    __table_args__ = (
        db.UniqueConstraint('player_id', 'word_id', name='uq_game_in_progress_player_word'),
    )
    id = db.Column(db.Integer, primary_key=True)
    # One active game per player
    player_id = db.Column(db.Integer, db.ForeignKey('player.id'), nullable=False, unique=True)
    word_id = db.Column(db.Integer, db.ForeignKey('word.id'), nullable=False)
    attempted_letters = db.Column(db.Text, nullable=False, default='')  # comma-joined, e.g. "A,C,T"
    remaining_attempts = db.Column(db.Integer, nullable=False)
    started_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)

    player = db.relationship('Player')
    word = db.relationship('Word')

    @property
    def letters(self):
        """Attempted letters as a set of uppercase characters."""
        if not self.attempted_letters:
            return set()
        return {c.strip() for c in self.attempted_letters.split(',') if c.strip()}

    @letters.setter
    def letters(self, value):
        self.attempted_letters = ','.join(sorted(value))


class Game(db.Model):
    """Finished game, written once when a game in progress terminates."""
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey('player.id'), nullable=False, index=True)
    word_id = db.Column(db.Integer, db.ForeignKey('word.id'), nullable=True)
    result = db.Column(db.String(8), nullable=False)  # WON, LOST
    score = db.Column(db.Integer, nullable=False, default=0)
    played_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    player = db.relationship('Player')
    word = db.relationship('Word')

    def to_dict(self):
        return {
            'id': self.id,
            'player_id': self.player.id,
            'player_name': self.player.name,
            'result': self.result,
            'score': self.score,
            'played_at': self.played_at.isoformat() if self.played_at else None,
            'word': self.word.text if self.word is not None else None,
        }
