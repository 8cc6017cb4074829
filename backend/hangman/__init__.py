from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

SAMPLE_PLAYERS = ['Alice', 'Bob', 'Cara']
SAMPLE_WORDS = ['PROGRAMADOR', 'COMPUTADORA', 'TECNOLOGIA', 'PYTHON', 'HANGMAN', 'ICE CREAM']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    if int(flask_app.config.get('MAX_ATTEMPTS', 7)) < 1:
        raise ValueError(f"MAX_ATTEMPTS must be at least 1, got {flask_app.config.get('MAX_ATTEMPTS')}")
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    origins = flask_app.config.get('CORS_ORIGINS') or []

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=origins)

    socketio.init_app(flask_app, cors_allowed_origins=origins)

    from hangman.main import main
    flask_app.register_blueprint(main)

    from hangman.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    from hangman.api.players import players
    flask_app.register_blueprint(players, url_prefix='/api/players')

    from hangman.api.words import words
    flask_app.register_blueprint(words, url_prefix='/api/words')

    from hangman.errors import GameError

    @flask_app.errorhandler(GameError)
    def handle_game_error(exc):
        flask_app.logger.info(f"[request-failed] code={exc.code} message={exc.message}")
        return jsonify(exc.to_dict()), exc.status_code

    from hangman.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from hangman.models import Player, Word
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            for name in SAMPLE_PLAYERS:
                db.session.add(Player(name=name))
            for text in SAMPLE_WORDS:
                db.session.add(Word(text=text))

            db.session.commit()
            print('Database has been reset and seeded!')

    @click.command('seed-words')
    @click.argument('texts', nargs=-1, required=True)
    def seed_words_command(texts):
        """Adds words to the pool, skipping ones already present."""
        from hangman.services.games.stores import add_words
        with flask_app.app_context():
            added = add_words(texts)
            db.session.commit()
            print(f'Added {len(added)} word(s).')

    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(seed_words_command)

    return flask_app
