import os
import sys
import pytest

# Ensure the backend root (containing the `hangman` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from hangman import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    MAX_ATTEMPTS = 7
    LOG_LEVEL = 'DEBUG'
    CORS_ORIGINS = ['http://localhost:5173']


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import hangman.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')


@pytest.fixture()
def add_player(flask_app):
    from hangman.models import Player

    def _add(name='Alice'):
        player = Player(name=name)
        db.session.add(player)
        db.session.commit()
        return player.id
    return _add


@pytest.fixture()
def add_words(flask_app):
    from hangman.models import Word

    def _add(*texts):
        ids = []
        for text in texts:
            word = Word(text=text)
            db.session.add(word)
            db.session.flush()
            ids.append(word.id)
        db.session.commit()
        return ids
    return _add


@pytest.fixture()
def file_app(tmp_path):
    """App on a sqlite file, so several threads can each open a connection."""
    class FileConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'hangman.db'}"
        SQLALCHEMY_ENGINE_OPTIONS = {'connect_args': {'check_same_thread': False, 'timeout': 30}}

    application = create_app(FileConfig)
    with application.app_context():
        import hangman.models  # noqa: F401
        db.create_all()
    yield application
    with application.app_context():
        db.drop_all()
        db.engine.dispose()
