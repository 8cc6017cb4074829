from flask_socketio import join_room, leave_room, emit
from hangman import socketio


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def _player_room(data):
    player_id = (data or {}).get('player_id')
    try:
        return f"player:{int(player_id)}"
    except (TypeError, ValueError):
        return None


def handle_watch_player(data):
    room = _player_room(data)
    if not room:
        emit('error', {'message': 'player_id is required'})
        return
    join_room(room)
    emit('watching', {'room': room})


def handle_unwatch_player(data):
    room = _player_room(data)
    if not room:
        emit('error', {'message': 'player_id is required'})
        return
    leave_room(room)
    emit('unwatching', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        socketio.on_event('connect', handle_connect, namespace=namespace)
        socketio.on_event('watch_player', handle_watch_player, namespace=namespace)
        socketio.on_event('unwatch_player', handle_unwatch_player, namespace=namespace)
        socketio.on_event('ping', handle_ping, namespace=namespace)
