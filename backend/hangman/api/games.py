from flask import Blueprint, jsonify, request
from hangman import socketio
from hangman.errors import InvalidInput
from hangman.models import RESULT_LOST, RESULT_WON
from hangman.services.games import orchestrator


games = Blueprint('games', __name__)


def _player_id_from(data):
    player_id = data.get('player_id')
    if player_id is None:
        raise InvalidInput('player_id is required')
    try:
        return int(player_id)
    except (TypeError, ValueError):
        raise InvalidInput(f'player_id must be an integer, got {player_id!r}')


def _emit_update(player_id, view):
    payload = view.to_dict()
    payload['player_id'] = player_id
    socketio.emit('game_update', payload, to=f"player:{player_id}", namespace='/ws')
    if view.terminated:
        socketio.emit('game_finished', {
            'player_id': player_id,
            'result': RESULT_WON if view.is_complete else RESULT_LOST,
            'score': view.score,
        }, to=f"player:{player_id}", namespace='/ws')


@games.route('/start', methods=['POST'])
def start_game():
    data = request.get_json(silent=True) or {}
    player_id = _player_id_from(data)
    view = orchestrator.start_game(player_id)
    _emit_update(player_id, view)
    return jsonify(view.to_dict())


@games.route('/guess', methods=['POST'])
def make_guess():
    data = request.get_json(silent=True) or {}
    player_id = _player_id_from(data)
    view = orchestrator.make_guess(player_id, data.get('letter'))
    _emit_update(player_id, view)
    return jsonify(view.to_dict())


@games.route('/', methods=['GET'])
def list_games():
    return jsonify(orchestrator.get_all_games())


@games.route('/player/<int:player_id>', methods=['GET'])
def list_player_games(player_id):
    return jsonify(orchestrator.get_games_by_player(player_id))
