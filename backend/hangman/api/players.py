from flask import Blueprint, jsonify, request
from hangman import db
from hangman.errors import InvalidInput, PlayerNotFound
from hangman.models import Player
from hangman.services.games import stores


players = Blueprint('players', __name__)


@players.route('/', methods=['POST'])
def create_player():
    data = request.get_json(silent=True) or {}
    name = (data.get('name') or '').strip()
    if not name:
        raise InvalidInput('Player name is required')

    player = Player(name=name)
    db.session.add(player)
    db.session.commit()
    return jsonify(player.to_dict()), 201


@players.route('/', methods=['GET'])
def list_players():
    return jsonify([p.to_dict() for p in Player.query.order_by(Player.id).all()])


@players.route('/<int:player_id>', methods=['GET'])
def get_player(player_id):
    player = stores.find_player(player_id)
    if player is None:
        raise PlayerNotFound(player_id)
    return jsonify(player.to_dict())
