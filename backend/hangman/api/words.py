from flask import Blueprint, jsonify
from hangman.services.games import stores


words = Blueprint('words', __name__)


@words.route('/', methods=['GET'])
def list_words():
    return jsonify([w.to_dict() for w in stores.all_words()])
