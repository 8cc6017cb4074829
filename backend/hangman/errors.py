"""Errors raised by the game services.

Every error is terminal for the request that raised it. The Flask app turns
them into JSON responses with the status declared on the class.
"""


class GameError(Exception):
    code = 'GAME_ERROR'
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message, 'code': self.code}


class PlayerNotFound(GameError):
    code = 'PLAYER_NOT_FOUND'
    status_code = 404

    def __init__(self, player_id):
        super().__init__(f'Player not found with id: {player_id}')
        self.player_id = player_id


class NoWordsAvailable(GameError):
    code = 'NO_WORDS_AVAILABLE'
    status_code = 409

    def __init__(self):
        super().__init__('No words available to play')


class InvalidInput(GameError):
    code = 'INVALID_INPUT'
    status_code = 400


class NoActiveGame(GameError):
    code = 'NO_ACTIVE_GAME'
    status_code = 409

    def __init__(self, player_id):
        super().__init__(f'Player {player_id} has no game in progress')
        self.player_id = player_id
