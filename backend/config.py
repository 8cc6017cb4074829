import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///hangman.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Attempts granted to every new game
    MAX_ATTEMPTS = int(os.environ.get('MAX_ATTEMPTS', '7'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Comma-separated list of origins allowed for HTTP and websocket clients
    CORS_ORIGINS = [
        o.strip()
        for o in os.environ.get('CORS_ORIGINS', 'http://localhost:5173,http://127.0.0.1:5173').split(',')
        if o.strip()
    ]
