import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    return os.environ.get(name, default).lower() in ('1', 'true', 'yes')


class Config:
    # Shared secret used to sign bearer tokens
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'supersecret'
    PORT = int(os.environ.get('PORT', '4000'))
    DB_NAME = os.environ.get('DB_NAME') or 'leaderboardDB'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or f'sqlite:///{DB_NAME}.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Token lifetime (seconds)
    TOKEN_MAX_AGE_SEC = int(os.environ.get('TOKEN_MAX_AGE_SEC', '7200'))
    LEADERBOARD_LIMIT = int(os.environ.get('LEADERBOARD_LIMIT', '10'))
    # Insert a few demo scores on startup when the table is empty
    SEED_DEMO_SCORES = _env_flag('SEED_DEMO_SCORES', 'true')
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',')
