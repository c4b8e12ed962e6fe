from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__, static_folder='static', static_url_path='/static')
    flask_app.config.from_object(config_class)

    origins = flask_app.config.get('CORS_ORIGINS', '*')
    if origins == ['*']:
        origins = '*'
    db.init_app(flask_app)
    login_manager.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    from slidepuzzle.api.auth import auth
    flask_app.register_blueprint(auth, url_prefix='/api/auth')

    from slidepuzzle.api.scores import scores
    flask_app.register_blueprint(scores, url_prefix='/api')

    from slidepuzzle.main import main
    flask_app.register_blueprint(main)

    from slidepuzzle.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    # Bearer tokens are stateless: the user is rebuilt from the signed claims
    from slidepuzzle.services.auth.tokens import identity_from_header

    @login_manager.request_loader
    def load_user_from_request(req):
        return identity_from_header(req.headers.get('Authorization'))

    @login_manager.unauthorized_handler
    def unauthorized():
        if not request.headers.get('Authorization'):
            return jsonify({'message': 'No token provided'}), 401
        return jsonify({'message': 'Invalid or expired token'}), 401

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from slidepuzzle.services.scores.leaderboard import seed_demo_scores
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            inserted = seed_demo_scores()
            print(f'Database has been reset and seeded with {inserted} scores!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
