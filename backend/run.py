from slidepuzzle import create_app, db, socketio
from slidepuzzle.services.scores.leaderboard import seed_demo_scores

app = create_app()

with app.app_context():
    db.create_all()
    if app.config.get('SEED_DEMO_SCORES'):
        added = seed_demo_scores()
        app.logger.info(f"[startup] database={app.config['DB_NAME']} seeded={added}")

if __name__ == '__main__':
    # Use SocketIO server to enable websockets in dev
    socketio.run(app, port=app.config['PORT'], debug=True)
