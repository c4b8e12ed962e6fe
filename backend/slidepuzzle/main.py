import os

from flask import Blueprint, current_app, jsonify, send_from_directory
from werkzeug.security import safe_join

main = Blueprint('main', __name__)


@main.route('/', defaults={'path': ''})
@main.route('/<path:path>')
def client(path):
    """Serve client assets; any other path falls back to the entry page."""
    if path == 'api' or path.startswith('api/'):
        return jsonify({'error': 'Not found'}), 404
    static_dir = current_app.static_folder
    if path:
        candidate = safe_join(static_dir, path)
        if candidate and os.path.isfile(candidate):
            return send_from_directory(static_dir, path)
    return send_from_directory(static_dir, 'index.html')
