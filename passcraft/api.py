import logging

from flask import Flask, jsonify, request

from passcraft.config import MAX_LENGTH, MIN_LENGTH, load_config
from passcraft.generator import InvalidPolicy, generate_password
from passcraft.score import score_password

logger = logging.getLogger(__name__)


def _bad_request(message):
    logger.warning("rejected request to %s: %s", request.path, message)
    return jsonify({'error': message}), 400


def create_app(cfg=None):
    cfg = cfg or load_config()
    app = Flask(__name__)

    @app.route('/')
    def home():
        return jsonify({
            "message": "passcraft API is running"
        })

    @app.route('/generate', methods=['POST'])
    def generate_route():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return _bad_request('request body must be a JSON object')

        length = data.get('length', cfg["length"])
        if isinstance(length, bool) or not isinstance(length, int):
            return _bad_request('length must be an integer')
        if not MIN_LENGTH <= length <= MAX_LENGTH:
            return _bad_request(f'length must be between {MIN_LENGTH} and {MAX_LENGTH}')

        flags = {
            'upper': data.get('upper', cfg["use_uppercase"]),
            'numbers': data.get('numbers', cfg["use_numbers"]),
            'symbols': data.get('symbols', cfg["use_symbols"]),
        }
        for name, value in flags.items():
            if not isinstance(value, bool):
                return _bad_request(f'{name} must be true or false')

        try:
            password = generate_password(
                length,
                use_uppercase=flags['upper'],
                use_numbers=flags['numbers'],
                use_symbols=flags['symbols'],
            )
        except InvalidPolicy as e:
            return _bad_request(str(e))
        return jsonify({'password': password})

    @app.route('/score', methods=['POST'])
    def score_route():
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return _bad_request('request body must be a JSON object')
        password = data.get('password', '')
        if not isinstance(password, str):
            return _bad_request('password must be a string')
        result = score_password(password)
        return jsonify(result._asdict())

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
