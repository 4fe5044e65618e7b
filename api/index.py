import logging

from flask import Flask, request, jsonify
from flask_cors import CORS
# The api/ folder is flat: these modules sit next to this file
from config import config as default_config
from settlement import compute_split
from share import format_summary, whatsapp_link
from validation import ValidationError, drop_empty_expenses, parse_participants, validate_participants

logger = logging.getLogger(__name__)


def create_app(config=None):
    config = config or default_config

    app = Flask(__name__)
    app.config['SPLITTER'] = config
    CORS(
        app,
        resources={r"/api/*": {"origins": config.CORS_ORIGINS}},
        send_wildcard=config.CORS_ORIGINS == '*',
    )

    logger.setLevel(config.LOG_LEVEL)

    register_routes(app)
    return app


def _split_from_request(config):
    participants = parse_participants(request.get_json(silent=True))
    validate_participants(participants, max_participants=config.MAX_PARTICIPANTS)
    return compute_split(drop_empty_expenses(participants))


def register_routes(app):
    config = app.config['SPLITTER']

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        logger.info("Rejected split request: %s", e)
        return jsonify({"error": "validation_error", "details": e.errors}), 400

    # --- 1. HEALTH CHECK ROUTE ---
    @app.route('/api', methods=['GET'])
    def health_check():
        return jsonify({"status": "healthy", "message": "Backend is running!"})

    # --- 2. CALCULATION ROUTE ---
    @app.route('/api/calculate', methods=['POST'])
    def calculate():
        try:
            result = _split_from_request(config)
            return jsonify(result.to_dict())
        except ValidationError:
            raise
        except Exception as e:
            logger.exception("Split calculation failed")
            return jsonify({"error": str(e)}), 500

    # --- 3. SHARE ROUTE ---
    @app.route('/api/share', methods=['POST'])
    def share():
        try:
            result = _split_from_request(config)
            message = format_summary(result, config.CURRENCY_SYMBOL, config.APP_URL)
            return jsonify({
                "message": message,
                "url": whatsapp_link(message),
                "result": result.to_dict(),
            })
        except ValidationError:
            raise
        except Exception as e:
            logger.exception("Share message failed")
            return jsonify({"error": str(e)}), 500


app = create_app()

# Vercel ignores this block, but it's useful for local testing
if __name__ == '__main__':
    logging.basicConfig(
        level=default_config.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app.run(debug=default_config.DEBUG, port=default_config.PORT)
