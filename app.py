from flask import Flask, render_template, request, jsonify
import logging

from config import Config
from core.platform import LaundryPlatform
from ui import register_ui


def create_app(config_object=Config, **overrides):
    """Build the Flask app with a fresh in-memory platform"""
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)

    logging.basicConfig(
        level=getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    app.extensions['laundry'] = LaundryPlatform(
        delivery_fee=app.config['DELIVERY_FEE'],
        simulated_delay=app.config['DELIVERY_SIMULATED_DELAY'],
        api_base_url=app.config['LAUNDRY_API_BASE_URL'],
        api_timeout=app.config['API_TIMEOUT']
    )

    register_ui(app)
    register_error_handlers(app)
    return app


def register_error_handlers(app):
    def wants_json():
        return request.path.startswith('/api/')

    @app.errorhandler(400)
    def bad_request(e):
        if wants_json():
            return jsonify({'error': 'Bad request'}), 400
        return render_template('error.html', code=400), 400

    @app.errorhandler(404)
    def not_found(e):
        if wants_json():
            return jsonify({'error': 'Not found'}), 404
        return render_template('error.html', code=404), 404

    @app.errorhandler(500)
    def server_error(e):
        logging.getLogger(__name__).exception('Unhandled error on %s', request.path)
        if wants_json():
            return jsonify({'error': 'Internal server error'}), 500
        return render_template('error.html', code=500), 500


if __name__ == '__main__':
    app = create_app()
    port = app.config['PORT']

    print("=== Laundry Booking Platform ===")
    print(f"Starting server on http://localhost:{port}")
    print("Press Ctrl+C to stop")

    app.run(
        host='0.0.0.0',
        port=port,
        debug=app.config['DEBUG']
    )
