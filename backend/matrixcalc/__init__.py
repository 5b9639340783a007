from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv
import logging

# Load environment variables
load_dotenv()

__version__ = '1.0.0'


def create_app(config_name='development', **overrides):
    """Application factory pattern"""
    from matrixcalc.config import config_by_name

    app = Flask(__name__)

    # Configuration
    if config_name not in config_by_name:
        raise ValueError(f"Unknown configuration '{config_name}'")
    app.config.from_object(config_by_name[config_name])
    app.config.update(overrides)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Enable CORS
    CORS(app)

    # Register blueprints
    from matrixcalc.routes.main import main_bp
    from matrixcalc.routes.api import api_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp)

    return app
