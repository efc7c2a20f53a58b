import logging
from typing import Dict, Optional

from flask import Flask

from . import config
from .questions import load_questions


def create_app(overrides: Optional[Dict] = None) -> Flask:
    app = Flask(__name__)

    # Configuration
    app.config["SECRET_KEY"] = config.SECRET_KEY
    app.config["QUESTIONS_PATH"] = config.QUESTIONS_PATH
    if overrides:
        app.config.update(overrides)

    # Logging
    log_level = app.config.get("LOG_LEVEL", config.LOG_LEVEL)
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))

    app.extensions["question_bank"] = load_questions(app.config["QUESTIONS_PATH"])

    from .routes import bp
    app.register_blueprint(bp)

    return app
