from flask import Flask
from flask_cors import CORS
from flask_jwt_extended import JWTManager

from adulting.config import Config
from adulting.db import db
from adulting.errors import register_error_handlers
from adulting.extensions.extensions import ma


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)
    ma.init_app(app)
    JWTManager(app)
    CORS(app, origins=app.config["CORS_ALLOWED_ORIGINS"])

    from adulting.routes.auth_routes import auth_bp
    from adulting.routes.post_routes import post_bp
    from adulting.routes.user_routes import user_bp

    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(user_bp, url_prefix="/users")
    app.register_blueprint(post_bp, url_prefix="/posts")

    register_error_handlers(app)

    import adulting.models  # noqa: F401

    with app.app_context():
        db.create_all()

    return app
