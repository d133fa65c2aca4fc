from flask import Flask
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.vault import vault_bp
from .errors import register_error_handlers
from .security.guard import Guard


def create_app(config_name: str = "development", **overrides) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.config.update(overrides)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    app.extensions["vault.guard"] = Guard(app.config["VAULT_PERMISSIONS"])

    # -------------------------------------------------
    # Vault blueprint
    # -------------------------------------------------
    app.register_blueprint(vault_bp, url_prefix="/vault")
    register_error_handlers(app)

    return app
