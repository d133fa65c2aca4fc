from flask import Blueprint

# Vault admin panel blueprint
vault_bp = Blueprint("vault", __name__)

# Import route modules so they register with vault_bp
from . import health
from . import auth
from . import pages
