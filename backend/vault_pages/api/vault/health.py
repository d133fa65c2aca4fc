from flask import jsonify
from . import vault_bp


@vault_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({
        "status": "ok",
        "service": "vault-pages"
    })
