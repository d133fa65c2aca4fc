from flask import request, jsonify
from flask_jwt_extended import create_access_token
from vault_pages.models.user import User
from . import vault_bp


@vault_bp.route("/auth/login", methods=["POST"])
def login():
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "Invalid request body"}), 400

    email = data.get("email")
    password = data.get("password")

    if not email or not password:
        return jsonify({"error": "Email and password required"}), 400

    user = User.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        return jsonify({"error": "Invalid credentials"}), 401

    if not user.is_active:
        return jsonify({"error": "User account disabled"}), 403

    access_token = create_access_token(
        identity=user.id,
        additional_claims={"role": user.role},
    )

    return jsonify({"access_token": access_token}), 200
