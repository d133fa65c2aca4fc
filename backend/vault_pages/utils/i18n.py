from flask import current_app


def say(message: str) -> str:
    """
    Translate a vault message.

    Looks the message up in the VAULT_MESSAGES catalogue and falls back to
    the message itself.
    """
    return current_app.config.get("VAULT_MESSAGES", {}).get(message, message)
