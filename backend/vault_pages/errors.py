from flask import current_app
from werkzeug.exceptions import HTTPException
from vault_pages.domain.exceptions import (
    AuthorizationError,
    InvalidStatus,
    RevisionMismatch,
    ValidationError,
)
from vault_pages.utils.i18n import say
from vault_pages.utils.responses import action_result, is_async_request


def register_error_handlers(app):
    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return action_result(400, errors=error.errors)

    @app.errorhandler(InvalidStatus)
    def handle_invalid_status(error):
        return action_result(400, error=say("Invalid page status."))

    @app.errorhandler(RevisionMismatch)
    def handle_revision_mismatch(error):
        current_app.logger.warning(str(error))
        return action_result(400, error=say("Revision does not belong to this page."))

    @app.errorhandler(AuthorizationError)
    def handle_authorization_error(error):
        return action_result(403, error=say("Access denied."))

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        if not is_async_request():
            return error
        return action_result(error.code or 500, error=error.description)
