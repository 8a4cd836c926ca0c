from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError
from storefront.domain.exceptions import (
    InvariantViolation,
    PageNotFound,
    PageNotSelected,
    TemplateNotAccessible,
    TemplateNotFound,
    VersionNotFound,
)


def _error(name, error, status_code):
    response = jsonify({
        "error": name,
        "message": str(error)
    })
    response.status_code = status_code
    return response


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        return _error("InvariantViolation", error, 400)

    # Reserved template slugs are indistinguishable from missing pages publicly
    @app.errorhandler(PageNotFound)
    @app.errorhandler(TemplateNotAccessible)
    def handle_page_not_found(error):
        return _error("PageNotFound", "Page not found", 404)

    @app.errorhandler(TemplateNotFound)
    def handle_template_not_found(error):
        return _error("TemplateNotFound", error, 404)

    @app.errorhandler(VersionNotFound)
    def handle_version_not_found(error):
        return _error("VersionNotFound", error, 404)

    @app.errorhandler(PageNotSelected)
    def handle_page_not_selected(error):
        return _error("PageNotSelected", error, 400)

    @app.errorhandler(SQLAlchemyError)
    def handle_persistence_error(error):
        current_app.logger.exception("Persistence failure")
        return _error("PersistenceError", "The page store is unavailable", 503)
