# -*- coding: utf-8 -*-
"""
Flask application entrypoint and factory for the interview assistant relay.
"""

from flask import Flask, Response, current_app, request
import os
from werkzeug.exceptions import MethodNotAllowed, RequestEntityTooLarge

from interview_assist.services import relay as relay_service
from interview_assist.services.config import RelayConfig
from interview_assist.services.responses import error_response

DEFAULT_MAX_PROMPT_BODY_KB = 64
ROUTE = "/interviewAssist"


def _to_flask_response(envelope):
    """Turn a relay envelope into a Flask response (input: envelope dict; output: Response)."""
    response = Response(envelope["body"], status=envelope["statusCode"], mimetype="application/json")
    response.headers.update(envelope["headers"])
    return response


def create_app(config=None, invoker=None):
    app = Flask(__name__)
    max_kb = int(os.environ.get("MAX_PROMPT_BODY_KB", DEFAULT_MAX_PROMPT_BODY_KB))
    app.config['MAX_PROMPT_BODY_KB'] = max_kb
    app.config['MAX_CONTENT_LENGTH'] = max_kb * 1024  # converted to bytes
    app.config['RELAY_CONFIG'] = config if config is not None else RelayConfig.from_env()
    # Tests inject a fake; None means the relay builds a Bedrock invoker.
    app.config['RELAY_INVOKER'] = invoker

    @app.errorhandler(RequestEntityTooLarge)
    def handle_body_too_large(e):
        """Handle oversized request bodies (input: error; output: 413 envelope)."""
        return _to_flask_response(
            error_response(f"Request too large. Max size is {app.config['MAX_PROMPT_BODY_KB']} KB.", 413)
        )

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(e):
        """Handle unsupported methods (input: error; output: 405 envelope)."""
        response = _to_flask_response(error_response(f"Method {request.method} not allowed.", 405))
        if e.valid_methods:
            response.headers["Allow"] = ", ".join(e.valid_methods)
        return response

    @app.route(ROUTE, methods=["POST", "OPTIONS"])
    def interview_assist():
        """Relay a prompt to the model (input: JSON {"prompt": ...}; output: JSON envelope body)."""
        # Rebuild the proxy event shape so Lambda and local runs share one code path.
        event = {
            "httpMethod": request.method,
            "body": request.get_data(as_text=True) if request.method != "OPTIONS" else None,
        }
        envelope = relay_service.relay(
            event,
            invoker=current_app.config['RELAY_INVOKER'],
            config=current_app.config['RELAY_CONFIG'],
        )
        return _to_flask_response(envelope)

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=False)
