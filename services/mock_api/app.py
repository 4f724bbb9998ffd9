import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .config import get_config
from .dispatch import Fault, Request, dispatch, not_found, to_reply
from .handlers import ROUTES
from .messages import message

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def _request_body():
    body = request.get_json(silent=True)
    if body is None and request.form:
        return request.form.to_dict()
    return body


def _current_request():
    return Request(request.method, request.path, _request_body())


def _respond(reply):
    return jsonify(reply.body), reply.status


def _make_view(handler, config):
    def view():
        req = _current_request()
        return _respond(to_reply(dispatch(handler, config, req), config, req))
    return view


def create_app(config=None):
    if config is None:
        config = get_config()

    app = Flask(__name__)
    app.config['SERVER_CONFIG'] = config
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # No automatic OPTIONS; every path also answers with a trailing slash
    for method, path, handler in ROUTES:
        view = _make_view(handler, config)
        app.add_url_rule(path, endpoint=handler.__name__, view_func=view,
                         methods=[method], provide_automatic_options=False)
        if path != '/':
            app.add_url_rule(path + '/', endpoint=handler.__name__ + '_slash', view_func=view,
                             methods=[method], provide_automatic_options=False)

    # A known path with the wrong method is still "no route" for clients
    @app.errorhandler(404)
    @app.errorhandler(405)
    def route_not_found(e):
        return _respond(not_found(config, request.path))

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({"error": e.description}), e.code

    # Backstop for faults raised outside the dispatcher (hooks, serialization)
    @app.errorhandler(Exception)
    def internal_error(e):
        req = _current_request()
        return _respond(to_reply(Fault(e), config, req))

    # CORS headers for browser testing
    @app.after_request
    def after_request(response):
        response.headers.add('Access-Control-Allow-Origin', '*')
        response.headers.add('Access-Control-Allow-Headers', 'Content-Type,Authorization')
        response.headers.add('Access-Control-Allow-Methods', 'GET,POST')
        return response

    return app


def configure_logging(config):
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)


def main():
    config = get_config()
    configure_logging(config)
    app = create_app(config)
    logger.info(message(config, 'server_started', port=config.port,
                        environment=config.environment_name, version=config.version))
    app.run(host='0.0.0.0', port=config.port, threaded=True)
