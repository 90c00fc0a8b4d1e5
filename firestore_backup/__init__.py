import logging
import threading

import flask
from flask_cors import CORS

from firestore_backup import config
from firestore_backup.blueprints import backup


def _create_app(admin_client=None):
    logging.info("Starting app")

    app: flask.Flask = flask.Flask(__name__)
    # read once so a bad value fails here rather than on every request
    app.operation_timeout = config.operation_timeout()
    # created lazily on the first valid request when not injected
    app.admin_client = admin_client
    app.admin_client_lock = threading.Lock()

    app.register_blueprint(backup.bp)

    CORS(app)

    @app.route("/_ah/warmup", methods=["GET"])
    def warmup():
        return {}, 200

    return app
