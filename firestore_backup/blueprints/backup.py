import flask
from flask import Blueprint
from flask import current_app as app

from firestore_backup import admin
from firestore_backup.handler import run_backup_request


bp = Blueprint('backup', __name__)


@bp.route("/", methods=["POST"])
def backup_or_restore():
    text, status = run_backup_request(flask.request.get_data(), _get_admin_client,
                                      timeout=app.operation_timeout)
    return text, status, {"Content-Type": "text/plain; charset=utf-8"}


def _get_admin_client():
    with app.admin_client_lock:
        if app.admin_client is None:
            app.admin_client = admin.create_admin_client()
    return app.admin_client
