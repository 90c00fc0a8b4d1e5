import logging

from firestore_backup import admin
from firestore_backup.errors import BackupError
from firestore_backup.request import Action, BackupRequest


_ACTIONS = {
    Action.BACKUP.value: admin.export_documents,
    Action.RESTORE.value: admin.import_documents,
}


def run_backup_request(body, client_provider, timeout=None):
    """Parse, validate and dispatch one backup/restore request.

    `client_provider` is only called once the request is valid, so a bad request
    never reaches the Firestore Admin API. Returns a (text, status) pair.
    """
    try:
        request = BackupRequest.from_json(body)
        logging.info(f"Received {request}")

        request.validate()

        client = client_provider()
        _ACTIONS[request.action](client, request, timeout=timeout)
    except BackupError as e:
        logging.error(f"Request failed with status {e.status_code}: {e}")
        return str(e), e.status_code

    return "", 200
