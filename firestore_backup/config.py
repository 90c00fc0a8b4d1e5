import math
import os

DATABASE_ID = "(default)"
BACKUP_NAMESPACE = "firestore-backup"


def running_on_gcp():
    # App Engine sets GAE_SERVICE, Cloud Functions and Cloud Run set K_SERVICE
    return "GAE_SERVICE" in os.environ or "K_SERVICE" in os.environ


def log_level():
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def operation_timeout():
    value = os.environ.get("FIRESTORE_OPERATION_TIMEOUT", "").strip()
    if not value:
        return None
    timeout = float(value)
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError("FIRESTORE_OPERATION_TIMEOUT must be a positive number, got {}".format(value))
    return timeout
