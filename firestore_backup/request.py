import json
from enum import Enum
from typing import List

from firestore_backup.config import BACKUP_NAMESPACE, DATABASE_ID
from firestore_backup.errors import RequestParseError, ValidationError


class Action(Enum):
    BACKUP = "backup"       # export collections to the bucket
    RESTORE = "restore"     # import collections from the bucket


class BackupRequest:
    """A single backup or restore request, as posted by Cloud Scheduler or an operator.

    An empty list of collections means all collections of the database.
    """

    def __init__(self, action="", collections=None, project_id="", bucket=""):
        self.action: str = action
        self.collections: List[str] = list(collections or [])
        self.project_id: str = project_id
        self.bucket: str = bucket

    @staticmethod
    def from_json(body):
        try:
            data = json.loads(body.decode("utf-8") if isinstance(body, bytes) else body)
        except (UnicodeDecodeError, ValueError) as e:
            raise RequestParseError(str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise RequestParseError("cannot unmarshal {} into backup request".format(type(data).__name__))

        collections = data.get("collections")
        if collections is None:
            collections = []
        if not isinstance(collections, list) or not all(isinstance(c, str) for c in collections):
            raise RequestParseError("field 'collections' must be a list of strings")

        return BackupRequest(
            action=_string_field(data, "action"),
            collections=collections,
            project_id=_string_field(data, "project_id"),
            bucket=_string_field(data, "bucket"),
        )

    def validate(self):
        if not self.project_id:
            raise ValidationError("project_id is required")

        if not self.bucket:
            raise ValidationError("bucket is required")

        if not self.action:
            raise ValidationError("action is required")

        if self.action not in {a.value for a in Action}:
            raise ValidationError("action must be either backup or restore")

        if self.action == Action.BACKUP.value and not self.bucket:
            raise ValidationError("bucket is required when action is backup")

    @property
    def database_name(self):
        return "projects/{}/databases/{}".format(self.project_id, DATABASE_ID)

    @property
    def uri_prefix(self):
        return "gs://{}/{}".format(self.bucket, BACKUP_NAMESPACE)

    def __repr__(self):
        return "BackupRequest(action={!r}, collections={!r}, project_id={!r}, bucket={!r})".format(
            self.action, self.collections, self.project_id, self.bucket)


def _string_field(data, name):
    value = data.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise RequestParseError("field '{}' must be a string".format(name))
    return value
