import json
import requests


class FunctionCallError(Exception):

    def __init__(self, status_code, text):
        super().__init__("Backup function failed with status {}: {}".format(status_code, text))
        self.status_code = status_code
        self.text = text


def call_backup_function(url, action, project_id, bucket, collections=None):
    """Invoke a deployed backup/restore function, e.g. to restore a few collections by hand."""
    r = requests.post(url,
                      headers={"Content-Type": "application/json"},
                      data=json.dumps({
                          "action": action,
                          "collections": collections or [],
                          "project_id": project_id,
                          "bucket": bucket,
                      }))

    if r.status_code != 200:
        raise FunctionCallError(r.status_code, r.text)
    return r.text
