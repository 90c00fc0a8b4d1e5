import logging
import flask
import google.cloud.logging

from firestore_backup import config


class CloudLoggingHandler(logging.Handler):

    @staticmethod
    def setup_logging():
        logging.basicConfig(level=config.log_level())
        logger = logging.getLogger()
        logger.setLevel(config.log_level())

        # Remove any existing handlers
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        logger.addHandler(CloudLoggingHandler())

    def __init__(self):
        super().__init__()
        self.logging_client = google.cloud.logging.Client()
        self.logger = self.logging_client.logger("firestore-backup")

    def emit(self, record):
        try:
            structured_log = {
                "message": record.getMessage(),
                "severity": record.levelname,
            }

            if flask.has_request_context():
                structured_log["path"] = flask.request.path
                trace = flask.request.headers.get("X-Cloud-Trace-Context")
                if trace:
                    structured_log["trace_context"] = trace

            self.logger.log_struct(structured_log, severity=record.levelname)
        except Exception:
            self.handleError(record)
