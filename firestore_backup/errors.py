class BackupError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class RequestParseError(BackupError):
    status_code = 500


class ValidationError(BackupError):
    status_code = 400


class OperationError(BackupError):
    status_code = 500
