from firestore_backup import _create_app, config
from firestore_backup.blueprints.backup import _get_admin_client
from firestore_backup.common.cloud_logging import CloudLoggingHandler
from firestore_backup.handler import run_backup_request
from dotenv import load_dotenv
import logging


load_dotenv(".env.local")

def create_app():
    if config.running_on_gcp():
        CloudLoggingHandler.setup_logging()
    else:
        logging.basicConfig(level=config.log_level())
    return _create_app()


# variable used by Gunicorn
app = create_app()


def firestore_backup_restore(request):
    """
    Cloud Functions entry point, triggered by a Cloud Scheduler job with a body like
    {"action": "backup", "collections": [], "project_id": "my-project", "bucket": "my-bucket"}

    gcloud functions deploy firestore_backup_restore \
                         --runtime python312 \
                         --trigger-http \
                         --region europe-west1
    """
    with app.app_context():
        text, status = run_backup_request(request.get_data(), _get_admin_client,
                                          timeout=app.operation_timeout)
    return text, status, {"Content-Type": "text/plain; charset=utf-8"}


if __name__ == "__main__":
    # Used when running locally only. When deploying to Google App
    # Engine, a webserver process such as Gunicorn will serve the app.
    app.run(host="localhost", port=8080, debug=True)
