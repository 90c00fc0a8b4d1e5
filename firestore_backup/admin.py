import logging

from google.cloud import firestore_admin_v1

from firestore_backup.errors import OperationError


def create_admin_client():
    try:
        return firestore_admin_v1.FirestoreAdminClient()
    except Exception as e:
        raise OperationError("error creating firestore admin client: {}".format(e)) from e


# Name: the database resource name, e.g. projects/{project_id}/databases/{database_id}
# CollectionIds: collections to export; empty means all collections
# OutputUriPrefix: gs://BUCKET_NAME[/NAMESPACE_PATH]
def export_documents(client, request, timeout=None):
    logging.info(f"Exporting {request.collections or 'all collections'} of {request.database_name} "
                 f"to {request.uri_prefix}")
    try:
        operation = client.export_documents(request={
            "name": request.database_name,
            "collection_ids": request.collections,
            "output_uri_prefix": request.uri_prefix,
        })
        response = operation.result(timeout=timeout)
    except Exception as e:
        raise OperationError("error backing up firestore database: {}".format(e)) from e

    logging.info(f"Export of {request.database_name} completed: {getattr(response, 'output_uri_prefix', '')}")
    return response


def import_documents(client, request, timeout=None):
    logging.info(f"Importing {request.collections or 'all collections'} into {request.database_name} "
                 f"from {request.uri_prefix}")
    try:
        operation = client.import_documents(request={
            "name": request.database_name,
            "collection_ids": request.collections,
            "input_uri_prefix": request.uri_prefix,
        })
        response = operation.result(timeout=timeout)
    except Exception as e:
        raise OperationError("error restoring firestore database: {}".format(e)) from e

    logging.info(f"Import into {request.database_name} completed")
    return response
