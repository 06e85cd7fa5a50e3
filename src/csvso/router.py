from typing import Callable, Dict, Optional

from fastapi import Request

from csvso.execution.request import SyncRequest
from csvso.pipeline.data_export import export_csv
from csvso.pipeline.data_import import import_csv
from csvso.pipeline.generate import generate_class
from csvso.utils.exceptions import MissingInputError

from csvso.observability.logger import log_event, generate_request_id, RequestTimer
from csvso.observability.audit_logger import AuditLogger
from csvso.observability.identity import extract_user_identity

ACTIONS: Dict[str, Callable[[SyncRequest], Dict]] = {
    "GENERATE": generate_class,
    "IMPORT": import_csv,
    "EXPORT": export_csv,
}


def _safe_class_name(sync_request: SyncRequest) -> str:
    try:
        return sync_request.class_name
    except MissingInputError:
        return "unknown"


# ==========================================================
# ROUTER
# ==========================================================
def route(action: str, payload: Dict, request: Optional[Request] = None) -> Dict:
    """
    Entry point shared by the HTTP app, the CLI and the config executor.

    One action per call: GENERATE, IMPORT or EXPORT. Errors are logged and
    audited, then re-raised for the surface to report.
    """
    key = (action or "").upper()
    if key not in ACTIONS:
        raise ValueError(f"Unknown action: {action}. Allowed: {sorted(ACTIONS)}")

    request_id = generate_request_id()
    audit_logger = AuditLogger()
    user_id = extract_user_identity(request, payload)
    timer = RequestTimer()

    sync_request = SyncRequest.from_payload(payload)
    class_name = _safe_class_name(sync_request)

    log_event(f"{key}_STARTED", {
        "request_id": request_id,
        "class_name": class_name,
        "csv_path": sync_request.csv_path,
        "output_folder": sync_request.output_folder,
    })

    try:
        response = ACTIONS[key](sync_request)
    except Exception as e:
        audit_logger.persist(audit_logger.build_record(
            request_id=request_id,
            user_id=user_id,
            action=key,
            class_name=class_name,
            decision="FAILED",
        ))
        log_event(f"{key}_FAILED", {
            "request_id": request_id,
            "class_name": class_name,
            "error_type": type(e).__name__,
            "error": str(e),
        })
        raise

    audit_logger.persist(audit_logger.build_record(
        request_id=request_id,
        user_id=user_id,
        action=key,
        class_name=response.get("class_name", class_name),
        decision=response.get("status", "SUCCESS"),
        records=response.get("records"),
        path=response.get("path"),
    ))
    log_event(f"{key}_COMPLETED", {
        "request_id": request_id,
        "class_name": response.get("class_name", class_name),
        "path": response.get("path"),
        "duration_seconds": timer.duration(),
    })

    response["request_id"] = request_id
    return response
