from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from csvso.router import route
from csvso.utils.exceptions import (
    ArtifactFormatError,
    AssetNotFoundError,
    CsvSOError,
    MissingInputError,
    SchemaError,
    TypeNotFoundError,
)
from csvso.execution.request import DEFAULT_OUTPUT_FOLDER

app = FastAPI(
    title="CSV to ScriptableObject Utility",
    version="1.0.0"
)


class SyncPayload(BaseModel):
    csv_path: Optional[str] = None
    output_folder: str = DEFAULT_OUTPUT_FOLDER
    namespace: str = ""
    implement_identifiable: bool = False
    export_path: Optional[str] = None
    csv_encoding: Optional[str] = None
    base_name: Optional[str] = None
    user_id: Optional[str] = None


def _status_for(error: CsvSOError) -> int:
    if isinstance(error, MissingInputError):
        return 400
    if isinstance(error, (SchemaError, ArtifactFormatError)):
        return 422
    if isinstance(error, (TypeNotFoundError, AssetNotFoundError)):
        return 404
    return 500


def _run(action: str, payload: SyncPayload, request: Request):
    try:
        return route(action, payload.model_dump(), request)
    except CsvSOError as e:
        raise HTTPException(
            status_code=_status_for(e),
            detail={
                "status": "ERROR",
                "action": action,
                "error_type": type(e).__name__,
                "message": str(e),
            }
        )


@app.post("/generate")
def generate(payload: SyncPayload, request: Request):
    return _run("GENERATE", payload, request)


@app.post("/import")
def import_data(payload: SyncPayload, request: Request):
    return _run("IMPORT", payload, request)


@app.post("/export")
def export_data(payload: SyncPayload, request: Request):
    return _run("EXPORT", payload, request)
