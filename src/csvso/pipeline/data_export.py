"""
Operation: persisted container instance → CSV file.

Type and asset lookups both happen before the destination is written.
"""

from typing import Dict

from csvso.execution.request import SyncRequest
from csvso.governance.type_registry import TypeRegistry
from csvso.outputs.asset_store import AssetStore
from csvso.outputs.csv_exporter import CSVExporter
from csvso.pipeline.naming import build_default_export_path


def export_csv(request: SyncRequest) -> Dict:
    class_name = request.class_name
    descriptor = TypeRegistry(request.output_folder).require(class_name)
    instance = AssetStore(request.output_folder).require(descriptor)

    out_path = request.export_path or build_default_export_path(request.base_name)
    CSVExporter(instance).export_to_file(out_path)

    return {
        "status": "SUCCESS",
        "action": "EXPORT",
        "class_name": class_name,
        "path": out_path,
        "records": len(instance.table),
        "message": f"Exported CSV to {out_path}.",
    }
