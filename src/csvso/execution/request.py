from dataclasses import dataclass
from typing import Any, Dict, Optional

from csvso.adapters.csv_adapter import DEFAULT_CSV_ENCODING
from csvso.pipeline.naming import build_base_name, build_class_name
from csvso.utils.exceptions import MissingInputError

DEFAULT_OUTPUT_FOLDER = "Assets/ScriptableObjects"


@dataclass
class SyncRequest:
    """
    Parameters for one Generate / Import / Export operation.
    Built fresh from the triggering action's payload.
    """
    csv_path: Optional[str] = None
    output_folder: str = DEFAULT_OUTPUT_FOLDER
    namespace: str = ""
    implement_identifiable: bool = False
    export_path: Optional[str] = None
    csv_encoding: str = DEFAULT_CSV_ENCODING

    # Export can address a generated type without its source CSV
    base_name_override: Optional[str] = None

    @property
    def base_name(self) -> str:
        if self.base_name_override:
            return self.base_name_override.replace(" ", "_")
        if not self.csv_path:
            raise MissingInputError("Assign CSV first.")
        return build_base_name(self.csv_path)

    @property
    def class_name(self) -> str:
        return build_class_name(self.base_name)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "SyncRequest":
        return cls(
            csv_path=payload.get("csv_path") or payload.get("file_path"),
            output_folder=payload.get("output_folder") or DEFAULT_OUTPUT_FOLDER,
            namespace=payload.get("namespace") or "",
            implement_identifiable=bool(payload.get("implement_identifiable", False)),
            export_path=payload.get("export_path"),
            csv_encoding=payload.get("csv_encoding") or DEFAULT_CSV_ENCODING,
            base_name_override=payload.get("base_name"),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "csv_path": self.csv_path,
            "output_folder": self.output_folder,
            "namespace": self.namespace,
            "implement_identifiable": self.implement_identifiable,
            "export_path": self.export_path,
            "csv_encoding": self.csv_encoding,
            "base_name": self.base_name_override,
        }
