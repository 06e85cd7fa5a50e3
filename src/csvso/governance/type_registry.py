import json
import hashlib
import os
from datetime import datetime, timezone
from typing import Dict, List, Optional

from csvso.canonical.column import Column
from csvso.canonical.descriptor import TypeDescriptor
from csvso.utils.exceptions import ArtifactFormatError, TypeNotFoundError
from csvso.utils.files import write_text_atomic

REGISTRY_FILE_NAME = "csvso_registry.json"


def utc_now():
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


# --------------------------------------------------
# SCHEMA HASHING (STRUCTURAL)
# --------------------------------------------------

def compute_schema_hash(fields: List[Column]) -> str:
    """
    Order-sensitive, structural-only (ignores comments).
    Field order is the declaration order of the generated type.
    """
    payload = json.dumps(
        [{"name": f.name, "type": f.type_name} for f in fields],
        sort_keys=True,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


# --------------------------------------------------
# TYPE REGISTRY
# --------------------------------------------------

class TypeRegistry:
    """
    Manifest of generated container types, keyed by exact class name.
    Lives next to the generated sources in the output folder.
    """

    def __init__(self, output_folder: str, path: Optional[str] = None):
        self.output_folder = output_folder
        self.path = path or os.path.join(output_folder, REGISTRY_FILE_NAME)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    self.data: Dict[str, Dict] = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise ArtifactFormatError(f"Type registry is not valid JSON: {self.path}: {e}") from e
        else:
            self.data = {}

    def _save(self):
        write_text_atomic(self.path, json.dumps(self.data, indent=2, ensure_ascii=False) + "\n")

    # --------------------------------------------------
    # READ OPERATIONS
    # --------------------------------------------------

    def get(self, class_name: str) -> Optional[TypeDescriptor]:
        entry = self.data.get(class_name)
        if entry is None:
            return None
        return TypeDescriptor.from_dict(entry)

    def require(self, class_name: str) -> TypeDescriptor:
        descriptor = self.get(class_name)
        if descriptor is None:
            raise TypeNotFoundError(f"Type {class_name} not found. Generate first.")
        return descriptor

    def class_names(self) -> List[str]:
        return sorted(self.data.keys())

    # --------------------------------------------------
    # WRITE OPERATIONS
    # --------------------------------------------------

    def register(self, descriptor: TypeDescriptor) -> TypeDescriptor:
        """
        Insert or overwrite the entry for descriptor.class_name.
        generated_at is kept when the structure is unchanged so that
        re-generation leaves the manifest byte-identical.
        """
        schema_hash = compute_schema_hash(descriptor.fields)
        previous = self.data.get(descriptor.class_name)

        metadata = dict(descriptor.metadata)
        metadata["schema_hash"] = schema_hash
        if previous and previous.get("metadata", {}).get("schema_hash") == schema_hash:
            metadata["generated_at"] = previous["metadata"].get("generated_at", utc_now())
        else:
            metadata["generated_at"] = utc_now()
        descriptor.metadata = metadata

        entry = descriptor.to_dict()
        if previous != entry:
            self.data[descriptor.class_name] = entry
            self._save()
        return descriptor
