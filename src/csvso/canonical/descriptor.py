from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from csvso.canonical.column import Column


@dataclass
class TypeDescriptor:
    """
    Registry entry for a generated container type.
    The generator writes one of these next to every <baseName>SO source file.
    """
    class_name: str
    base_name: str
    fields: List[Column]

    namespace: str = ""
    identifiable: bool = False

    # Optional provenance
    # e.g. source_file, source_path, schema_hash, generated_at
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> Optional[Column]:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class_name": self.class_name,
            "base_name": self.base_name,
            "namespace": self.namespace,
            "identifiable": self.identifiable,
            "fields": [
                {"name": f.name, "type": f.type_name, "comment": f.comment}
                for f in self.fields
            ],
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TypeDescriptor":
        return cls(
            class_name=data["class_name"],
            base_name=data.get("base_name", data["class_name"]),
            namespace=data.get("namespace") or "",
            identifiable=bool(data.get("identifiable", False)),
            fields=[
                Column(
                    comment=f.get("comment", ""),
                    name=f["name"],
                    type_name=f["type"],
                )
                for f in data.get("fields", [])
            ],
            metadata=dict(data.get("metadata") or {}),
        )
