import os
from typing import Any, Dict, List, Optional

import yaml

from csvso.canonical.column import ColumnType
from csvso.canonical.descriptor import TypeDescriptor
from csvso.canonical.table import ContainerInstance, Record, Table
from csvso.inference.conversion import default_for, parse_or_default
from csvso.pipeline.naming import build_asset_path
from csvso.utils.exceptions import ArtifactFormatError, AssetNotFoundError
from csvso.utils.files import ensure_dir, write_text_atomic


def _coerce(value: Any, type_name: str) -> Any:
    """
    Bring a YAML-loaded scalar back to the field's declared type.
    """
    if value is None:
        return default_for(type_name)
    kind = ColumnType.from_name(type_name)
    if kind is ColumnType.BOOL and isinstance(value, bool):
        return value
    if kind is ColumnType.INT and isinstance(value, int) and not isinstance(value, bool):
        return value
    if kind is ColumnType.FLOAT and isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if kind is ColumnType.STRING:
        return value if isinstance(value, str) else str(value)
    return parse_or_default(str(value), type_name)


class AssetStore:
    """
    Persists container instances as YAML documents.

    Path: <output_folder>/<ClassName>.asset
    """

    def __init__(self, output_folder: str):
        self.output_folder = output_folder

    def path_for(self, class_name: str) -> str:
        return build_asset_path(self.output_folder, class_name)

    def exists(self, class_name: str) -> bool:
        return os.path.isfile(self.path_for(class_name))

    # --------------------------------------------------
    # Load
    # --------------------------------------------------
    def load(self, descriptor: TypeDescriptor) -> Optional[ContainerInstance]:
        path = self.path_for(descriptor.class_name)
        if not os.path.isfile(path):
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                document = yaml.safe_load(f) or {}
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ArtifactFormatError(f"SO asset is not valid YAML: {path}: {e}") from e

        if not isinstance(document, dict) or not isinstance(document.get("entries") or [], list):
            raise ArtifactFormatError(f"SO asset has no entries list: {path}")

        raw_entries: List[Dict] = document.get("entries") or []
        table = Table()
        for raw in raw_entries:
            raw = {} if raw is None else raw
            if not isinstance(raw, dict):
                raise ArtifactFormatError(f"SO asset entry is not a mapping: {path}")
            record: Record = {}
            for fld in descriptor.fields:
                record[fld.name] = _coerce(raw.get(fld.name), fld.type_name)
            table.append(record)

        return ContainerInstance(descriptor=descriptor, table=table)

    def require(self, descriptor: TypeDescriptor) -> ContainerInstance:
        instance = self.load(descriptor)
        if instance is None:
            raise AssetNotFoundError(
                f"SO asset not found: {self.path_for(descriptor.class_name)}"
            )
        return instance

    def load_or_create(self, descriptor: TypeDescriptor) -> ContainerInstance:
        instance = self.load(descriptor)
        if instance is None:
            instance = ContainerInstance(descriptor=descriptor)
        return instance

    # --------------------------------------------------
    # Save
    # --------------------------------------------------
    def to_yaml(self, instance: ContainerInstance) -> str:
        document = {
            "class_name": instance.class_name,
            "namespace": instance.descriptor.namespace,
            "entries": [dict(record) for record in instance.table],
        }
        return yaml.safe_dump(
            document,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
            explicit_start=True,
            version=(1, 1),
        )

    def save(self, instance: ContainerInstance) -> str:
        ensure_dir(self.output_folder)
        path = self.path_for(instance.class_name)
        write_text_atomic(path, self.to_yaml(instance))
        return path
