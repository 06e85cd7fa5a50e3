"""
Operation: CSV data rows → persisted container instance.

The new table is built completely in memory before the instance is
touched; the asset file is then replaced atomically.
"""

from typing import Dict, List

from csvso.adapters.csv_adapter import CSVSchemaAdapter
from csvso.canonical.descriptor import TypeDescriptor
from csvso.canonical.schema import Schema
from csvso.canonical.table import Record, Table
from csvso.execution.request import SyncRequest
from csvso.governance.type_registry import TypeRegistry
from csvso.inference.conversion import build_bindings
from csvso.outputs.asset_store import AssetStore


def build_table(schema: Schema, descriptor: TypeDescriptor, rows: List[List[str]]) -> Table:
    """
    Convert token rows into records shaped like the generated Entry type.

    A token is used when its position has a column and the column name is a
    field of the generated type. It is converted with the CSV's declared type.
    Fields that receive no token keep their type default.
    """
    csv_bindings = build_bindings(schema.columns)
    field_bindings = build_bindings(descriptor.fields)

    table = Table()
    for tokens in rows:
        record: Record = {name: b.default for name, b in field_bindings.items()}
        for column, token in zip(schema.columns, tokens):
            if column.name not in field_bindings:
                continue
            record[column.name] = csv_bindings[column.name].parse(token)
        table.append(record)
    return table


def import_csv(request: SyncRequest) -> Dict:
    adapter = CSVSchemaAdapter(request.csv_path, encoding=request.csv_encoding)
    schema = adapter.parse()

    class_name = request.class_name
    descriptor = TypeRegistry(request.output_folder).require(class_name)

    store = AssetStore(request.output_folder)
    created = not store.exists(class_name)
    instance = store.load_or_create(descriptor)

    table = build_table(schema, descriptor, list(adapter.iter_data_rows()))
    instance.replace_records(table)
    asset_path = store.save(instance)

    return {
        "status": "SUCCESS",
        "action": "IMPORT",
        "class_name": class_name,
        "path": asset_path,
        "created": created,
        "records": len(table),
        "message": "Imported CSV into single SO.",
    }
