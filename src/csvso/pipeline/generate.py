"""
Operation: CSV schema → generated container class source.

Runs the schema parser first; nothing is written unless it succeeds.
"""

import os
from typing import Dict

from csvso.adapters.csv_adapter import CSVSchemaAdapter
from csvso.canonical.descriptor import TypeDescriptor
from csvso.execution.request import SyncRequest
from csvso.governance.type_registry import TypeRegistry
from csvso.observability.logger import log_event
from csvso.outputs.csharp_generator import (
    IDENTIFIABLE_INTERFACE,
    CSharpClassGenerator,
    generate_identifiable_interface,
)
from csvso.pipeline.naming import SOURCE_EXTENSION, build_source_path
from csvso.utils.files import ensure_dir, write_text_atomic

SOURCE_ENCODING = "utf-8-sig"


def generate_class(request: SyncRequest) -> Dict:
    schema = CSVSchemaAdapter(request.csv_path, encoding=request.csv_encoding).parse()

    base_name = request.base_name
    generator = CSharpClassGenerator(
        schema=schema,
        base_name=base_name,
        namespace=request.namespace,
        implement_identifiable=request.implement_identifiable,
    )
    source = generator.generate()
    class_name = generator.class_name

    if request.implement_identifiable and not generator.emits_identifiable:
        log_event("IDENTIFIABLE_SKIPPED", {
            "class_name": class_name,
            "reason": "no 'id' column in schema",
        })

    ensure_dir(request.output_folder)
    source_path = build_source_path(request.output_folder, class_name)
    write_text_atomic(source_path, source, encoding=SOURCE_ENCODING)

    interface_path = None
    if generator.emits_identifiable:
        interface_path = os.path.join(
            request.output_folder, IDENTIFIABLE_INTERFACE + SOURCE_EXTENSION
        )
        if not os.path.exists(interface_path):
            write_text_atomic(
                interface_path,
                generate_identifiable_interface(),
                encoding=SOURCE_ENCODING,
            )

    descriptor = TypeDescriptor(
        class_name=class_name,
        base_name=base_name,
        fields=list(schema.columns),
        namespace=generator.namespace,
        identifiable=generator.emits_identifiable,
        metadata={
            "source_file": os.path.basename(request.csv_path),
            "source_path": source_path,
        },
    )
    TypeRegistry(request.output_folder).register(descriptor)

    return {
        "status": "SUCCESS",
        "action": "GENERATE",
        "class_name": class_name,
        "path": source_path,
        "interface_path": interface_path,
        "columns": len(schema),
        "identifiable": generator.emits_identifiable,
        "message": f"Generated {class_name}{SOURCE_EXTENSION} at {request.output_folder}",
    }
