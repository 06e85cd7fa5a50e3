from typing import List

from csvso.canonical.column import ColumnType
from csvso.canonical.table import ContainerInstance
from csvso.inference.conversion import build_bindings
from csvso.utils.files import write_text_atomic

EXPORT_COMMENT_LINE = "# Comment line. This file was exported from a ScriptableObject."
DELIMITER = ","


class CSVExporter:
    """
    Exports a container instance back to schema-declaring CSV.

    Values are written in their primitive string form without quoting,
    so a string containing a comma will not import back as one token.
    """

    def __init__(self, instance: ContainerInstance):
        self.instance = instance

    def export_lines(self) -> List[str]:
        fields = self.instance.descriptor.fields
        bindings = build_bindings(fields)

        lines = [
            EXPORT_COMMENT_LINE,
            DELIMITER.join(f.name for f in fields),
            DELIMITER.join(self._type_label(f.type_name) for f in fields),
        ]
        for record in self.instance.table:
            lines.append(DELIMITER.join(
                bindings[f.name].render(record.get(f.name)) for f in fields
            ))
        return lines

    def export_to_string(self) -> str:
        return "".join(line + "\n" for line in self.export_lines())

    def export_to_file(self, file_path: str):
        write_text_atomic(file_path, self.export_to_string(), encoding="utf-8")

    @staticmethod
    def _type_label(type_name: str) -> str:
        kind = ColumnType.from_name(type_name)
        if kind is ColumnType.STRING:
            return type_name.strip().lower()
        return kind.value
