from typing import List, Optional

from csvso.canonical.schema import Schema
from csvso.pipeline.naming import build_class_name, escape_comment

IDENTIFIABLE_INTERFACE = "IIdentifiableSO"
IDENTIFIABLE_NAMESPACE = "IIdentifiableNamespace"
IDENTIFIABLE_FIELD = "id"
ENTRY_CLASS = "Entry"
ENTRIES_FIELD = "entries"

INDENT = "    "


class CSharpClassGenerator:
    """
    Renders a ScriptableObject container class from a CSV schema.

    Layout:
    - nested [Serializable] Entry record, one public field per column
    - List<Entry> entries container field
    - GetId() accessor when the identifiable capability applies

    Output is deterministic: same inputs, same text.
    """

    def __init__(
        self,
        schema: Schema,
        base_name: str,
        namespace: Optional[str] = None,
        implement_identifiable: bool = False,
    ):
        self.schema = schema
        self.base_name = base_name
        self.namespace = (namespace or "").strip()
        self.implement_identifiable = implement_identifiable

    @property
    def class_name(self) -> str:
        return build_class_name(self.base_name)

    @property
    def emits_identifiable(self) -> bool:
        """
        The accessor needs an `id` column; without one the capability is skipped.
        """
        return self.implement_identifiable and self.schema.has_column(IDENTIFIABLE_FIELD)

    # ======================================================
    # PUBLIC ENTRYPOINT
    # ======================================================

    def generate(self) -> str:
        lines: List[str] = []
        cls = self.class_name

        lines.append("using UnityEngine;")
        lines.append("using System;")
        lines.append("using System.Collections.Generic;")
        if self.emits_identifiable:
            lines.append(f"using {IDENTIFIABLE_NAMESPACE};")

        if self.namespace:
            lines.append(f"namespace {self.namespace}")
            lines.append("{")

        bases = "ScriptableObject"
        if self.emits_identifiable:
            bases += f", {IDENTIFIABLE_INTERFACE}"

        lines.append(f'[CreateAssetMenu(fileName = "{cls}", menuName = "CSV SO/{cls}")]')
        lines.append(f"public class {cls} : {bases}")
        lines.append("{")
        self._render_entry(lines)
        lines.append(f"{INDENT}public List<{ENTRY_CLASS}> {ENTRIES_FIELD} = new List<{ENTRY_CLASS}>();")
        if self.emits_identifiable:
            lines.append(
                f"{INDENT}public int GetId() => {ENTRIES_FIELD} != null && {ENTRIES_FIELD}.Count > 0"
                f" ? {ENTRIES_FIELD}[0].{IDENTIFIABLE_FIELD} : -1;"
            )
        lines.append("}")

        if self.namespace:
            lines.append("}")

        return "\n".join(lines) + "\n"

    # ======================================================
    # ENTRY RECORD
    # ======================================================

    def _render_entry(self, lines: List[str]) -> None:
        inner = INDENT * 2
        lines.append(f"{INDENT}[Serializable]")
        lines.append(f"{INDENT}public class {ENTRY_CLASS}")
        lines.append(f"{INDENT}{{")
        for column in self.schema.columns:
            lines.append(f"{inner}/// <summary>")
            lines.append(f"{inner}/// {escape_comment(column.comment)}")
            lines.append(f"{inner}/// </summary>")
            lines.append(f"{inner}public {column.type_name} {column.name};")
        lines.append(f"{INDENT}}}")


def generate_identifiable_interface() -> str:
    """
    Source of the contract that generated identifiable classes implement.
    """
    return "\n".join([
        f"namespace {IDENTIFIABLE_NAMESPACE}",
        "{",
        f"{INDENT}/// <summary>",
        f"{INDENT}/// Exposes a representative id. Negative values mean no id is available.",
        f"{INDENT}/// </summary>",
        f"{INDENT}public interface {IDENTIFIABLE_INTERFACE}",
        f"{INDENT}{{",
        f"{INDENT * 2}int GetId();",
        f"{INDENT}}}",
        "}",
    ]) + "\n"
