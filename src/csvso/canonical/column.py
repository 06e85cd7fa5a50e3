from dataclasses import dataclass
from enum import Enum


class ColumnType(str, Enum):
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"

    @classmethod
    def from_name(cls, type_name: str) -> "ColumnType":
        """
        Resolve a declared type name.
        Unknown names fall back to STRING (values pass through unconverted).
        """
        key = (type_name or "").strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return cls.STRING


@dataclass(frozen=True)
class Column:
    """
    One schema column as declared by the three CSV header lines.
    """
    comment: str
    name: str
    type_name: str          # verbatim from line 3, emitted as-is into generated code

    @property
    def kind(self) -> ColumnType:
        return ColumnType.from_name(self.type_name)
