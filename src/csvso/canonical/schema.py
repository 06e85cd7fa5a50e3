from dataclasses import dataclass, field
from typing import Dict, List, Optional

from csvso.canonical.column import Column


@dataclass
class Schema:
    """
    Ordered column definitions parsed from a CSV's first three lines.
    """
    columns: List[Column]

    # e.g. source_file, encoding
    metadata: Dict = field(default_factory=dict)

    @property
    def names(self) -> List[str]:
        return [c.name for c in self.columns]

    @property
    def type_names(self) -> List[str]:
        return [c.type_name for c in self.columns]

    @property
    def comments(self) -> List[str]:
        return [c.comment for c in self.columns]

    def has_column(self, name: str) -> bool:
        return any(c.name == name for c in self.columns)

    def get_column(self, name: str) -> Optional[Column]:
        for c in self.columns:
            if c.name == name:
                return c
        return None

    def __len__(self) -> int:
        return len(self.columns)
