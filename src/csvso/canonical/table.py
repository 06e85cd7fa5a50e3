from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List

from csvso.canonical.descriptor import TypeDescriptor
from csvso.canonical.identifiable import NO_ID

Record = Dict[str, Any]


@dataclass
class Table:
    """
    Ordered records sharing one schema.
    Records keep the declaration order of the container's fields.
    """
    records: List[Record] = field(default_factory=list)

    def append(self, record: Record) -> None:
        self.records.append(record)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class ContainerInstance:
    """
    Persisted instance of a generated <baseName>SO container.
    Satisfies the Identifiable contract.
    """
    descriptor: TypeDescriptor
    table: Table = field(default_factory=Table)

    @property
    def class_name(self) -> str:
        return self.descriptor.class_name

    def replace_records(self, table: Table) -> None:
        self.table = table

    def get_id(self) -> int:
        if not self.descriptor.identifiable:
            return NO_ID
        if self.table is None or len(self.table) == 0:
            return NO_ID
        value = self.table.records[0].get("id")
        if isinstance(value, bool) or not isinstance(value, int):
            return NO_ID
        return value
