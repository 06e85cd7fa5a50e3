from typing import Protocol, runtime_checkable


NO_ID = -1


@runtime_checkable
class Identifiable(Protocol):
    """
    Capability contract for objects that expose a representative id.

    get_id() returns a signed integer; negative values mean no id is available.
    """

    def get_id(self) -> int:
        ...
