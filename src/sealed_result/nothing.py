from __future__ import annotations

from typing import Any, final


@final
class Nothing:
    """A type with no fields and a single instance, ``nothing``.

    Use it as the success type of a ``Result`` whose success carries no
    meaningful value::

        def vacuum_database() -> Result[Nothing, DatabaseError]:
            ...
            return success(nothing)
    """

    __slots__ = ()

    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __init_subclass__(cls, **kwargs: Any) -> None:
        raise TypeError("Nothing cannot be subclassed")

    def __repr__(self) -> str:
        return "nothing"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> Nothing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Nothing:
        return self

    def __reduce__(self) -> str:
        return "nothing"


nothing: Nothing = Nothing()
