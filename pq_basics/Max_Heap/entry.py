from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")
P = TypeVar("P")


class Entry(NamedTuple, Generic[T, P]):
    """
    A (value, priority) pair stored in one heap slot.

    The queue never inspects `value`; only `priority` takes part in ordering.
    """
    value: T
    priority: P

    def __str__(self) -> str:
        return f"Activity: {self.value}. Priority: {self.priority}."
