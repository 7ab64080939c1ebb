"""Memory segments of the VM and their base-pointer addresses in RAM."""

from __future__ import annotations

from enum import IntEnum


class Segment(IntEnum):
    """A VM memory segment, valued by the RAM address that holds its base.

    ``CONSTANT`` has no base of its own; its value is the stack pointer's
    address, which the generated code uses directly.
    """

    CONSTANT = 0
    LOCAL = 1
    ARGUMENT = 2
    THIS = 3
    THAT = 4
    TEMP = 5
    POINTER = 16
    STATIC = 17

    @property
    def vm_name(self) -> str:
        """The segment's name as written in VM code."""
        return self.name.lower()


STACK_POINTER = Segment.CONSTANT.value

_BY_NAME = {segment.vm_name: segment for segment in Segment}


def segment_from_name(name: str) -> Segment:
    """Return the segment called ``name`` in VM code.

    Names are case sensitive. Raises ValueError for an unknown name.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise ValueError(f"unknown memory segment: {name!r}") from None