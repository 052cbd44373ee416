"""Integer enumerations that carry a human-readable label per member."""

from enum import IntEnum


class LabeledEnum(IntEnum):
    """Integer enum whose members are declared as ``(code, label)`` tuples.

    The integer code is the member value, so members compare equal to their
    codes and serialize as plain integers. The label is kept on ``.label``.

    Example:
        >>> class Color(LabeledEnum):
        ...     RED = (1, "Red")
        >>> Color.RED == 1, Color.RED.label
        (True, 'Red')
    """

    label: str

    def __new__(cls, value: int, label: str) -> "LabeledEnum":
        """Create a member from its ``(code, label)`` declaration."""
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.label = label
        return obj

    def __str__(self) -> str:
        """Return the label."""
        return self.label
