"""Error kinds raised by List1 operations."""


class EmptyError(ValueError):
    """
    Raised when an operation would leave a List1 with no elements.

    The refused operation performs no mutation before raising. The error
    carries no payload: any two instances compare equal.
    """

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Cannot produce a List1 with a length of zero."

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class EmptyArrayDecodeError(EmptyError):
    """Raised by the codec when the decoded array has no elements."""

    def __str__(self) -> str:
        return "Decoded array is empty; a List1 needs at least one element."
