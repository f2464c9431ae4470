from typing import Any


class InvalidParameterError(ValueError):
    """Raised when a calculation input is outside its valid domain.

    `field` names the offending parameter, `reason` says what is wrong with it.
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(f"{field} {reason} (got {value!r})")
        self.field = field
        self.value = value
        self.reason = reason
