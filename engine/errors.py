from __future__ import annotations

from engine.models.result import InputRejection


class ProfileRejected(ValueError):
    """Raised by `evaluate_or_raise` when a profile has out-of-domain fields."""

    def __init__(self, rejection: InputRejection) -> None:
        self.rejection = rejection
        fields = ", ".join(rejection.fields)
        super().__init__(f"Profile rejected: invalid {fields}")
