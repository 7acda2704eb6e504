from dataclasses import dataclass
import re


@dataclass(frozen=True)
class UserEmail:
    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().lower()
        if not re.match(r"[^@]+@[^@]+\.[^@]+", normalized):
            raise ValueError("Invalid email address")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
