from dataclasses import dataclass


@dataclass(frozen=True)
class Claim:
    """A (type, value) statement about a user, e.g. ("dept", "eng")."""

    claim_type: str
    claim_value: str

    def matches(self, claim_type: str, claim_value: str) -> bool:
        return self.claim_type == claim_type and self.claim_value == claim_value
