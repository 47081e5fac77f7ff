# Standard library imports
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ComparisonResult:
    """
    Outcome of comparing a submitted face against the reference photo.

    similarity is the top candidate's score (0-100), or 0 when the provider
    returned no candidate above the threshold.
    """
    matched: bool
    similarity: float = 0.0

    def __post_init__(self) -> None:
        """Business validations"""
        if not 0 <= self.similarity <= 100:
            raise ValueError(f"Similarity must be between 0 and 100, got {self.similarity}")


@dataclass(frozen=True)
class NotificationMessage:
    """Notification handed to the queue for downstream delivery."""
    token: Optional[str]
    message: str

    def to_payload(self) -> Dict[str, Any]:
        return {"token": self.token, "message": self.message}
