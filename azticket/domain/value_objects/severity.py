from enum import Enum


class Severity(Enum):
    """
    Value Object for the severity values accepted by Azure support tickets.
    """
    HIGHEST_CRITICAL = "highestcriticalimpact"
    CRITICAL = "critical"
    SEVERE = "severe"
    MODERATE = "moderate"
    MINIMAL = "minimal"

    def __str__(self) -> str:
        return self.value
