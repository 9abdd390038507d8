"""Input validation utilities for CLI commands."""


def validate_created(created: int) -> int:
    """Validate and return a creation timestamp. Raises ValueError if invalid."""
    if created < 0:
        raise ValueError("Creation timestamp cannot be negative")
    return created


def clean_key_material(value: str) -> str:
    """Strip surrounding whitespace from pasted key material or SINs."""
    return value.strip()
