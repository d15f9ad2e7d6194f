from typing import Optional
from uuid import UUID


def parse_uuid(value: Optional[str]) -> Optional[UUID]:
    """Parse an identifier from a path or body; None when it is not a UUID"""
    if not value:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        return None
