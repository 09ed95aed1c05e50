"""
Value objects passed through capability operations.
"""

import uuid
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Dict, Any, Optional


@dataclass
class Record:
    """A unit of data handed to a record store."""
    kind: str
    data: Dict[str, Any]
    record_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Record':
        return cls(**data)


@dataclass
class Document:
    """A document that can be printed or scanned."""
    title: str
    content: str = ""
    pages: int = 1


@dataclass
class Credentials:
    """Login material presented to an authenticator."""
    username: str
    secret: Optional[str] = None
