"""Domain entity for a trusted network origin."""

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass
class AdminRecord:
    """An IP address whose requests are treated as administrator requests.

    The model is binary: a matching record grants every admin capability,
    no record grants none.
    """

    ip: str
    id: str = field(default_factory=lambda: str(uuid4()))
