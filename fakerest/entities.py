"""
Entity records exchanged with the remote service.

Each entity is a flat dataclass. Field order is the wire order used by the
codec, and the ``wire`` metadata key carries the JSON name where it differs
from the Python attribute name. Fields marked ``transient`` are decoded when
present but never encoded and never read positionally.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class User:
    id: int
    name: str
    email: str
    # Only returned by the remote, used for lookups
    username: Optional[str] = field(default=None, compare=False, repr=False, metadata={"transient": True})


@dataclass
class Post:
    id: int
    user_id: int = field(metadata={"wire": "userId"})
    title: str
    body: str


@dataclass
class Comment:
    id: int
    post_id: int = field(metadata={"wire": "postId"})
    name: str
    email: str
    body: str


@dataclass
class Todo:
    id: int
    user_id: int = field(metadata={"wire": "userId"})
    title: str
    completed: bool
