# drawgraph/model/drawable/ownership.py

from dataclasses import dataclass
from enum import Enum, auto

from .drawable import Drawable


class Ownership(Enum):
    OWNED = auto()  # group is the sole owner, disposes the child on release
    SHARED = auto()  # counted holder, child disposed when the last holder releases
    BORROWED = auto()  # lifetime managed elsewhere, never disposed by the group


@dataclass(frozen=True)
class ChildSlot:
    node: Drawable
    ownership: Ownership
