# drawgraph/model/drawable/group_drawable.py
import logging
from typing import Iterator, Type, override

from .drawable import Drawable
from .ownership import ChildSlot, Ownership

logger = logging.getLogger(__name__)


class Group(Drawable):
    """
    Composite node. Holds an ordered sequence of child slots and forwards every
    operation to each child in insertion order.

    Each slot carries an ownership tag deciding what happens to the child when
    the slot is released (``remove``, ``clear`` or disposing the group):

    - OWNED: the child is disposed. Adding takes over the creator's hold.
    - SHARED: the child is released; it survives while other holders remain,
      including the caller that created it.
    - BORROWED: nothing. The caller must keep the referent alive for as long
      as the group uses it; using it after it was disposed is undefined.

    Cycles are not detected. Adding a group to its own subtree makes
    ``draw``/``rotate`` recurse without bound; see
    ``graph_algorithms.has_cycle`` for an opt-in check.
    """

    KIND = "Group"

    def __init__(self, id: str):
        super().__init__(id)
        self._slots: list[ChildSlot] = []
        logger.debug(f"Create group - id = {id}")

    # ---------- Children ----------

    def add(self, child: Drawable, ownership: Ownership = Ownership.SHARED) -> None:
        if not isinstance(child, Drawable):
            raise TypeError(f"Group children must be Drawable, got {type(child).__name__}")

        if ownership is Ownership.OWNED:
            child.claim(self)
        elif ownership is Ownership.SHARED:
            if child.is_owned:
                raise ValueError(
                    f"{child!r} is exclusively owned by {child.owner!r} and cannot be shared"
                )
            child.retain()

        logger.debug(
            f"id = {self.id}; Add object = {child.type()} ({ownership.name.lower()})"
        )
        self._slots.append(ChildSlot(child, ownership))

    def add_new(self, cls: Type[Drawable], id: str, **kwargs) -> Drawable:
        """Construct a node and hand its ownership to this group."""
        node = cls(id, **kwargs)
        self.add(node, Ownership.OWNED)
        return node

    def remove(self, child: Drawable) -> None:
        for i, slot in enumerate(self._slots):
            if slot.node is child:
                del self._slots[i]
                self._release_slot(slot)
                return
        raise ValueError(f"{child!r} is not a child of group {self.id!r}")

    def clear(self) -> None:
        slots, self._slots = self._slots, []
        for slot in slots:
            self._release_slot(slot)

    def size(self) -> int:
        return len(self._slots)

    @property
    def children(self) -> tuple[Drawable, ...]:
        return tuple(slot.node for slot in self._slots)

    @property
    def slots(self) -> tuple[ChildSlot, ...]:
        return tuple(self._slots)

    @override
    def get_sub_drawables(self) -> list[Drawable]:
        return list(self.children)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Drawable]:
        return iter(self.children)

    @staticmethod
    def _release_slot(slot: ChildSlot) -> None:
        if slot.ownership is Ownership.OWNED:
            slot.node.unclaim()
            slot.node.dispose()
        elif slot.ownership is Ownership.SHARED:
            slot.node.release()

    # ---------- Drawable ----------

    @override
    def draw(self, canvas=None) -> None:
        logger.debug(f"Draw group - id = {self.id}")
        for slot in self._slots:
            slot.node.draw(canvas)

    @override
    def rotate(self, angle: float) -> None:
        logger.debug(f"Rotate group - id = {self.id}")
        for slot in self._slots:
            slot.node.rotate(angle)

    @override
    def primitives(self):
        return []

    @override
    def style(self):
        # children carry their own style
        return {}

    @override
    def _on_dispose(self) -> None:
        self.clear()
