# drawgraph/model/drawable/drawable.py
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Tuple

Color = Tuple[int, int, int]  # BGR, as OpenCV expects

logger = logging.getLogger(__name__)


class Drawable(ABC):
    """
    Common contract for leaf shapes and groups.

    Subclasses fix their kind with a class-level ``KIND``; ``type()`` reports it
    and never changes for the lifetime of the node.

    Lifecycle is explicit: ``retain``/``release`` count shared holders and
    ``dispose`` is the destruction hook. The creator is the first holder; it
    gives up its hold with ``release`` or hands it to an owning group.
    Operating on a disposed node is a caller error and is not checked.
    """

    KIND: str = ""

    def __init__(self, id: str):
        if not id:
            logger.warning(f"{self.KIND} created with an empty id")
        self._id = id
        self._holders = 1  # the creator
        self._owner: "Drawable | None" = None
        self._disposed = False

    @property
    def id(self) -> str:
        return self._id

    def type(self) -> str:
        return self.KIND

    @abstractmethod
    def draw(self, canvas=None) -> None:
        """Perform the visible effect; paint onto `canvas` when one is given."""
        pass

    @abstractmethod
    def rotate(self, angle: float) -> None:
        """Rotate by `angle` degrees."""
        pass

    @abstractmethod
    def primitives(self) -> Iterable[Tuple[str, Any]]:
        """
        Returns iterable of (type, data) pairs.
        Type is 'points', 'lines', 'polygon' or 'text'.
        Data is primitive-specific:
        - 'points': list of (x, y)
        - 'lines': open polyline, list of (x, y)
        - 'polygon': closed polyline, list of (x, y)
        - 'text': ((x, y), str)
        """
        pass

    @abstractmethod
    def style(self) -> dict:
        """Return styling hints: color, thickness, label, etc."""
        pass

    def get_sub_drawables(self) -> list["Drawable"]:
        """Return list of sub-drawables if any."""
        return []

    # ---------- Lifecycle ----------

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def holders(self) -> int:
        return self._holders

    @property
    def owner(self) -> "Drawable | None":
        return self._owner

    @property
    def is_owned(self) -> bool:
        return self._owner is not None

    def claim(self, owner: "Drawable") -> None:
        """Make `owner` the exclusive holder, taking over the creator's hold."""
        if self._owner is not None:
            raise ValueError(f"{self!r} is already owned by {self._owner!r}")
        if self._holders != 1:
            raise ValueError(
                f"{self!r} has {self._holders} holders and cannot be exclusively owned"
            )
        self._owner = owner

    def unclaim(self) -> None:
        self._owner = None

    def retain(self) -> "Drawable":
        self._holders += 1
        return self

    def release(self) -> None:
        self._holders -= 1
        if self._holders <= 0:
            self._holders = 0
            self.dispose()

    def dispose(self) -> None:
        if self._disposed:
            return
        self._on_dispose()
        self._holders = 0
        self._disposed = True
        logger.debug(f"Destroy {self.KIND.lower()} - id = {self._id}")

    def _on_dispose(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id!r})"
