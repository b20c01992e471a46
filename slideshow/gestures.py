from typing import List, Optional, Protocol, Tuple

SWIPE_THRESHOLD = 50

Point = Tuple[float, float]

NEXT = "next"
PREV = "prev"


def classify_swipe(start: Point, end: Point, threshold: float = SWIPE_THRESHOLD) -> Optional[str]:
    """Map a drag to NEXT (leftwards), PREV (rightwards) or None.

    Vertical-dominant drags return None so page scrolling keeps working.
    """
    diff_x = start[0] - end[0]
    diff_y = start[1] - end[1]
    if abs(diff_x) > abs(diff_y) and abs(diff_x) > threshold:
        return NEXT if diff_x > 0 else PREV
    return None


def parallax_offset(x: float, y: float, width: float, height: float, speed: float = 0.02) -> Point:
    return ((x - width / 2) * speed, (y - height / 2) * speed)


class KeyTarget(Protocol):
    def handle_key(self, key: str) -> bool: ...


class KeyboardRouter:
    """Page-wide key dispatch.

    Modal targets (lightboxes) get the key first, then ordinary targets;
    within each group the most recently mounted one wins.
    """

    def __init__(self):
        self._modal: List[KeyTarget] = []
        self._targets: List[KeyTarget] = []

    def mount(self, target: KeyTarget, modal: bool = False) -> None:
        group = self._modal if modal else self._targets
        if target in group:
            group.remove(target)
        group.append(target)

    def unmount(self, target: KeyTarget) -> None:
        for group in (self._modal, self._targets):
            if target in group:
                group.remove(target)

    def dispatch(self, key: str) -> bool:
        for target in reversed(self._modal):
            if target.handle_key(key):
                return True
        for target in reversed(self._targets):
            if target.handle_key(key):
                return True
        return False
