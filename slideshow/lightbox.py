from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional

from slideshow.events import (
    LightboxClosed,
    LightboxImageSettled,
    LightboxImageShown,
    LightboxOpened,
)
from slideshow.gestures import NEXT, PREV, Point, classify_swipe

PLACEHOLDER = "/assets/placeholder.jpg"
DEFAULT_ALT = "Gallery image"


@dataclass
class LightboxImage:
    src: str
    caption: str = ""
    alt: str = DEFAULT_ALT


def normalize_image(image: Any) -> LightboxImage:
    """Accept a bare URL or a mapping with src/url and caption/alt."""
    if isinstance(image, str):
        return LightboxImage(src=image)
    if isinstance(image, Mapping):
        caption = image.get("caption") or image.get("alt") or ""
        return LightboxImage(
            src=image.get("src") or image.get("url") or "",
            caption=caption,
            alt=image.get("alt") or caption or DEFAULT_ALT,
        )
    raise TypeError(f"Unsupported gallery image: {image!r}")


class LightboxEngine:
    """Modal viewer over a fixed image list; one instance per gallery."""

    def __init__(self, placeholder: str = PLACEHOLDER):
        self.placeholder = placeholder
        self.images: List[LightboxImage] = []
        self.current_index = 0
        self.is_open = False
        self.is_loading = False
        self.scroll_locked = False
        self._listeners: List[Callable[[Any], None]] = []

    def subscribe(self, listener: Callable[[Any], None]) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _emit(self, event: Any) -> None:
        for listener in list(self._listeners):
            listener(event)

    @property
    def nav_visible(self) -> bool:
        return len(self.images) > 1

    @property
    def current(self) -> Optional[LightboxImage]:
        if not self.images:
            return None
        return self.images[self.current_index]

    def set_images(self, images: Iterable[Any]) -> None:
        self.images = [normalize_image(img) for img in images]
        self.current_index = 0

    def open(self, index: int = 0) -> bool:
        if not self.images:
            return False
        self.current_index = max(0, min(index, len(self.images) - 1))
        self.is_open = True
        self.scroll_locked = True
        self._emit(LightboxOpened(self.current_index))
        self._show()
        return True

    def close(self) -> None:
        self.is_open = False
        self.scroll_locked = False
        self._emit(LightboxClosed())

    def next(self) -> bool:
        if len(self.images) <= 1:
            return False
        self.current_index = (self.current_index + 1) % len(self.images)
        self._show()
        return True

    def prev(self) -> bool:
        if len(self.images) <= 1:
            return False
        self.current_index = (self.current_index - 1) % len(self.images)
        self._show()
        return True

    def _show(self) -> None:
        image = self.images[self.current_index]
        self.is_loading = True
        self._emit(LightboxImageShown(self.current_index, image.src, image.caption, self.nav_visible))

    # ---- image load outcome ----

    def image_loaded(self) -> None:
        self.is_loading = False
        if self.current is not None:
            self._emit(LightboxImageSettled(self.current_index, self.current.src, failed=False))

    def image_failed(self) -> None:
        self.is_loading = False
        if self.current is None:
            return
        self.images[self.current_index] = LightboxImage(
            src=self.placeholder, caption=self.current.caption, alt="Image not available"
        )
        self._emit(LightboxImageSettled(self.current_index, self.placeholder, failed=True))

    # ---- input ----

    def handle_key(self, key: str) -> bool:
        if not self.is_open:
            return False
        if key == "Escape":
            self.close()
        elif key == "ArrowLeft":
            self.prev()
        elif key == "ArrowRight":
            self.next()
        else:
            return False
        return True

    def backdrop_click(self, on_backdrop: bool) -> bool:
        """Close when the click landed on the backdrop rather than the image."""
        if self.is_open and on_backdrop:
            self.close()
            return True
        return False

    def handle_swipe(self, start: Point, end: Point) -> bool:
        if not self.is_open:
            return False
        direction = classify_swipe(start, end)
        if direction == NEXT:
            return self.next()
        if direction == PREV:
            return self.prev()
        return False
