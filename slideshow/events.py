from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SlidesLoaded:
    count: int
    controls_visible: bool
    thumbnails: bool = False


@dataclass(frozen=True)
class SlideActivated:
    index: int
    previous: Optional[int]
    immediate: bool
    animation: str = "none"
    animate_text: bool = False


@dataclass(frozen=True)
class SlideLeft:
    index: int


@dataclass(frozen=True)
class TransitionFinished:
    index: int


@dataclass(frozen=True)
class ProgressChanged:
    fraction: float
    running: bool
    remaining_ms: float


@dataclass(frozen=True)
class ParallaxMoved:
    x: float
    y: float


@dataclass(frozen=True)
class SlideImageFailed:
    index: int
    placeholder: str


@dataclass(frozen=True)
class LightboxOpened:
    index: int


@dataclass(frozen=True)
class LightboxClosed:
    pass


@dataclass(frozen=True)
class LightboxImageShown:
    index: int
    src: str
    caption: str
    nav_visible: bool


@dataclass(frozen=True)
class LightboxImageSettled:
    index: int
    src: str
    failed: bool
