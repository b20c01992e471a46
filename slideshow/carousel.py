"""Timed slide rotation, independent of any rendering surface.

A renderer subscribes to the engine and mirrors its events onto the page
(active/leaving classes, indicator and thumbnail highlighting, progress bar
width). All timing goes through a `Scheduler`, so the engine runs the same
on a virtual clock in tests as on an event loop.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Optional, Sequence

from slideshow.events import (
    ParallaxMoved,
    ProgressChanged,
    SlideActivated,
    SlideImageFailed,
    SlideLeft,
    SlidesLoaded,
    TransitionFinished,
)
from slideshow.gestures import NEXT, PREV, Point, classify_swipe, parallax_offset
from slideshow.scheduler import Scheduler, TimerHandle

Listener = Callable[[Any], None]


@dataclass
class CarouselOptions:
    autoplay: bool = True
    autoplay_interval: float = 6000
    transition_duration: float = 1500
    animation_type: str = "fade-slide"
    enable_progress_bar: bool = True
    enable_thumbnails: bool = False
    enable_text_animation: bool = True
    enable_parallax: bool = True
    parallax_speed: float = 0.02
    pause_on_hover: bool = True
    # hold the transition lock until complete_transition() instead of a timer
    await_completion: bool = False
    placeholder_image: str = "/assets/placeholder-hero.svg"

    @classmethod
    def plain(cls, **overrides) -> "CarouselOptions":
        """Preset for the simple image slider on state pages."""
        options = cls(
            autoplay_interval=5000,
            transition_duration=0,
            enable_progress_bar=False,
            enable_text_animation=False,
            enable_parallax=False,
            pause_on_hover=False,
            placeholder_image="/assets/placeholder.jpg",
        )
        return replace(options, **overrides)


class CarouselEngine:
    def __init__(self, scheduler: Scheduler, options: Optional[CarouselOptions] = None):
        self.scheduler = scheduler
        self.options = options or CarouselOptions()

        self.slides: List[Any] = []
        self.current_index = 0
        self.leaving_index: Optional[int] = None
        self.is_animating = False
        self.is_paused = False

        self._listeners: List[Listener] = []
        self._autoplay_timer: Optional[TimerHandle] = None
        self._release_timer: Optional[TimerHandle] = None
        self._leave_timers: Dict[int, TimerHandle] = {}

        self._progress_from = 0.0
        self._progress_started: Optional[float] = None

    # ---- observers ----

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _emit(self, event: Any) -> None:
        for listener in list(self._listeners):
            listener(event)

    # ---- state ----

    @property
    def controls_visible(self) -> bool:
        return len(self.slides) > 1

    @property
    def autoplay_scheduled(self) -> bool:
        return self._autoplay_timer is not None

    @property
    def current_slide(self):
        return self.slides[self.current_index] if self.slides else None

    def progress(self) -> float:
        """Fill fraction of the progress bar, 0.0 to 1.0."""
        if self._progress_started is None:
            return self._progress_from
        interval = self.options.autoplay_interval
        if interval <= 0:
            return 1.0
        elapsed = self.scheduler.now() - self._progress_started
        return min(1.0, self._progress_from + elapsed / interval)

    def _can_autoplay(self) -> bool:
        return self.options.autoplay and len(self.slides) > 1 and not self.is_paused

    # ---- navigation ----

    def load(self, slides: Sequence[Any]) -> bool:
        """Replace the deck and show its first slide without a transition.

        An empty deck is ignored. A new deck also clears any hover pause, so
        autoplay starts whenever it is enabled and there is more than one slide.
        """
        slides = list(slides or [])
        if not slides:
            return False

        self._cancel_timers()
        self.slides = slides
        self.current_index = 0
        self.leaving_index = None
        self.is_animating = False
        self.is_paused = False

        self._emit(SlidesLoaded(
            len(slides), self.controls_visible,
            thumbnails=self.options.enable_thumbnails and self.controls_visible,
        ))
        self._emit(SlideActivated(
            0, None, immediate=True, animate_text=self.options.enable_text_animation,
        ))
        self._restart_cycle()
        return True

    def go_to(self, index: int) -> bool:
        if not 0 <= index < len(self.slides):
            return False
        if index == self.current_index or self.is_animating:
            return False

        previous = self.current_index
        self.current_index = index
        duration = self.options.transition_duration

        if duration > 0:
            self.is_animating = True
            self.leaving_index = previous
            self._schedule_leave(previous, duration)
            if not self.options.await_completion:
                self._release_timer = self.scheduler.call_later(duration, self._release)

        self._emit(SlideActivated(
            index, previous, immediate=False,
            animation=self.options.animation_type if duration > 0 else "none",
            animate_text=self.options.enable_text_animation,
        ))
        if duration <= 0:
            self._emit(SlideLeft(previous))

        self._restart_cycle()
        return True

    def next(self) -> bool:
        if len(self.slides) <= 1:
            return False
        return self.go_to((self.current_index + 1) % len(self.slides))

    def prev(self) -> bool:
        if len(self.slides) <= 1:
            return False
        return self.go_to((self.current_index - 1) % len(self.slides))

    def complete_transition(self) -> bool:
        """Renderer signal that the visual transition has ended."""
        if not self.is_animating:
            return False
        self._release()
        return True

    def _release(self) -> None:
        if self._release_timer is not None:
            self._release_timer.cancel()
            self._release_timer = None
        self.is_animating = False
        self._emit(TransitionFinished(self.current_index))

    def _schedule_leave(self, index: int, duration: float) -> None:
        old = self._leave_timers.pop(index, None)
        if old is not None:
            old.cancel()
        self._leave_timers[index] = self.scheduler.call_later(
            duration, lambda: self._finish_leaving(index)
        )

    def _finish_leaving(self, index: int) -> None:
        self._leave_timers.pop(index, None)
        if self.leaving_index == index:
            self.leaving_index = None
        self._emit(SlideLeft(index))

    # ---- autoplay ----

    def pause(self, current_width: Optional[float] = None,
              container_width: Optional[float] = None) -> None:
        fraction = self.progress()
        if current_width is not None and container_width:
            fraction = max(0.0, min(1.0, current_width / container_width))
        self._cancel_autoplay()
        self.is_paused = True
        self._set_progress(fraction, running=False)

    def resume(self) -> None:
        if not self.is_paused:
            return
        self.is_paused = False
        if self._can_autoplay() and self._autoplay_timer is None:
            fraction = self._progress_from
            self._set_progress(fraction, running=True)
            self._schedule_advance((1.0 - fraction) * self.options.autoplay_interval)

    def _restart_cycle(self) -> None:
        # any navigation replaces the pending advance instead of stacking one
        self._cancel_autoplay()
        if self._can_autoplay():
            self._set_progress(0.0, running=True)
            self._schedule_advance(self.options.autoplay_interval)
        else:
            self._set_progress(0.0, running=False)

    def _schedule_advance(self, delay: float) -> None:
        self._autoplay_timer = self.scheduler.call_later(max(0.0, delay), self._advance)

    def _advance(self) -> None:
        self._autoplay_timer = None
        if not self.next() and self._autoplay_timer is None and self._can_autoplay():
            self._restart_cycle()

    def _cancel_autoplay(self) -> None:
        if self._autoplay_timer is not None:
            self._autoplay_timer.cancel()
            self._autoplay_timer = None

    def _set_progress(self, fraction: float, running: bool) -> None:
        self._progress_from = fraction
        self._progress_started = self.scheduler.now() if running else None
        if self.options.enable_progress_bar:
            remaining = (1.0 - fraction) * self.options.autoplay_interval
            self._emit(ProgressChanged(fraction, running, remaining))

    def _cancel_timers(self) -> None:
        self._cancel_autoplay()
        if self._release_timer is not None:
            self._release_timer.cancel()
            self._release_timer = None
        for timer in self._leave_timers.values():
            timer.cancel()
        self._leave_timers.clear()

    # ---- input ----

    def handle_key(self, key: str) -> bool:
        if key == "ArrowLeft":
            self.prev()
            return True
        if key == "ArrowRight":
            self.next()
            return True
        return False

    def handle_swipe(self, start: Point, end: Point) -> bool:
        direction = classify_swipe(start, end)
        if direction == NEXT:
            return self.next()
        if direction == PREV:
            return self.prev()
        return False

    def pointer_enter(self) -> None:
        if self.options.pause_on_hover:
            self.pause()

    def pointer_leave(self) -> None:
        if self.options.pause_on_hover:
            self.resume()
        if self.options.enable_parallax:
            self._emit(ParallaxMoved(0.0, 0.0))

    def pointer_move(self, x: float, y: float, width: float, height: float) -> Optional[Point]:
        if not self.options.enable_parallax or not self.slides:
            return None
        offset = parallax_offset(x, y, width, height, self.options.parallax_speed)
        self._emit(ParallaxMoved(*offset))
        return offset

    def image_failed(self, index: int) -> Optional[str]:
        if not 0 <= index < len(self.slides):
            return None
        self._emit(SlideImageFailed(index, self.options.placeholder_image))
        return self.options.placeholder_image

    def destroy(self) -> None:
        self._cancel_timers()
        self.slides = []
        self.current_index = 0
        self.leaving_index = None
        self.is_animating = False
