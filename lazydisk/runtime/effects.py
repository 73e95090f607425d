"""Short-lived visual effects triggered by app events."""

from __future__ import annotations

from dataclasses import dataclass

from .events import AppEvent

FLASH_SECONDS = 0.25


@dataclass
class UiEffects:
    """Timed highlight flags read by the renderer.

    Each flag is paired with a monotonic deadline; ``expire`` clears flags
    whose deadline passed.
    """

    frame_around_current_path: bool = False
    frame_around_current_path_until: float = 0.0
    current_path_is_red: bool = False
    current_path_is_red_until: float = 0.0
    frame_around_space_freed: bool = False
    frame_around_space_freed_until: float = 0.0
    loading_progress_indicator: int = 0

    def increment_loading_progress_indicator(self) -> None:
        self.loading_progress_indicator += 1

    def handle_event(self, event: AppEvent, now: float) -> bool:
        """Start the flash matching ``event``; return whether anything changed."""
        until = now + FLASH_SECONDS
        if event is AppEvent.PATH_CHANGE:
            self.frame_around_current_path = True
            self.frame_around_current_path_until = until
            return True
        if event is AppEvent.PATH_ERROR:
            self.current_path_is_red = True
            self.current_path_is_red_until = until
            return True
        if event is AppEvent.FILE_DELETED:
            self.frame_around_space_freed = True
            self.frame_around_space_freed_until = until
            return True
        return False

    def expire(self, now: float) -> bool:
        """Clear elapsed flashes and return whether any flag changed."""
        changed = False
        if self.frame_around_current_path and now >= self.frame_around_current_path_until:
            self.frame_around_current_path = False
            changed = True
        if self.current_path_is_red and now >= self.current_path_is_red_until:
            self.current_path_is_red = False
            changed = True
        if self.frame_around_space_freed and now >= self.frame_around_space_freed_until:
            self.frame_around_space_freed = False
            changed = True
        return changed


__all__ = ["FLASH_SECONDS", "UiEffects"]
