from __future__ import annotations

import unittest

from lazydisk.runtime.effects import FLASH_SECONDS, UiEffects
from lazydisk.runtime.events import AppEvent


class UiEffectsTests(unittest.TestCase):
    def test_each_event_starts_its_flash(self) -> None:
        effects = UiEffects()

        self.assertTrue(effects.handle_event(AppEvent.PATH_CHANGE, 10.0))
        self.assertTrue(effects.handle_event(AppEvent.PATH_ERROR, 10.0))
        self.assertTrue(effects.handle_event(AppEvent.FILE_DELETED, 10.0))
        self.assertFalse(effects.handle_event(AppEvent.APP_EXIT, 10.0))

        self.assertTrue(effects.frame_around_current_path)
        self.assertTrue(effects.current_path_is_red)
        self.assertTrue(effects.frame_around_space_freed)

    def test_expire_clears_only_elapsed_flashes(self) -> None:
        effects = UiEffects()
        effects.handle_event(AppEvent.PATH_CHANGE, 10.0)
        effects.handle_event(AppEvent.FILE_DELETED, 10.1)

        self.assertFalse(effects.expire(10.0 + FLASH_SECONDS / 2))
        self.assertTrue(effects.expire(10.0 + FLASH_SECONDS))
        self.assertFalse(effects.frame_around_current_path)
        self.assertTrue(effects.frame_around_space_freed)

        self.assertTrue(effects.expire(11.0))
        self.assertFalse(effects.frame_around_space_freed)
        self.assertFalse(effects.expire(12.0))

    def test_loading_indicator_counts_up(self) -> None:
        effects = UiEffects()
        effects.increment_loading_progress_indicator()
        effects.increment_loading_progress_indicator()

        self.assertEqual(effects.loading_progress_indicator, 2)


if __name__ == "__main__":
    unittest.main()
