import unittest

from font_icons_scraper.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, Settings


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        settings = Settings.from_env({})
        self.assertEqual(settings.timeout, DEFAULT_TIMEOUT)
        self.assertEqual(settings.user_agent, DEFAULT_USER_AGENT)
        self.assertEqual(settings.default_depth, 0)

    def test_overrides(self):
        settings = Settings.from_env(
            {
                "FONT_ICONS_TIMEOUT": "2.5",
                "FONT_ICONS_USER_AGENT": "crawler/2",
                "FONT_ICONS_DEPTH": " 3 ",
            }
        )
        self.assertEqual(settings, Settings(timeout=2.5, user_agent="crawler/2", default_depth=3))

    def test_blank_values_use_defaults(self):
        settings = Settings.from_env({"FONT_ICONS_TIMEOUT": "", "FONT_ICONS_USER_AGENT": ""})
        self.assertEqual(settings, Settings())

    def test_invalid_values(self):
        with self.assertRaisesRegex(ValueError, "FONT_ICONS_TIMEOUT"):
            Settings.from_env({"FONT_ICONS_TIMEOUT": "soon"})
        with self.assertRaisesRegex(ValueError, "FONT_ICONS_DEPTH"):
            Settings.from_env({"FONT_ICONS_DEPTH": "-1"})


if __name__ == "__main__":
    unittest.main()
