import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.prompts.language import (  # noqa: E402
    DUAL_LANGUAGE_SEPARATOR,
    Language,
    build_language_directive,
    language_catalog,
    resolve_language,
)


class SingleLanguageDirectiveTests(unittest.TestCase):
    def test_every_catalog_language_is_named_in_its_directive(self):
        for lang in Language:
            with self.subTest(lang=lang.value):
                directive = build_language_directive(lang.value)
                self.assertEqual(directive, f"You must respond only in {lang.display_name} language.")
                self.assertNotIn(DUAL_LANGUAGE_SEPARATOR, directive)

    def test_unknown_codes_fall_back_to_english(self):
        for selector in ("klingon", "", "   ", "fr", "english!"):
            with self.subTest(selector=selector):
                self.assertEqual(
                    build_language_directive(selector),
                    "You must respond only in English language.",
                )

    def test_none_falls_back_to_english(self):
        self.assertIn("English", build_language_directive(None))

    def test_lookup_ignores_case_and_whitespace(self):
        self.assertEqual(resolve_language(" Hindi "), Language.HINDI)
        self.assertIn("Tamil", build_language_directive("TAMIL"))


class DualLanguageDirectiveTests(unittest.TestCase):
    def test_compound_selector_requests_both_languages(self):
        directive = build_language_directive("telugu-english")

        self.assertIn("complete response in Telugu language", directive)
        self.assertIn("SAME complete response in simple English", directive)
        self.assertIn(f"\n{DUAL_LANGUAGE_SEPARATOR}\n", directive)
        self.assertIn("Both responses must cover the same information.", directive)
        self.assertLess(directive.index("Telugu"), directive.index("English"))

    def test_segments_are_capitalized_not_looked_up(self):
        directive = build_language_directive("swahili-gujarati")

        self.assertIn("Swahili", directive)
        self.assertIn("Gujarati", directive)
        self.assertNotIn("English", directive)

    def test_only_the_first_letter_changes(self):
        directive = build_language_directive("hINDI-eNGLISH")

        self.assertIn("HINDI language", directive)
        self.assertIn("simple ENGLISH", directive)

    def test_extra_segments_are_ignored(self):
        directive = build_language_directive("kannada-hindi-tamil")

        self.assertIn("Kannada", directive)
        self.assertIn("Hindi", directive)
        self.assertNotIn("Tamil", directive)

    def test_blank_segment_degrades_to_single_language(self):
        self.assertEqual(
            build_language_directive("marathi-"),
            "You must respond only in Marathi language.",
        )
        self.assertEqual(
            build_language_directive("-urdu"),
            "You must respond only in Urdu language.",
        )
        self.assertEqual(
            build_language_directive("-"),
            "You must respond only in English language.",
        )

    def test_blank_segment_uses_the_neighbouring_segment(self):
        self.assertEqual(
            build_language_directive("telugu--english"),
            "You must respond only in Telugu language.",
        )
        self.assertEqual(
            build_language_directive("-hindi-tamil"),
            "You must respond only in Hindi language.",
        )


class LanguageCatalogTests(unittest.TestCase):
    def test_catalog_lists_every_supported_language_with_native_label(self):
        catalog = language_catalog()

        self.assertEqual(catalog[0], Language.ENGLISH)
        self.assertEqual(len(catalog), 9)
        self.assertEqual(Language.TELUGU.native_name, "తెలుగు")
        self.assertTrue(all(lang.native_name for lang in catalog))


if __name__ == "__main__":
    unittest.main()
