import re
import unittest

from utils import json_object, now_ms, or_default, sanitize_filename, stored_filename


class FilenameTests(unittest.TestCase):
    def test_sanitize_replaces_unsafe_characters(self):
        self.assertEqual(sanitize_filename("my report (v2).pdf"), "my_report__v2_.pdf")
        self.assertEqual(sanitize_filename("../etc/passwd"), ".._etc_passwd")
        self.assertEqual(sanitize_filename("naïve.txt"), "na_ve.txt")

    def test_sanitize_keeps_allowed_characters(self):
        self.assertEqual(sanitize_filename("A-z_0.9"), "A-z_0.9")

    def test_stored_filename_prefixes_timestamp(self):
        self.assertEqual(stored_filename("a b.png", 1700000000000), "1700000000000_a_b.png")

    def test_now_ms_is_epoch_milliseconds(self):
        ts = now_ms()
        self.assertIsInstance(ts, int)
        self.assertEqual(len(str(ts)), 13)
        self.assertTrue(re.fullmatch(r"\d+", stored_filename("x", ts).split("_")[0]))


class BodyDefaultTests(unittest.TestCase):
    def test_json_object_only_accepts_dicts(self):
        self.assertEqual(json_object({"a": 1}), {"a": 1})
        for payload in (None, [1, 2], "hi", 3):
            self.assertEqual(json_object(payload), {})

    def test_or_default_follows_falsy_scalars_only(self):
        for value in (None, False, 0, 0.0, ""):
            self.assertEqual(or_default(value, "me"), "me")
        for value in ([], {}, "x", 1, True):
            self.assertEqual(or_default(value, "me"), value)


if __name__ == "__main__":
    unittest.main()
