from unittest import TestCase
import re
from binheap import validation as mdl


class TestCheckOption(TestCase):
    def test_check_option(self):
        self.assertEqual(mdl.check_option("heap_type", "min", ["min", "max"]), "min")
        self.assertIsNone(
            mdl.check_option("heap_type", None, ["min", "max"], ignore_list=[None])
        )
        with self.assertRaisesRegex(
            mdl.InvalidOptionValue,
            re.escape("Invalid option value heap_type=both. Use one of ['min', 'max']."),
        ):
            mdl.check_option("heap_type", "both", ["min", "max"])
