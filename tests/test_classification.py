import unittest

from labdecoder.classification import classify_status, compare_to_range
from labdecoder.models import RangeThreshold
from labdecoder.reference import (
    CATEGORIES,
    CRITICAL_CEILINGS,
    DEFAULT_RANGES,
    category_of,
    critical_ceiling,
    default_range,
    reference_range_text,
)


class TestExplicitRange(unittest.TestCase):
    def test_inside_range_is_normal(self):
        self.assertEqual(classify_status("SODIUM", 140, 136, 145), "normal")

    def test_bounds_are_inclusive(self):
        self.assertEqual(classify_status("SODIUM", 136, 136, 145), "normal")
        self.assertEqual(classify_status("SODIUM", 145, 136, 145), "normal")

    def test_below_and_above(self):
        self.assertEqual(classify_status("SODIUM", 130, 136, 145), "low")
        self.assertEqual(classify_status("SODIUM", 150, 136, 145), "high")

    def test_explicit_range_skips_critical_ceiling(self):
        # 450 is above the glucose ceiling, but an explicit range was given
        self.assertEqual(classify_status("GLUCOSE", 450, 70, 99), "high")

    def test_zero_lower_bound_counts_as_explicit(self):
        self.assertEqual(classify_status("CHOLESTEROL", 350, 0, 400), "normal")


class TestDefaultRange(unittest.TestCase):
    def test_critical_ceiling(self):
        self.assertEqual(classify_status("GLUCOSE", 401), "critical")
        self.assertEqual(classify_status("CREATININE", 3.5), "critical")
        self.assertEqual(classify_status("LDL CHOLESTEROL", 200), "critical")

    def test_value_at_ceiling_is_not_critical(self):
        self.assertEqual(classify_status("BUN", 50), "high")

    def test_default_range(self):
        self.assertEqual(classify_status("GLUCOSE", 95), "normal")
        self.assertEqual(classify_status("GLUCOSE", 60), "low")
        self.assertEqual(classify_status("GLUCOSE", 150), "high")
        self.assertEqual(classify_status("LDL CHOLESTEROL", 110), "high")

    def test_single_bound_falls_back_to_defaults(self):
        self.assertEqual(classify_status("GLUCOSE", 450, min_range=70), "critical")
        self.assertEqual(classify_status("TSH", 5.0, max_range=10), "high")

    def test_parameter_without_ceiling_is_never_critical(self):
        self.assertEqual(classify_status("SODIUM", 1000), "high")

    def test_unknown_parameter_is_normal(self):
        self.assertEqual(classify_status("FERRITIN", 9999), "normal")

    def test_short_name_does_not_match_knowledge_base(self):
        # "LDL" from the keyword pass is not the "LDL CHOLESTEROL" key
        self.assertEqual(classify_status("LDL", 250), "normal")


class TestCompareToRange(unittest.TestCase):
    def test_open_ended_ranges(self):
        self.assertEqual(compare_to_range(250, RangeThreshold(max=200)), "high")
        self.assertEqual(compare_to_range(-5, RangeThreshold(max=200)), "normal")
        self.assertEqual(compare_to_range(35, RangeThreshold(min=40)), "low")
        self.assertEqual(compare_to_range(1e6, RangeThreshold()), "normal")


class TestReferenceKnowledge(unittest.TestCase):
    def test_reference_range_text(self):
        self.assertEqual(reference_range_text("GLUCOSE", "mg/dL"), "70-99 mg/dL")
        self.assertEqual(reference_range_text("HEMOGLOBIN A1C", "%"), "<5.7%")
        self.assertEqual(reference_range_text("FERRITIN", "ng/mL"), "Normal")

    def test_categories(self):
        self.assertEqual(category_of("GLUCOSE"), "Diabetes")
        self.assertEqual(category_of("TRIGLYCERIDES"), "Lipid Panel")
        self.assertEqual(category_of("BUN"), "Kidney Function")
        self.assertEqual(category_of("POTASSIUM"), "Electrolytes")
        self.assertEqual(category_of("VITAMIN D"), "Vitamins")
        self.assertEqual(category_of("TSH"), "Thyroid Function")
        self.assertEqual(category_of("TOTAL"), "General")

    def test_default_range_and_ceiling(self):
        self.assertEqual(default_range("CREATININE"), RangeThreshold(min=0.7, max=1.3))
        self.assertIsNone(default_range("HEMOGLOBIN A1C"))
        self.assertEqual(critical_ceiling("TRIGLYCERIDES"), 500)
        self.assertIsNone(critical_ceiling("SODIUM"))

    def test_tables_are_read_only(self):
        for table in (CATEGORIES, DEFAULT_RANGES, CRITICAL_CEILINGS):
            with self.assertRaises(TypeError):
                table["NEW"] = None


if __name__ == '__main__':
    unittest.main(verbosity=2)
