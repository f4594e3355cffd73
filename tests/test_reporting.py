import unittest

import pandas as pd

from labdecoder.pipeline import parse_lab_text
from labdecoder.reporting import (
    RECORD_COLUMNS,
    categories,
    filter_and_sort,
    history_to_dataframe,
    records_to_dataframe,
    summarize_trend,
)
from labdecoder.samples import sample_records


class MiddleRandom:
    def random(self) -> float:
        return 0.5


REPORT_TEXT = """
GLUCOSE: 450 mg/dL
SODIUM: 130 mEq/L (136-145 mEq/L)
TSH: 2.1 mIU/L (0.4-4.0 mIU/L)
BUN: 25 mg/dL (7-20 mg/dL)
"""


class TestDataFrames(unittest.TestCase):
    def setUp(self):
        self.records = parse_lab_text(REPORT_TEXT, rng=MiddleRandom())

    def test_records_to_dataframe(self):
        df = records_to_dataframe(self.records)

        self.assertEqual(list(df.columns), RECORD_COLUMNS)
        self.assertEqual(df["name"].tolist(), ["GLUCOSE", "SODIUM", "TSH", "BUN"])
        self.assertEqual(df["status"].tolist(), ["critical", "low", "normal", "high"])

    def test_records_to_dataframe_empty(self):
        df = records_to_dataframe([])

        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), RECORD_COLUMNS)

    def test_history_to_dataframe(self):
        df = history_to_dataframe(self.records)

        self.assertEqual(df.shape, (7, 4))
        self.assertEqual(df.index.name, "date")
        self.assertEqual(df.index[0], pd.Timestamp("2024-01-01"))
        self.assertEqual(df["TSH"].iloc[-1], 2.1)

    def test_history_to_dataframe_selection(self):
        df = history_to_dataframe(self.records, names=["BUN"])

        self.assertEqual(list(df.columns), ["BUN"])
        self.assertTrue(history_to_dataframe(self.records, names=["MISSING"]).empty)


class TestFilterAndSort(unittest.TestCase):
    def setUp(self):
        self.records = parse_lab_text(REPORT_TEXT, rng=MiddleRandom())

    def test_sort_by_status_severity(self):
        ordered = filter_and_sort(self.records, sort_by="status")

        self.assertEqual([r.status for r in ordered], ["critical", "high", "low", "normal"])

    def test_sort_descending_by_name(self):
        ordered = filter_and_sort(self.records, sort_by="name", ascending=False)

        self.assertEqual([r.name for r in ordered], ["TSH", "SODIUM", "GLUCOSE", "BUN"])

    def test_filter_by_category(self):
        selected = filter_and_sort(sample_records(), category="Lipid Panel", sort_by="name")

        self.assertEqual([r.name for r in selected], ["LDL CHOLESTEROL", "TOTAL CHOLESTEROL"])

    def test_unknown_sort_key(self):
        with self.assertRaises(ValueError):
            filter_and_sort(self.records, sort_by="value")

    def test_categories_first_seen_order(self):
        self.assertEqual(categories(sample_records()), ["Diabetes", "Lipid Panel"])

    def test_reporting_helpers_exported_from_package(self):
        import labdecoder

        for name in ("records_to_dataframe", "history_to_dataframe", "filter_and_sort", "categories", "summarize_trend"):
            with self.subTest(name=name):
                self.assertIn(name, labdecoder.__all__)
                self.assertTrue(callable(getattr(labdecoder, name)))
        self.assertIs(labdecoder.categories, categories)


class TestTrendSummary(unittest.TestCase):
    def test_sample_glucose_trend(self):
        summary = summarize_trend(sample_records()[0])

        self.assertEqual(summary.first_value, 92)
        self.assertEqual(summary.last_value, 95)
        self.assertEqual(summary.change, 3)
        self.assertAlmostEqual(summary.percent_change, 3 / 92 * 100)
        self.assertEqual(summary.direction, "up")

    def test_sample_cholesterol_trend_down(self):
        summary = summarize_trend(sample_records()[1])

        self.assertEqual(summary.direction, "down")
        self.assertEqual(summary.change, -5)

    def test_flat_trend(self):
        record = parse_lab_text("BUN: 15 mg/dL", rng=MiddleRandom())[0]

        self.assertEqual(summarize_trend(record).direction, "flat")

    def test_too_short_history(self):
        record = sample_records()[0]
        record.history = record.history[-1:]

        self.assertIsNone(summarize_trend(record))


if __name__ == '__main__':
    unittest.main(verbosity=2)
