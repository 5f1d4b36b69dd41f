import unittest

from iometer_JsonReporter.core.classify import (
    LineKind, classify_line, parse_access_spec_name, parse_access_spec_row,
    parse_test_header, peek, result_kind,
)
from iometer_JsonReporter.core.model import TargetKind


class MarkerClassificationTests(unittest.TestCase):
    def test_markers_are_recognised_in_any_section(self):
        for in_specs in (False, True):
            self.assertIs(LineKind.TEST_HEADER, classify_line("'Test Type,Test Description", in_specs))
            self.assertIs(LineKind.TIME_STAMP, classify_line("'Time Stamp", in_specs))
            self.assertIs(LineKind.ACCESS_SPECS_START, classify_line("'Access specifications", in_specs))
            self.assertIs(LineKind.ACCESS_SPECS_END, classify_line("'End access specifications", in_specs))

    def test_markers_are_case_sensitive(self):
        self.assertIs(LineKind.NONE, classify_line("'time stamp", False))
        self.assertIs(LineKind.NONE, classify_line("Time Stamp", False))
        self.assertIs(LineKind.NONE, classify_line("'Access Specifications", False))

    def test_name_marker_only_inside_access_specs(self):
        marker = "'Access specification name,default assignment"
        self.assertIs(LineKind.NONE, classify_line(marker, False))
        self.assertIs(LineKind.ACCESS_SPEC_NAME, classify_line(marker, True))


class AccessSpecRowTests(unittest.TestCase):
    def test_eight_integers_with_trailing_comma(self):
        line = "4096,100,67,100,0,1,0,0,"
        self.assertIs(LineKind.ACCESS_SPEC_ROW, classify_line(line, True))
        self.assertEqual((4096, 100, 67, 100, 0, 1, 0, 0), parse_access_spec_row(line))

    def test_trailing_comma_may_be_missing(self):
        self.assertEqual((512, 100, 0, 0, 0, 1, 512, 0), parse_access_spec_row("512,100,0,0,0,1,512,0"))

    def test_rows_outside_section_are_ignored(self):
        self.assertIs(LineKind.NONE, classify_line("4096,100,67,100,0,1,0,0,", False))

    def test_wrong_arity_or_negative_values_do_not_match(self):
        self.assertIsNone(parse_access_spec_row("4096,100,67,100,0,1,0,"))
        self.assertIsNone(parse_access_spec_row("4096,100,67,100,0,1,0,0,0,"))
        self.assertIsNone(parse_access_spec_row("4096,-1,67,100,0,1,0,0,"))
        self.assertIs(LineKind.NONE, classify_line("4096,100,67,100,0,1,0,", True))


class ResultRowTests(unittest.TestCase):
    def test_kinds_by_first_field(self):
        self.assertIs(TargetKind.ALL, result_kind("ALL,All,spec,,,,1.0"))
        self.assertIs(TargetKind.MANAGER, result_kind("MANAGER,HOST,spec"))
        self.assertIs(TargetKind.PROCESSOR, result_kind("PROCESSOR,CPU 0"))
        self.assertIs(TargetKind.WORKER, result_kind("WORKER,Worker 1"))
        self.assertIs(LineKind.RESULT_ROW, classify_line("WORKER,Worker 1", True))

    def test_first_field_must_match_exactly(self):
        for line in ("all,All", "ALLX,All", "DISK,PHYSICALDRIVE:1", "'ALL", " ALL,x", "ALL"):
            with self.subTest(line=line):
                expected = TargetKind.ALL if line == "ALL" else None
                self.assertIs(expected, result_kind(line))


class LookaheadTests(unittest.TestCase):
    def test_test_header_value(self):
        self.assertEqual((0, "my test, with commas"), parse_test_header("0,my test, with commas"))
        self.assertIsNone(parse_test_header("zero,my test"))
        self.assertIsNone(parse_test_header(None))

    def test_access_spec_name_value(self):
        self.assertEqual(("4K; 100% Read; 0% random", "0"),
                         parse_access_spec_name("4K; 100% Read; 0% random,0"))
        self.assertIsNone(parse_access_spec_name("4K read,NONE"))
        self.assertIsNone(parse_access_spec_name(",1"))

    def test_peek_trims_and_stops_at_end(self):
        lines = ["'Time Stamp", "  2024-01-01 00:00:00  "]
        self.assertEqual("2024-01-01 00:00:00", peek(lines, 0))
        self.assertIsNone(peek(lines, 1))


if __name__ == "__main__":
    unittest.main()
