import os
import unittest

from bioproj.pm.lib.samples import SampleMapError, parse_sample_map, format_sample_line, resolve_path, missing_data

class TestSampleMap(unittest.TestCase):
    def test_parse(self):
        lines = ["# sample\tpath\n",
                 "\n",
                 "P1_101\t/proj/raw/P1_101.fastq.gz\n",
                 "P1_102\tdata/P1_102.fastq.gz\tlane 2\n",
                 "  # indented comment\n"]
        samples = parse_sample_map(lines)
        self.assertEqual(list(samples.items()), [("P1_101", "/proj/raw/P1_101.fastq.gz"),
                                                 ("P1_102", "data/P1_102.fastq.gz")])

    def test_parse_errors(self):
        for lines, msg in [(["P1_101\n"], "line 1"),
                           (["P1_101\t\n"], "line 1"),
                           (["# c\n", "P1 101\tx\n"], "line 2"),
                           (["P1_101\tx\n", "P1_101\ty\n"], "duplicate sample name 'P1_101'")]:
            with self.assertRaises(SampleMapError) as cm:
                parse_sample_map(lines, source="samples.tsv")
            self.assertIn(msg, str(cm.exception))
            self.assertTrue(str(cm.exception).startswith("samples.tsv, line"))

    def test_format_sample_line(self):
        self.assertEqual(format_sample_line("P1_101", "data/x.fastq.gz"), "P1_101\tdata/x.fastq.gz\n")
        self.assertRaises(SampleMapError, format_sample_line, "P1 101", "x")
        self.assertRaises(SampleMapError, format_sample_line, "", "x")
        self.assertRaises(SampleMapError, format_sample_line, "P1_101", "")
        self.assertRaises(SampleMapError, format_sample_line, "P1_101", "a\tb")

    def test_format_parse(self):
        """Formatted lines parse back to the same mapping"""
        lines = [format_sample_line("P1_101", "/raw/a.fq"), format_sample_line("P1_102", "b.fq")]
        self.assertEqual(dict(parse_sample_map(lines)), {"P1_101" : "/raw/a.fq", "P1_102" : "b.fq"})

    def test_resolve_path(self):
        self.assertEqual(resolve_path("/raw/a.fq", "/proj/p1"), "/raw/a.fq")
        self.assertEqual(resolve_path("data/../lib/a.fq", "/proj/p1"), "/proj/p1/lib/a.fq")
        self.assertEqual(resolve_path("~/a.fq", "/proj/p1"), os.path.expanduser("~/a.fq"))

    def test_missing_data(self):
        here = os.path.dirname(os.path.abspath(__file__))
        samples = {"P1_101" : os.path.basename(__file__), "P1_102" : "no_such_file.fq"}
        self.assertEqual(missing_data(samples, here), [("P1_102", os.path.join(here, "no_such_file.fq"))])

    def test_sample_names(self):
        for name in ["#P1", '"P1', 'P1"', "P1\t"]:
            self.assertRaises(SampleMapError, format_sample_line, name, "x.fq")

    def test_parse_quotes(self):
        """Quotes are ordinary characters"""
        samples = parse_sample_map(['P1_101\tdata/"odd name".fq\n', "P1_102\tb.fq\n"])
        self.assertEqual(list(samples.items()), [("P1_101", 'data/"odd name".fq'), ("P1_102", "b.fq")])
