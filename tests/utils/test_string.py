import unittest

from bioproj.utils.string import replace_ascii, slugify, strip_extensions

class TestString(unittest.TestCase):
    def test_replace_ascii(self):
        self.assertEqual(replace_ascii(u"Åström"), "Astrom")
        self.assertEqual(replace_ascii(u"naïve café"), "naive cafe")

    def test_slugify(self):
        self.assertEqual(slugify("RNA-seq: QC, round 2"), "rna_seq_qc_round_2")
        self.assertEqual(slugify("RNA-seq QC", sep="-"), "rna-seq-qc")
        self.assertEqual(slugify("???"), "")

    def test_strip_extensions(self):
        self.assertEqual(strip_extensions("0001_qc.nb.html", [".html", ".nb.html"]), ("0001_qc", ".nb.html"))
        self.assertEqual(strip_extensions("0001_qc.html", [".html", ".nb.html"]), ("0001_qc", ".html"))
        self.assertEqual(strip_extensions("0001_qc.Rmd", [".html"]), ("0001_qc.Rmd", None))
        self.assertEqual(strip_extensions("0001_qc.Rmd", []), ("0001_qc.Rmd", None))
        self.assertEqual(strip_extensions("0001_qcxmd", [".md"]), ("0001_qcxmd", None))
