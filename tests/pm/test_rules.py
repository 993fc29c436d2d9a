import unittest

from bioproj.pm.lib.workflow import WorkflowError, list_rules, validate_rule_name, render_rule

SNAKEFILE = """
SAMPLES = {}

rule all:
    input: expand("data/{sample}.bam", sample=SAMPLES)

rule align :
    shell: "bwa mem"

# rule commented:
    rule indented_is_not_toplevel:
"""

class TestWorkflowRules(unittest.TestCase):
    def test_list_rules(self):
        self.assertEqual(list_rules(SNAKEFILE), ["all", "align"])
        self.assertEqual(list_rules(""), [])

    def test_validate_rule_name(self):
        self.assertEqual(validate_rule_name("count_reads", ["all"]), "count_reads")
        self.assertRaises(WorkflowError, validate_rule_name, "all", ["all"])
        self.assertRaises(WorkflowError, validate_rule_name, "9lives")
        self.assertRaises(WorkflowError, validate_rule_name, "if")
        self.assertRaises(WorkflowError, validate_rule_name, "a b")

    def test_render_rule(self):
        text = render_rule("count", input=["data/{sample}.bam"], shell="featureCounts -o {output} {input}")
        self.assertEqual(text, "\nrule count:\n    input:\n        'data/{sample}.bam',\n    shell:\n        'featureCounts -o {output} {input}'\n")
        self.assertEqual(list_rules(text), ["count"])

    def test_render_rule_quoting(self):
        """Quotes in commands are escaped"""
        text = render_rule("echo", shell="echo \"it's\"")
        self.assertIn("""        'echo "it\\'s"'\n""", text)

    def test_render_rule_needs_one_action(self):
        self.assertRaises(WorkflowError, render_rule, "count")
        self.assertRaises(WorkflowError, render_rule, "count", shell="x", script="scripts/x.py")

    def test_checkpoints(self):
        """Checkpoints share the rule namespace"""
        text = SNAKEFILE + "\ncheckpoint split_reads:\n    shell: 'split'\n"
        self.assertEqual(list_rules(text), ["all", "align", "split_reads"])
        self.assertRaises(WorkflowError, validate_rule_name, "split_reads", list_rules(text))

    def test_validate_rule_name_default(self):
        self.assertEqual(validate_rule_name("count"), "count")
        self.assertEqual(validate_rule_name("count", None), "count")
