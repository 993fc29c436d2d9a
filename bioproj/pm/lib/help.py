"""help formatting"""
from argparse import HelpFormatter

class PmHelpFormatter(HelpFormatter):
    """Keep the line breaks of controller descriptions and make room
    for long option names such as --config-example."""
    def __init__(self, prog, indent_increment=2, max_help_position=32, width=None):
        super(PmHelpFormatter, self).__init__(prog, indent_increment, max_help_position, width)

    def _fill_text(self, text, width, indent):
        return ''.join([indent + line for line in text.splitlines(True)])
