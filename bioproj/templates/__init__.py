"""
Templates configuration

Mako templates used to seed project files. Note that in mako, lines
starting with '##' are comments and lines starting with '%' are
control lines; templates therefore use single '#' headings and '%%'
for literal percent signs at line start.
"""

import os
from mako.lookup import TemplateLookup

TEMPLATE_ROOT = os.path.join(os.path.abspath(os.path.dirname(__file__)), "tpl")

_lookup = TemplateLookup(directories=[TEMPLATE_ROOT], input_encoding="utf-8")

def get_template(name):
    """Get template by file name relative to TEMPLATE_ROOT"""
    return _lookup.get_template(name)

def render(template_name, **kw):
    """Render template template_name with keyword arguments kw"""
    return get_template(template_name).render(**kw)
