"""
Analysis document library

Seeds new analysis documents. Every document opens with the same
header (Goal, Hypothesis, Resources, Plan); text formats are rendered
directly from templates, notebooks are assembled around the rendered
header.
"""
import json
import yaml

from bioproj.templates import render

NBFORMAT = 4
NBFORMAT_MINOR = 5

OUTPUT_FORMATS = {
    'Rmd' : {'output' : 'html_document'},
    'qmd' : {'format' : 'html'},
    }

def _notebook(title, author, date, goal):
    header = render("analysis_header.md.mako", goal=goal)
    cells = [
        {"cell_type": "markdown", "metadata": {}, "source": _lines("# {}\n\n{}, {}\n".format(title, author, date))},
        {"cell_type": "markdown", "metadata": {}, "source": _lines(header)},
        {"cell_type": "markdown", "metadata": {}, "source": ["# Analysis"]},
        {"cell_type": "code", "execution_count": None, "metadata": {}, "outputs": [], "source": []},
        {"cell_type": "markdown", "metadata": {}, "source": ["# Conclusions"]},
        ]
    ## nbformat 4.5 requires cell ids
    for i, cell in enumerate(cells, 1):
        cell["id"] = "cell-{}".format(i)
    nb = {
        "cells": cells,
        "metadata": {
            "kernelspec": {"display_name": "Python 3", "language": "python", "name": "python3"},
            "language_info": {"name": "python"},
            },
        "nbformat": NBFORMAT,
        "nbformat_minor": NBFORMAT_MINOR,
        }
    return json.dumps(nb, indent=1) + "\n"

def _lines(text):
    """Split text into notebook source lines"""
    return text.strip("\n").splitlines(True)

def render_analysis(fmt, title, author="", date="", goal=""):
    """Render a new analysis document.

    :param fmt: document format (Rmd, qmd, md or ipynb)
    :param title: document title
    :param author: author
    :param date: creation date
    :param goal: goal of the analysis

    :returns: document text
    """
    if fmt == "ipynb":
        return _notebook(title, author, date, goal)
    return render("analysis.{}.mako".format(fmt), title=title, author=author, date=date, goal=goal,
                  front_matter=front_matter(fmt, title, author, date))

def front_matter(fmt, title, author="", date=""):
    """YAML front matter for R Markdown and Quarto documents, without
    the enclosing '---' lines"""
    meta = {"title" : title, "author" : author, "date" : date}
    meta.update(OUTPUT_FORMATS.get(fmt, {}))
    return yaml.safe_dump(meta, default_flow_style=False, sort_keys=False, allow_unicode=True)
