"""Configuration settings"""

import os
from cement import init_defaults

CONFIGFILE = os.path.join(os.path.expanduser("~"), ".pm", "pm.conf")

config_defaults = init_defaults('project', 'analysis', 'config', 'log')
config_defaults['project']['root']  = os.curdir
config_defaults['project']['author']  = os.getenv("USER", "")
config_defaults['project']['container_image']  = "docker://continuumio/miniconda3"
config_defaults['analysis']['format']  = "Rmd"
config_defaults['analysis']['digits']  = 4
config_defaults['config']['ignore'] = [r"\.", "tmp"]
config_defaults['log']['level']  = "INFO"
config_defaults['log']['file']  = None

CONFIG_EXAMPLE = """Configuration example: save as ~/.pm/pm.conf and modify at will.

    [config]
    ignore = \\.
             tmp

    [project]
    root = /path/to/projects
    author = J. Doe
    container_image = docker://continuumio/miniconda3

    [analysis]
    format = Rmd
    digits = 4

    [log]
    level = INFO
    file = ~/log/pm.log
"""
