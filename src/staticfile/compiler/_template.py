"""Kida template for generated data modules.

Every file becomes one parenthesized run of bytes literals plus one
``must_register`` call, so importing the module registers each file
exactly once.
"""

MODULE_TEMPLATE = '''\
# Code generated by staticfile compile. DO NOT EDIT.
#
# Command: staticfile compile {{ command }}
"""Static file data for the ``{{ package }}`` package.

Importing this module registers {{ count }} file(s) with staticfile.
"""

from staticfile import must_register
{% for f in files %}

# {{ f.size }} bytes generated from {{ f.source_text }}
{{ f.var }} = (
{{ f.data }}
)
must_register({{ f.name_literal }}, {{ f.var }})
{% end %}

# END OF GENERATED DATA
'''
