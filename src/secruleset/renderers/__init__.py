"""
Renderers for secruleset.

Output formatters: ruleset XML and the Rich terminal views.
"""

from secruleset.renderers.terminal import TerminalRenderer
from secruleset.renderers.xml_renderer import XmlRenderer

__all__ = [
    "TerminalRenderer",
    "XmlRenderer",
]
