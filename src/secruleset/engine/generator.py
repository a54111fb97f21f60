"""
Ruleset generator, the core of secruleset.

Builds a phpcs ruleset that extends the CommonSecurity standard with
project-specific exclusions and extra rule references, then writes it
out as XML.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from xml.dom.minidom import Document, Element, getDOMImplementation

from secruleset.domain.models import DEFAULT_OUTPUT_PATH, GenerationResult, RulesetRequest
from secruleset.renderers.xml_renderer import XmlRenderer

logger = logging.getLogger(__name__)

# Anything outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    "[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def generate_ruleset(
    exclusions: Mapping[str, str] | None = None,
    custom_rules: Sequence[str] | None = None,
    output_path: Path | str = DEFAULT_OUTPUT_PATH,
) -> GenerationResult:
    """
    Generate a project ruleset and write it to output_path.

    This is the primary public API.

    Args:
        exclusions: Function name to justification. An empty justification
            suppresses the explanatory comment for that function.
        custom_rules: Rule references appended verbatim, in order.
        output_path: File to overwrite with the generated XML.

    Returns:
        GenerationResult describing what was written.

    Raises:
        RulesetWriteError: If the output file cannot be written.

    Example:
        >>> generate_ruleset({"exec": "Needed by deploy scripts"})
        >>> generate_ruleset(custom_rules=["Generic.PHP.DeprecatedFunctions"])
    """
    return RulesetGenerator().generate(exclusions, custom_rules, output_path)


class RulesetGenerator:
    """
    Assembles ruleset documents.

    Document layout, in insertion order:
    description, the base CommonSecurity rule, then an optional
    exclusions section and an optional custom rules section. Empty
    sections are left out entirely.
    """

    RULESET_NAME = "Project Security Standards"
    DESCRIPTION = "Project-specific security standards with custom overrides"
    BASE_STANDARD = "CommonSecurity"
    FORBIDDEN_FUNCTIONS_SNIFF = "Generic.PHP.ForbiddenFunctions.Found"

    EXCLUSIONS_COMMENT = " Project-specific exclusions "
    CUSTOM_RULES_COMMENT = " Project-specific custom rules "

    def __init__(self, renderer: XmlRenderer | None = None) -> None:
        """
        Initialize the generator.

        Args:
            renderer: Serializer for finished documents.
        """
        self.renderer = renderer or XmlRenderer()

    def generate(
        self,
        exclusions: Mapping[str, str] | None = None,
        custom_rules: Sequence[str] | None = None,
        output_path: Path | str = DEFAULT_OUTPUT_PATH,
    ) -> GenerationResult:
        """Build the document and overwrite output_path with it."""
        exclusions = exclusions or {}
        custom_rules = custom_rules or []

        document = self.build_document(exclusions, custom_rules)
        size = self.renderer.render_to_file(document, output_path)

        return GenerationResult(
            output=str(output_path),
            exclusion_count=len(exclusions),
            custom_rule_count=len(custom_rules),
            bytes_written=size,
        )

    def generate_request(self, request: RulesetRequest) -> GenerationResult:
        """Generate from a validated request."""
        return self.generate(request.exclusions, request.custom_rules, request.output)

    def render(
        self,
        exclusions: Mapping[str, str] | None = None,
        custom_rules: Sequence[str] | None = None,
    ) -> bytes:
        """Build the document and return its XML without writing anything."""
        return self.renderer.render(self.build_document(exclusions or {}, custom_rules or []))

    def build_document(
        self,
        exclusions: Mapping[str, str],
        custom_rules: Sequence[str],
    ) -> Document:
        """
        Build the ruleset DOM.

        Args:
            exclusions: Function name to justification.
            custom_rules: Extra rule references.

        Returns:
            The assembled document.
        """
        document = getDOMImplementation().createDocument(None, "ruleset", None)
        ruleset = document.documentElement
        ruleset.setAttribute("name", self.RULESET_NAME)

        description = document.createElement("description")
        description.appendChild(document.createTextNode(self.DESCRIPTION))
        ruleset.appendChild(description)

        ruleset.appendChild(self._rule(document, self.BASE_STANDARD))

        if exclusions:
            ruleset.appendChild(document.createComment(self.EXCLUSIONS_COMMENT))

            for function, reason in exclusions.items():
                exclude_rule = self._rule(document, self.FORBIDDEN_FUNCTIONS_SNIFF)

                pattern = document.createElement("exclude-pattern")
                pattern.setAttribute("type", "relative")
                pattern.appendChild(document.createTextNode(_xml_text(f"*{function}*")))
                exclude_rule.appendChild(pattern)

                # The justification precedes the rule it documents
                if reason:
                    ruleset.appendChild(
                        document.createComment(
                            _comment_text(_xml_text(f" Excluded {function}: {reason} "))
                        )
                    )

                ruleset.appendChild(exclude_rule)
                logger.debug("Excluded %s from %s", function, self.FORBIDDEN_FUNCTIONS_SNIFF)

        if custom_rules:
            ruleset.appendChild(document.createComment(self.CUSTOM_RULES_COMMENT))

            for ref in custom_rules:
                ruleset.appendChild(self._rule(document, ref))
                logger.debug("Added custom rule %s", ref)

        return document

    def _rule(self, document: Document, ref: str) -> Element:
        rule = document.createElement("rule")
        rule.setAttribute("ref", _xml_text(ref))
        return rule


def _xml_text(text: str) -> str:
    """Drop characters that XML 1.0 does not allow in a document."""
    cleaned = _INVALID_XML_CHARS.sub("", text)
    if cleaned != text:
        logger.warning("Dropped characters not allowed in XML from %r", text)
    return cleaned


def _comment_text(text: str) -> str:
    """Make text safe for an XML comment, which may not contain '--'."""
    while "--" in text:
        text = text.replace("--", "- -")
    return text
