"""
CSS Parser Module
Parses stylesheet text into rules and declarations for class suggestion.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import tinycss2

from .exceptions import ParseError

logger = logging.getLogger(__name__)

# Group at-rules whose block holds ordinary style rules
CONDITIONAL_AT_RULES = {'media', 'supports', 'layer', 'container', 'document'}


@dataclass(frozen=True)
class Declaration:
    property: str
    value: str
    selector: str
    file_path: str
    important: bool = False


@dataclass(frozen=True)
class CSSRule:
    selector: str
    declarations: Tuple[Declaration, ...]
    source: str
    media: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            'selector': self.selector,
            'source': self.source,
            'media': list(self.media),
            'declarations': [
                {'property': d.property, 'value': d.value, 'important': d.important}
                for d in self.declarations
            ],
        }


def _find_error(tokens) -> Optional[object]:
    """Return the first tinycss2 error node among tokens, searching nested blocks."""
    for token in tokens or []:
        if token.type == 'error':
            return token
        nested = getattr(token, 'content', None) or getattr(token, 'arguments', None)
        if isinstance(nested, list):
            found = _find_error(nested)
            if found is not None:
                return found
    return None


def _raise_for(error, context: str):
    raise ParseError(
        f"{context}: {error.message}",
        line=error.source_line,
        column=error.source_column,
        kind=error.kind,
    )


def nest_selector(parent: str, child: str) -> str:
    """Resolve a nested rule's selector against its parent's."""
    if ',' in parent:
        parent = f":is({parent})"
    if '&' in child:
        return child.replace('&', parent)
    return f"{parent} {child}"


def _parse_contents(rule, selector: str, file_path: str):
    """Split a style rule's block into its declarations and its nested rules."""
    declarations = []
    nested = []
    for node in tinycss2.parse_blocks_contents(rule.content, skip_comments=True, skip_whitespace=True):
        if node.type == 'error':
            _raise_for(node, f"Invalid declaration in '{selector}'")
        if node.type == 'qualified-rule':
            nested.append(node)
            continue
        if node.type != 'declaration':
            # Nested at-rules inside a style rule carry no declarations of their own
            logger.debug(f"Skipping {node.type} inside '{selector}'")
            continue
        error = _find_error(node.value)
        if error is not None:
            _raise_for(error, f"Invalid value for '{node.lower_name}' in '{selector}'")
        declarations.append(Declaration(
            property=node.lower_name,
            value=tinycss2.serialize(node.value).strip(),
            selector=selector,
            file_path=file_path,
            important=node.important,
        ))
    return tuple(declarations), nested


def _walk(nodes, file_path: str, media: Tuple[str, ...], rules: List[CSSRule], parent: str = ''):
    for node in nodes:
        if node.type == 'error':
            _raise_for(node, 'Invalid stylesheet')
        if node.type == 'qualified-rule':
            error = _find_error(node.prelude)
            if error is not None:
                _raise_for(error, 'Invalid selector')
            selector = tinycss2.serialize(node.prelude).strip()
            if not selector:
                raise ParseError(
                    'Rule without a selector',
                    line=node.source_line,
                    column=node.source_column,
                    kind='empty-selector',
                )
            if parent:
                selector = nest_selector(parent, selector)
            declarations, nested = _parse_contents(node, selector, file_path)
            rules.append(CSSRule(
                selector=selector,
                declarations=declarations,
                source=node.serialize().strip(),
                media=media,
            ))
            # Nested rules follow their parent, in source order
            _walk(nested, file_path, media, rules, parent=selector)
        elif node.type == 'at-rule' and node.lower_at_keyword in CONDITIONAL_AT_RULES and node.content is not None:
            condition = f"@{node.lower_at_keyword} {tinycss2.serialize(node.prelude).strip()}".strip()
            children = tinycss2.parse_rule_list(node.content, skip_comments=True, skip_whitespace=True)
            _walk(children, file_path, media + (condition,), rules, parent)
        elif node.type == 'at-rule':
            logger.debug(f"Skipping @{node.lower_at_keyword} rule")


def parse_rules(css: str, file_path: str = '') -> List[CSSRule]:
    """
    Parse CSS text into an ordered list of style rules.

    Rules nested in conditional group at-rules (@media, @supports, ...) are
    returned in source order with their enclosing conditions in ``media``.
    Nested style rules follow their parent with the selector resolved
    against it (``&`` replaced, or a descendant combinator added).
    Any syntax error aborts the whole parse with ParseError.
    """
    logger.debug(f"Parsing CSS for {file_path or '<memory>'}, content length: {len(css)}")
    stylesheet = tinycss2.parse_stylesheet(css, skip_comments=True, skip_whitespace=True)
    rules: List[CSSRule] = []
    _walk(stylesheet, file_path, (), rules)
    logger.debug(f"Parsed {len(rules)} rules from {file_path or '<memory>'}")
    return rules
