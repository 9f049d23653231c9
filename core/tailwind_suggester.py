"""
Tailwind Suggester Module
Maps CSS declarations onto Tailwind utility classes with a confidence score.
"""

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from tailwind.class_tables import (
    BORDER_RADIUS_SCALE,
    BORDER_STYLES,
    BOX_SHADOW_PRESETS,
    CATEGORIES,
    DISPLAY_KEYWORDS,
    FONT_SIZE_SCALE,
    FONT_WEIGHTS,
    POSITION_KEYWORDS,
    SIZE_KEYWORDS,
    SPACING_SCALE,
    arbitrary,
)
from .css_parser import CSSRule, Declaration, parse_rules
from .exceptions import GenerationError, ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartialResult:
    classes: Tuple[str, ...]
    confidence: int
    explanation: str
    category: str


@dataclass(frozen=True)
class Suggestion:
    original_css: str
    suggested_classes: List[str] = field(default_factory=list)
    confidence: int = 0
    explanation: str = ''
    category: str = 'custom'

    def to_dict(self) -> Dict:
        """Convert to the camelCase JSON shape consumed by the frontend."""
        return {
            'originalCSS': self.original_css,
            'suggestedClasses': list(self.suggested_classes),
            'confidence': self.confidence,
            'explanation': self.explanation,
            'category': self.category,
        }


# --- Value converters -------------------------------------------------------

def convert_keyword(value: str, keywords: Tuple[str, ...]) -> List[str]:
    keyword = value.lower()
    return [keyword] if keyword in keywords else []


def convert_spacing_value(value: str) -> str:
    return SPACING_SCALE.get(value, f"[{value}]")


def parse_spacing(value: str, prefix: str) -> List[str]:
    """Expand a margin/padding shorthand into per-side classes."""
    values = value.split()
    if len(values) == 1:
        return [f"{prefix}-{convert_spacing_value(values[0])}"]
    if len(values) == 2:
        return [
            f"{prefix}-y-{convert_spacing_value(values[0])}",
            f"{prefix}-x-{convert_spacing_value(values[1])}",
        ]
    if len(values) == 4:
        sides = ('t', 'r', 'b', 'l')
        return [f"{prefix}-{side}-{convert_spacing_value(v)}" for side, v in zip(sides, values)]
    # Three-value shorthand has no direct utility equivalent
    return []


def parse_color(value: str, prefix: str) -> List[str]:
    lowered = value.lower()
    if lowered == 'transparent':
        return [f"{prefix}-transparent"]
    if lowered == 'currentcolor':
        return [f"{prefix}-current"]
    if value.startswith('#') or lowered.startswith(('rgb', 'hsl')):
        return [arbitrary(prefix, value)]
    color_name = '-'.join(value.split()).lower()
    return [f"{prefix}-{color_name}"]


def parse_font_size(value: str) -> List[str]:
    return [FONT_SIZE_SCALE.get(value, arbitrary('text', value))]


def parse_font_weight(value: str) -> List[str]:
    weight = FONT_WEIGHTS.get(value.lower())
    return [weight] if weight else []


def parse_border(value: str) -> List[str]:
    lowered = value.lower()
    if lowered == 'none':
        return ['border-0']
    for keyword, cls in BORDER_STYLES:
        if keyword in lowered:
            return [cls]
    return []


def parse_border_radius(value: str) -> List[str]:
    return [BORDER_RADIUS_SCALE.get(value, arbitrary('rounded', value))]


def parse_box_shadow(value: str) -> List[str]:
    if value.lower() == 'none':
        return ['shadow-none']
    for offsets, cls in BOX_SHADOW_PRESETS:
        if offsets in value:
            return [cls]
    return [arbitrary('shadow', value)]


def parse_size(value: str, prefix: str) -> List[str]:
    suffix = SIZE_KEYWORDS.get(value.lower())
    if suffix:
        return [f"{prefix}-{suffix}"]
    return [arbitrary(prefix, value)]


# --- Property registry ------------------------------------------------------

@dataclass(frozen=True)
class PropertyRule:
    """One row of the property table: which classes a declaration maps to and how sure we are."""
    property: str
    label: str
    confidence: int
    category: str
    convert: Callable[[str], List[str]]

    def __post_init__(self):
        if self.category not in CATEGORIES:
            raise ValueError(f"Unknown category '{self.category}' for property '{self.property}'")
        if not 0 <= self.confidence <= 100:
            raise ValueError(f"Confidence for '{self.property}' must be between 0 and 100")

    def apply(self, value: str) -> PartialResult:
        return PartialResult(
            classes=tuple(self.convert(value)),
            confidence=self.confidence,
            explanation=f"{self.label} {value}",
            category=self.category,
        )


PROPERTY_RULES: Tuple[PropertyRule, ...] = (
    PropertyRule('display', 'Display', 90, 'layout', lambda v: convert_keyword(v, DISPLAY_KEYWORDS)),
    PropertyRule('position', 'Position', 90, 'layout', lambda v: convert_keyword(v, POSITION_KEYWORDS)),
    PropertyRule('margin', 'Margin', 85, 'spacing', lambda v: parse_spacing(v, 'm')),
    PropertyRule('padding', 'Padding', 85, 'spacing', lambda v: parse_spacing(v, 'p')),
    PropertyRule('color', 'Text color', 80, 'colors', lambda v: parse_color(v, 'text')),
    PropertyRule('background-color', 'Background color', 80, 'colors', lambda v: parse_color(v, 'bg')),
    PropertyRule('font-size', 'Font size', 85, 'typography', parse_font_size),
    PropertyRule('font-weight', 'Font weight', 90, 'typography', parse_font_weight),
    PropertyRule('text-align', 'Text align', 95, 'typography', lambda v: [f"text-{v}"]),
    PropertyRule('border', 'Border', 75, 'effects', parse_border),
    PropertyRule('border-radius', 'Border radius', 85, 'effects', parse_border_radius),
    PropertyRule('box-shadow', 'Box shadow', 70, 'effects', parse_box_shadow),
    PropertyRule('width', 'Width', 80, 'layout', lambda v: parse_size(v, 'w')),
    PropertyRule('height', 'Height', 80, 'layout', lambda v: parse_size(v, 'h')),
)

def round_half_up(number: float) -> int:
    return int(math.floor(number + 0.5))


class TailwindSuggester:
    def __init__(self, rules: Tuple[PropertyRule, ...] = PROPERTY_RULES):
        self.rules = {rule.property: rule for rule in rules}

    def analyze_declaration(self, declaration: Declaration) -> Optional[PartialResult]:
        """Evaluate one declaration against the property table; None when the property is unknown."""
        rule = self.rules.get(declaration.property)
        if rule is None:
            return None
        return rule.apply(declaration.value)

    def analyze_rule(self, rule: CSSRule) -> Optional[Suggestion]:
        """Aggregate the partial results of a rule into one suggestion."""
        if not rule.declarations:
            return None
        classes: List[str] = []
        total_confidence = 0
        fragments: List[str] = []
        category = 'custom'
        for declaration in rule.declarations:
            partial = self.analyze_declaration(declaration)
            if partial is None:
                continue
            classes.extend(partial.classes)
            total_confidence += partial.confidence
            fragments.append(partial.explanation)
            category = partial.category
        if not classes:
            return None
        # Unmatched declarations still count towards the denominator
        confidence = round_half_up(total_confidence / len(rule.declarations))
        return Suggestion(
            original_css=rule.source,
            suggested_classes=list(dict.fromkeys(classes)),
            confidence=confidence,
            explanation=' '.join(fragments),
            category=category,
        )

    def suggest(self, css: str, file_path: str) -> List[Suggestion]:
        """Parse CSS and return one suggestion per rule that maps onto at least one class."""
        try:
            rules = parse_rules(css, file_path)
            suggestions = []
            for rule in rules:
                suggestion = self.analyze_rule(rule)
                if suggestion:
                    suggestions.append(suggestion)
            logger.info(f"Suggested classes for {len(suggestions)} of {len(rules)} rules in {file_path}")
            return suggestions
        except ParseError as e:
            logger.error(f"Could not parse CSS in {file_path}: {str(e)}")
            raise
        except Exception as e:
            logger.error(f"Error suggesting Tailwind classes for {file_path}: {str(e)}", exc_info=True)
            raise GenerationError(f"Failed to suggest Tailwind classes: {str(e)}") from e

    def coverage(self, css: str, file_path: str) -> Dict:
        """Report how much of a stylesheet the property table can convert."""
        rules = parse_rules(css, file_path)
        total_declarations = 0
        matched_declarations = 0
        converted_rules = 0
        by_category = Counter()
        unmatched = []
        for rule in rules:
            for declaration in rule.declarations:
                total_declarations += 1
                partial = self.analyze_declaration(declaration)
                if partial is None:
                    unmatched.append(declaration.property)
                else:
                    matched_declarations += 1
                    by_category[partial.category] += 1
            if self.analyze_rule(rule):
                converted_rules += 1
        ratio = matched_declarations / total_declarations if total_declarations else 1.0
        return {
            'file_path': file_path,
            'total_rules': len(rules),
            'converted_rules': converted_rules,
            'total_declarations': total_declarations,
            'matched_declarations': matched_declarations,
            'coverage': round(ratio, 4),
            'by_category': dict(by_category),
            'unmatched_properties': sorted(set(unmatched)),
        }
