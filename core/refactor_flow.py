"""
Refactor Flow Module
Coordinates class suggestion and patch generation for a single stylesheet.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .patch_generator import PatchGenerator
from .tailwind_suggester import Suggestion, TailwindSuggester

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = {
    'include_patches': True,
    'include_coverage': True,
    'include_recommendations': True,
    'branch_prefix': None,
    'context': None,
}

BOOLEAN_OPTIONS = ('include_patches', 'include_coverage', 'include_recommendations')

# Suggestions below this confidence are flagged for manual review
REVIEW_THRESHOLD = 75


def check_context(value) -> int:
    """Diff context must be a non-negative integer; booleans are rejected."""
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ValueError("'context' must be a non-negative integer")
    return value


def build_recommendations(suggestions: List[Suggestion], coverage: Optional[Dict]) -> List[str]:
    recommendations = []
    for suggestion in suggestions:
        if suggestion.confidence < REVIEW_THRESHOLD:
            selector = suggestion.original_css.split('{', 1)[0].strip()
            recommendations.append(
                f"Review '{selector}' manually: confidence {suggestion.confidence} "
                f"for {' '.join(suggestion.suggested_classes)}"
            )
    if coverage and coverage['unmatched_properties']:
        recommendations.append(
            "No utility mapping for: " + ', '.join(coverage['unmatched_properties'])
            + ". Keep these in a component class or use arbitrary values."
        )
    return recommendations


class RefactorFlow:
    def __init__(self, suggester: Optional[TailwindSuggester] = None,
                 patch_generator: Optional[PatchGenerator] = None,
                 branch_prefix: str = 'refactor', context: int = 3):
        self.suggester = suggester or TailwindSuggester()
        self.patch_generator = patch_generator or PatchGenerator()
        self.branch_prefix = branch_prefix
        self.context = context

    def _resolve_options(self, options: Optional[Dict]) -> Dict:
        options = dict(options or {})
        unknown = set(options) - set(DEFAULT_OPTIONS)
        if unknown:
            raise ValueError(f"Unknown refactor options: {', '.join(sorted(unknown))}")
        resolved = {**DEFAULT_OPTIONS, **options}
        for name in BOOLEAN_OPTIONS:
            if not isinstance(resolved[name], bool):
                raise ValueError(f"'{name}' must be a boolean")
        if resolved['branch_prefix'] is None:
            resolved['branch_prefix'] = self.branch_prefix
        elif not isinstance(resolved['branch_prefix'], str) or not resolved['branch_prefix'].strip():
            raise ValueError("'branch_prefix' must be a non-empty string")
        if resolved['context'] is None:
            resolved['context'] = self.context
        else:
            resolved['context'] = check_context(resolved['context'])
        return resolved

    def run(self, css: str, file_path: str, after: Optional[str] = None,
            options: Optional[Dict] = None) -> Dict:
        """
        Suggest utility classes for ``css`` and, when the rewritten file is
        given as ``after``, build the patch with its review artifacts.

        Raises ValueError for blank input or unknown options; ParseError and
        GenerationError propagate from the engine.
        """
        if not css or not css.strip():
            raise ValueError('CSS content cannot be empty')
        if not file_path or not file_path.strip():
            raise ValueError('File path cannot be empty')
        opts = self._resolve_options(options)
        logger.info(f"Refactoring {file_path} ({len(css)} characters)")

        suggestions = self.suggester.suggest(css, file_path)
        coverage = self.suggester.coverage(css, file_path) if opts['include_coverage'] else None

        patches = []
        if after is not None and opts['include_patches']:
            patches.append(self.patch_generator.create_patch(file_path, css, after, opts['context']))

        result = {
            'suggestions': [s.to_dict() for s in suggestions],
            'coverage': coverage,
            'recommendations': build_recommendations(suggestions, coverage) if opts['include_recommendations'] else [],
            'patches': [],
            'commit_message': None,
            'branch_name': None,
            'summary': None,
        }
        if patches:
            for patch in patches:
                entry = patch.to_dict()
                entry['validation'] = self.patch_generator.validate(patch).to_dict()
                entry['review'] = self.patch_generator.format_for_review(patch)
                result['patches'].append(entry)
            result['commit_message'] = self.patch_generator.commit_message(patches)
            result['branch_name'] = self.patch_generator.branch_name(opts['branch_prefix'])
            result['summary'] = self.patch_generator.merge_summary(patches)

        result['metadata'] = {
            'file_path': file_path,
            'original_size': len(css),
            'refactored_size': sum(len(patch.after) for patch in patches),
            # Percentage of declarations with a utility mapping
            'utilities_coverage': round(coverage['coverage'] * 100, 2) if coverage else None,
            'timestamp': datetime.now(timezone.utc).isoformat(),
        }
        return result
