"""
Patch Generator Module
Builds unified diffs for rewritten files and derives review, commit and branch metadata.
"""

import difflib
import logging
import random
import string
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from comparator.report_builder import ReportBuilder
from .exceptions import GenerationError

logger = logging.getLogger(__name__)

BASE36_ALPHABET = string.digits + string.ascii_lowercase
DIFF_ALGORITHMS = ('positional', 'difflib')


@dataclass(frozen=True)
class Patch:
    file_path: str
    before: str
    after: str
    diff: str
    context: int = 3

    @property
    def before_line_count(self) -> int:
        return count_lines(self.before)

    @property
    def after_line_count(self) -> int:
        return count_lines(self.after)

    @property
    def line_delta(self) -> int:
        return self.after_line_count - self.before_line_count

    def to_dict(self) -> Dict:
        return {
            'filePath': self.file_path,
            'diff': self.diff,
            'before': self.before,
            'after': self.after,
        }


@dataclass
class ValidationResult:
    valid: bool = True
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {'valid': self.valid, 'errors': list(self.errors)}


def count_lines(text: str) -> int:
    # An empty string still counts as one (empty) line
    return len(text.split('\n'))


def positional_diff_body(before_lines: List[str], after_lines: List[str]) -> List[str]:
    """
    Compare two line lists index by index.

    Equal lines become context, differing lines a removal followed by an
    addition, and whatever remains of the longer list pure removals or
    additions. No alignment is attempted, so one inserted line turns every
    later line into a replacement pair.
    """
    body = []
    for index in range(max(len(before_lines), len(after_lines))):
        has_before = index < len(before_lines)
        has_after = index < len(after_lines)
        if has_before and has_after:
            if before_lines[index] == after_lines[index]:
                body.append(f" {before_lines[index]}")
            else:
                body.append(f"-{before_lines[index]}")
                body.append(f"+{after_lines[index]}")
        elif has_before:
            body.append(f"-{before_lines[index]}")
        else:
            body.append(f"+{after_lines[index]}")
    return body


def make_unified_diff(file_path: str, before: str, after: str, context: int = 3,
                      algorithm: str = 'positional') -> str:
    before_lines = before.split('\n')
    after_lines = after.split('\n')
    if algorithm == 'difflib':
        return '\n'.join(difflib.unified_diff(
            before_lines,
            after_lines,
            fromfile=f"a/{file_path}",
            tofile=f"b/{file_path}",
            n=context,
            lineterm='',
        ))
    header = (
        f"--- a/{file_path}\n"
        f"+++ b/{file_path}\n"
        f"@@ -1,{len(before_lines)} +1,{len(after_lines)} @@\n"
    )
    return header + '\n'.join(positional_diff_body(before_lines, after_lines))


class PatchGenerator:
    def __init__(self, algorithm: str = 'positional', report_builder: Optional[ReportBuilder] = None):
        if algorithm not in DIFF_ALGORITHMS:
            raise ValueError(f"Unknown diff algorithm '{algorithm}', expected one of {DIFF_ALGORITHMS}")
        self.algorithm = algorithm
        self.report_builder = report_builder or ReportBuilder()

    def diff(self, file_path: str, before: str, after: str, context: int = 3) -> str:
        """Return the unified diff between two versions of a file."""
        try:
            diff = make_unified_diff(file_path, before, after, context, self.algorithm)
            logger.debug(f"Generated {self.algorithm} diff for {file_path}, length: {len(diff)}")
            return diff
        except Exception as e:
            logger.error(f"Error generating patch for {file_path}: {str(e)}", exc_info=True)
            raise GenerationError(f"Failed to generate patch: {str(e)}") from e

    def create_patch(self, file_path: str, before: str, after: str, context: int = 3) -> Patch:
        return Patch(
            file_path=file_path,
            before=before,
            after=after,
            diff=self.diff(file_path, before, after, context),
            context=context,
        )

    def validate(self, patch: Patch) -> ValidationResult:
        """Check every structural rule and collect all violations."""
        errors = []
        if not patch.file_path:
            errors.append('File path is required')
        if not patch.diff:
            errors.append('Diff content is required')
        if not patch.before and not patch.after:
            errors.append('Either before or after content is required')
        if patch.before == patch.after:
            errors.append('Before and after content are identical')
        if errors:
            logger.warning(f"Patch for '{patch.file_path}' failed validation: {errors}")
        return ValidationResult(valid=not errors, errors=errors)

    def format_for_review(self, patch: Patch) -> str:
        try:
            return self.report_builder.render_review(patch, patch.line_delta)
        except Exception as e:
            logger.error(f"Error formatting patch for review: {str(e)}", exc_info=True)
            raise GenerationError(f"Failed to format patch for review: {str(e)}") from e

    def commit_message(self, patches: List[Patch]) -> str:
        # Absolute line-count deltas only; a rewrite of equal length counts as zero
        total_changes = sum(abs(patch.line_delta) for patch in patches)
        try:
            return self.report_builder.render_commit_message(
                [patch.file_path for patch in patches], total_changes)
        except Exception as e:
            logger.error(f"Error creating commit message: {str(e)}", exc_info=True)
            raise GenerationError(f"Failed to create commit message: {str(e)}") from e

    def branch_name(self, prefix: str = 'refactor') -> str:
        date = datetime.now(timezone.utc).date().isoformat()
        suffix = ''.join(random.choice(BASE36_ALPHABET) for _ in range(6))
        return f"{prefix}/tailwind-conversion-{date}-{suffix}"

    def merge_summary(self, patches: List[Patch]) -> str:
        """Combine the review blocks of every patch into one Markdown document."""
        generated_on = datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')
        sections = [self.format_for_review(patch) for patch in patches]
        try:
            return self.report_builder.render_summary(sections, generated_on)
        except Exception as e:
            logger.error(f"Error merging patches: {str(e)}", exc_info=True)
            raise GenerationError(f"Failed to merge patches: {str(e)}") from e
