"""
Report Builder Module
Renders patch reviews, commit messages and merge summaries using Jinja2 templates.
"""

import json
from pathlib import Path
from typing import Dict, List, Union

from jinja2 import DictLoader, Environment

REVIEW_TEMPLATE = (
    "## Changes to `{{ patch.file_path }}`\n"
    "\n"
    "```diff\n"
    "{{ patch.diff }}\n"
    "```\n"
    "\n"
    "### Summary\n"
    "- **File**: `{{ patch.file_path }}`\n"
    "- **Changes**: {{ delta }} lines modified\n"
    "- **Type**: {{ change_type }}\n"
    "\n"
)

COMMIT_TEMPLATE = (
    "refactor: convert CSS to Tailwind utilities\n"
    "\n"
    "- Converted {{ file_count }} file(s) to use Tailwind CSS\n"
    "- {{ total_changes }} lines modified\n"
    "- Improved maintainability and consistency\n"
    "\n"
    "Files changed:\n"
    "{% for path in file_paths %}- {{ path }}{% if not loop.last %}\n{% endif %}{% endfor %}"
)

SUMMARY_TEMPLATE = (
    "# Patch Summary\n"
    "\n"
    "Generated on: {{ generated_on }}\n"
    "Total files: {{ sections | length }}\n"
    "\n"
    "## Files Modified\n"
    "\n"
    "{{ sections | join(separator) }}"
)

SECTION_SEPARATOR = "\n---\n\n"


class ReportBuilder:
    def __init__(self):
        self.env = Environment(
            loader=DictLoader({
                'review.md': REVIEW_TEMPLATE,
                'commit.txt': COMMIT_TEMPLATE,
                'summary.md': SUMMARY_TEMPLATE,
            }),
            keep_trailing_newline=True,
        )

    def render_review(self, patch, delta: int) -> str:
        """Render the Markdown review block for a single patch."""
        template = self.env.get_template('review.md')
        return template.render(
            patch=patch,
            delta=f"{delta:+d}",
            change_type='Addition' if delta > 0 else 'Modification',
        )

    def render_commit_message(self, file_paths: List[str], total_changes: int) -> str:
        template = self.env.get_template('commit.txt')
        return template.render(
            file_count=len(file_paths),
            total_changes=total_changes,
            file_paths=file_paths,
        )

    def render_summary(self, sections: List[str], generated_on: str) -> str:
        """Join per-file review blocks under a timestamped header."""
        template = self.env.get_template('summary.md')
        return template.render(
            sections=sections,
            generated_on=generated_on,
            separator=SECTION_SEPARATOR,
        )

    def generate_json_report(self, data: Dict, output_path: Union[str, Path]) -> Path:
        """Write raw results as an indented JSON report."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        return output_path
