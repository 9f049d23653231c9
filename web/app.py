"""
Web Interface for CSS to Tailwind Refactoring
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from flask import Flask, jsonify, request
from core.exceptions import GenerationError, ParseError
from core.patch_generator import PatchGenerator
from core.refactor_flow import RefactorFlow, check_context
from utils.config import load_config

VERSION = '1.0.0'

config = load_config()

# Configure logging
logging.basicConfig(level=getattr(logging, config.log_level))
logger = logging.getLogger(__name__)

app = Flask(__name__)
patch_generator = PatchGenerator(algorithm=config.diff_algorithm)
flow = RefactorFlow(
    patch_generator=patch_generator,
    branch_prefix=config.branch_prefix,
    context=config.diff_context,
)

# camelCase request options -> RefactorFlow option names
OPTION_NAMES = {
    'includePatches': 'include_patches',
    'includeCoverage': 'include_coverage',
    'includeRecommendations': 'include_recommendations',
    'branchPrefix': 'branch_prefix',
    'context': 'context',
}

# Accepted for compatibility with older clients; they do not change the result
IGNORED_OPTIONS = ('removeUnused', 'preserveComments', 'generateUtilities')
FLAG_OPTIONS = ('includePatches', 'includeCoverage', 'includeRecommendations') + IGNORED_OPTIONS


def translate_options(raw):
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError('options must be an object')
    unknown = [key for key in raw if key not in OPTION_NAMES and key not in IGNORED_OPTIONS]
    if unknown:
        raise ValueError(f"Unknown options: {', '.join(sorted(unknown))}")
    for key, value in raw.items():
        if key in FLAG_OPTIONS and not isinstance(value, bool):
            raise ValueError(f"'{key}' must be a boolean")
    if 'branchPrefix' in raw and (not isinstance(raw['branchPrefix'], str) or not raw['branchPrefix'].strip()):
        raise ValueError("'branchPrefix' must be a non-empty string")
    if 'context' in raw:
        check_context(raw['context'])
    return {OPTION_NAMES[key]: value for key, value in raw.items() if key in OPTION_NAMES}


def require_string(body, key, allow_empty=False):
    value = body.get(key)
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    if not allow_empty and not value.strip():
        raise ValueError(f"'{key}' cannot be empty")
    return value


@app.route('/api/health')
def health():
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'version': VERSION,
    })


@app.route('/api/refactor/tailwind', methods=['GET'])
def describe_refactor():
    """Describe the refactoring endpoint."""
    return jsonify({
        'message': 'CSS to Tailwind refactoring API endpoint',
        'description': 'Converts CSS to Tailwind utilities with patches and recommendations',
        'methods': ['POST'],
        'parameters': {
            'css': 'CSS content to refactor (required)',
            'filePath': 'File path for context (required)',
            'after': 'Rewritten file content to diff against (optional)',
            'options': 'Refactoring options (optional)',
        },
        'options': {
            'includePatches': 'Include diff patches (default: true)',
            'includeCoverage': 'Include coverage analysis (default: true)',
            'includeRecommendations': 'Include recommendations (default: true)',
            'branchPrefix': f"Branch name prefix (default: {config.branch_prefix})",
            'context': f"Diff context lines (default: {config.diff_context})",
            'removeUnused': 'Accepted and ignored',
            'preserveComments': 'Accepted and ignored',
            'generateUtilities': 'Accepted and ignored',
        },
    })


@app.route('/api/refactor/tailwind', methods=['POST'])
def refactor_tailwind():
    """Suggest utility classes for a stylesheet and build patches for a rewrite."""
    try:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return jsonify({'error': 'Invalid request data', 'details': ['Request body must be a JSON object']}), 400
        try:
            css = require_string(body, 'css')
            file_path = require_string(body, 'filePath')
            after = body.get('after')
            if after is not None and not isinstance(after, str):
                raise ValueError("'after' must be a string")
            options = translate_options(body.get('options'))
            result = flow.run(css, file_path, after=after, options=options)
        except (ValueError, ParseError) as e:
            logger.warning(f"Rejected refactor request: {str(e)}")
            return jsonify({'error': 'Invalid request data', 'details': [str(e)]}), 400
        return jsonify({
            'success': True,
            'data': result,
            'metadata': result['metadata'],
        })
    except Exception as e:
        logger.error(f"CSS refactoring error: {str(e)}", exc_info=True)
        return jsonify({'error': 'Internal server error', 'message': str(e)}), 500


@app.route('/api/patch', methods=['POST'])
def create_patch():
    """Build a patch with its validation and review text from a before/after pair."""
    try:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return jsonify({'error': 'Invalid request data', 'details': ['Request body must be a JSON object']}), 400
        try:
            file_path = require_string(body, 'filePath')
            before = require_string(body, 'before', allow_empty=True)
            after = require_string(body, 'after', allow_empty=True)
            context = check_context(body.get('context', config.diff_context))
        except ValueError as e:
            return jsonify({'error': 'Invalid request data', 'details': [str(e)]}), 400
        patch = patch_generator.create_patch(file_path, before, after, context)
        return jsonify({
            'success': True,
            'patch': patch.to_dict(),
            'validation': patch_generator.validate(patch).to_dict(),
            'review': patch_generator.format_for_review(patch),
        })
    except GenerationError as e:
        logger.error(f"Patch generation error: {str(e)}")
        return jsonify({'error': 'Patch generation failed', 'message': str(e)}), 500
    except Exception as e:
        logger.error(f"Patch endpoint error: {str(e)}", exc_info=True)
        return jsonify({'error': 'Internal server error', 'message': str(e)}), 500


if __name__ == '__main__':
    app.run(debug=False, host='0.0.0.0', port=config.port)
