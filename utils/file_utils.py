"""
File Utilities Module
Locates and reads the stylesheet and HTML files fed to the suggester.
"""

import os
from pathlib import Path
from typing import List, Union

# File extension categories
STYLE_EXTENSIONS = {
    'css': {'.css'},
    'html': {'.html', '.htm'},
}


def normalize_path(path: Union[str, Path]) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()


def is_hidden(path: Path) -> bool:
    """Check if a file or directory is hidden."""
    return path.name.startswith('.')


def file_kind(path: Union[str, Path]) -> str:
    """Return 'css' or 'html' for a supported file, '' otherwise."""
    suffix = Path(path).suffix.lower()
    for kind, extensions in STYLE_EXTENSIONS.items():
        if suffix in extensions:
            return kind
    return ''


def collect_style_files(path: Union[str, Path]) -> List[Path]:
    """
    Collect CSS and HTML files.

    Args:
        path: A single file or a directory to walk recursively

    Returns:
        Sorted list of supported files; hidden files and directories are skipped
    """
    base_path = normalize_path(path)
    if base_path.is_file():
        return [base_path] if file_kind(base_path) else []

    matching_files = []
    for root, dirs, files in os.walk(base_path):
        # Skip hidden directories
        dirs[:] = [d for d in dirs if not is_hidden(Path(root) / d)]

        for file in files:
            file_path = Path(root) / file
            if is_hidden(file_path):
                continue
            if file_kind(file_path):
                matching_files.append(file_path)

    return sorted(matching_files)


def read_file_content(file_path: Union[str, Path]) -> str:
    """
    Safely read file content with proper encoding.

    Args:
        file_path: Path to the file to read

    Returns:
        File contents as string

    Raises:
        FileNotFoundError: If file doesn't exist
        IOError: If file can't be read
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError:
        # Fallback to system default encoding if UTF-8 fails
        with open(file_path, 'r') as f:
            return f.read()
