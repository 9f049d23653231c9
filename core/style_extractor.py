"""
Style Extractor Module
Collects CSS embedded in HTML documents so it can be run through the suggester.
"""

from typing import List

from bs4 import BeautifulSoup


def describe_element(tag) -> str:
    """Build a tag#id.class selector describing an element."""
    selector = tag.name
    if tag.get('id'):
        selector += f"#{tag['id']}"
    for cls in tag.get('class') or []:
        selector += f".{cls}"
    return selector


def extract_style_blocks(content: str) -> List[str]:
    soup = BeautifulSoup(content, 'html.parser')
    return [tag.get_text() for tag in soup.find_all('style') if tag.get_text().strip()]


def extract_inline_rules(content: str) -> List[str]:
    """Turn every inline style attribute into a standalone CSS rule."""
    soup = BeautifulSoup(content, 'html.parser')
    rules = []
    for tag in soup.find_all(style=True):
        style = tag['style'].strip()
        if style:
            rules.append(f"{describe_element(tag)} {{ {style} }}")
    return rules


def extract_css(content: str) -> str:
    """Return the CSS of all <style> elements followed by the inline styles."""
    return '\n'.join(extract_style_blocks(content) + extract_inline_rules(content))
