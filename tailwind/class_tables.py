"""
Tailwind Class Tables Module
Static lookup tables mapping CSS values onto the default Tailwind scale.
"""

from typing import Dict, Tuple

# Spacing scale shared by margin and padding (px and rem spellings)
SPACING_SCALE: Dict[str, str] = {
    '0': '0', '0px': '0',
    '1px': 'px',
    '2px': '0.5', '0.125rem': '0.5',
    '4px': '1', '0.25rem': '1',
    '8px': '2', '0.5rem': '2',
    '12px': '3', '0.75rem': '3',
    '16px': '4', '1rem': '4',
    '20px': '5', '1.25rem': '5',
    '24px': '6', '1.5rem': '6',
    '32px': '8', '2rem': '8',
    '40px': '10', '2.5rem': '10',
    '48px': '12', '3rem': '12',
    '64px': '16', '4rem': '16',
    '80px': '20', '5rem': '20',
    '96px': '24', '6rem': '24',
}

FONT_SIZE_SCALE: Dict[str, str] = {
    '12px': 'text-xs', '0.75rem': 'text-xs',
    '14px': 'text-sm', '0.875rem': 'text-sm',
    '16px': 'text-base', '1rem': 'text-base',
    '18px': 'text-lg', '1.125rem': 'text-lg',
    '20px': 'text-xl', '1.25rem': 'text-xl',
    '24px': 'text-2xl', '1.5rem': 'text-2xl',
    '30px': 'text-3xl', '1.875rem': 'text-3xl',
    '36px': 'text-4xl', '2.25rem': 'text-4xl',
}

FONT_WEIGHTS: Dict[str, str] = {
    '100': 'font-thin', 'thin': 'font-thin',
    '200': 'font-extralight', 'extralight': 'font-extralight',
    '300': 'font-light', 'light': 'font-light',
    '400': 'font-normal', 'normal': 'font-normal',
    '500': 'font-medium', 'medium': 'font-medium',
    '600': 'font-semibold', 'semibold': 'font-semibold',
    '700': 'font-bold', 'bold': 'font-bold',
    '800': 'font-extrabold', 'extrabold': 'font-extrabold',
    '900': 'font-black', 'black': 'font-black',
}

BORDER_RADIUS_SCALE: Dict[str, str] = {
    '0': 'rounded-none', '0px': 'rounded-none',
    '2px': 'rounded-sm', '0.125rem': 'rounded-sm',
    '4px': 'rounded', '0.25rem': 'rounded',
    '6px': 'rounded-md', '0.375rem': 'rounded-md',
    '8px': 'rounded-lg', '0.5rem': 'rounded-lg',
    '12px': 'rounded-xl', '0.75rem': 'rounded-xl',
    '16px': 'rounded-2xl', '1rem': 'rounded-2xl',
    '24px': 'rounded-3xl', '1.5rem': 'rounded-3xl',
}

# Checked in order; the first offset found inside the value wins
BOX_SHADOW_PRESETS: Tuple[Tuple[str, str], ...] = (
    ('0 1px 3px', 'shadow-sm'),
    ('0 1px 2px', 'shadow'),
    ('0 4px 6px', 'shadow-md'),
    ('0 10px 15px', 'shadow-lg'),
    ('0 20px 25px', 'shadow-xl'),
    ('0 25px 50px', 'shadow-2xl'),
)

# Suffix appended to the w-/h- prefix
SIZE_KEYWORDS: Dict[str, str] = {
    'auto': 'auto',
    '100%': 'full',
    '50%': '1/2',
    '25%': '1/4',
    '75%': '3/4',
    '33.33%': '1/3', '33.333333%': '1/3',
    '66.67%': '2/3', '66.666667%': '2/3',
    '100vh': 'screen',
    '100vw': 'screen',
}

DISPLAY_KEYWORDS = ('flex', 'block', 'inline', 'grid')

POSITION_KEYWORDS = ('absolute', 'relative', 'fixed', 'sticky')

# Checked in order against the border shorthand
BORDER_STYLES: Tuple[Tuple[str, str], ...] = (
    ('solid', 'border-solid'),
    ('dashed', 'border-dashed'),
    ('dotted', 'border-dotted'),
)

CATEGORIES = ('layout', 'spacing', 'colors', 'typography', 'effects', 'interactivity', 'custom')


def arbitrary(prefix: str, value: str) -> str:
    """Bracketed arbitrary-value class, e.g. ``rounded-[10px]``."""
    return f"{prefix}-[{value}]"
