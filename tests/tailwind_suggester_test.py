import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.tailwind_suggester import PROPERTY_RULES, PropertyRule, TailwindSuggester, round_half_up
from core.exceptions import GenerationError, ParseError

def classes_for(css):
    suggestions = TailwindSuggester().suggest(css, 'a.css')
    assert len(suggestions) == 1
    return suggestions[0].suggested_classes

def test_display_and_color_example():
    suggestions = TailwindSuggester().suggest("body { display: flex; color: #ff0000; }", "a.css")
    assert len(suggestions) == 1
    s = suggestions[0]
    assert s.suggested_classes == ['flex', 'text-[#ff0000]']
    assert s.confidence == 85
    assert s.category == 'colors'
    assert s.explanation == 'Display flex Text color #ff0000'
    assert s.original_css == "body { display: flex; color: #ff0000; }"

@pytest.mark.parametrize('css, expected, confidence', [
    (".a { display: grid; }", ['grid'], 90),
    (".a { position: sticky; }", ['sticky'], 90),
    (".a { font-weight: 600; }", ['font-semibold'], 90),
    (".a { font-weight: bold; }", ['font-bold'], 90),
    (".a { text-align: center; }", ['text-center'], 95),
])
def test_single_value_properties(css, expected, confidence):
    s = TailwindSuggester().suggest(css, 'a.css')[0]
    assert s.suggested_classes == expected
    assert s.confidence == confidence

def test_spacing_shorthand_arity():
    assert classes_for(".a { margin: 1rem; }") == ['m-4']
    assert classes_for(".a { margin: 8px 16px; }") == ['m-y-2', 'm-x-4']
    assert classes_for(".a { padding: 0 1px 2px 4px; }") == ['p-t-0', 'p-r-px', 'p-b-0.5', 'p-l-1']

def test_spacing_arbitrary_value():
    assert classes_for(".a { margin: 7px; }") == ['m-[7px]']

def test_three_value_spacing_has_no_classes():
    assert TailwindSuggester().suggest(".a { margin: 1px 2px 3px; }", 'a.css') == []

def test_spacing_category():
    s = TailwindSuggester().suggest(".a { padding: 1rem; }", 'a.css')[0]
    assert s.confidence == 85
    assert s.category == 'spacing'

def test_colors():
    assert classes_for(".a { color: transparent; }") == ['text-transparent']
    assert classes_for(".a { color: currentColor; }") == ['text-current']
    assert classes_for(".a { color: rgb(255, 0, 0); }") == ['text-[rgb(255, 0, 0)]']
    assert classes_for(".a { color: hsl(0, 100%, 50%); }") == ['text-[hsl(0, 100%, 50%)]']
    assert classes_for(".a { color: Red; }") == ['text-red']
    assert classes_for(".a { background-color: #fff; }") == ['bg-[#fff]']

def test_font_size():
    assert classes_for(".a { font-size: 16px; }") == ['text-base']
    assert classes_for(".a { font-size: 2.25rem; }") == ['text-4xl']
    assert classes_for(".a { font-size: 13px; }") == ['text-[13px]']

def test_border():
    assert classes_for(".a { border: none; }") == ['border-0']
    assert classes_for(".a { border: 1px dashed #000; }") == ['border-dashed']
    assert TailwindSuggester().suggest(".a { border: 2px; }", 'a.css') == []

def test_border_radius_and_shadow():
    assert classes_for(".a { border-radius: 0.5rem; }") == ['rounded-lg']
    assert classes_for(".a { border-radius: 10px; }") == ['rounded-[10px]']
    assert classes_for(".a { box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); }") == ['shadow-md']
    assert classes_for(".a { box-shadow: none; }") == ['shadow-none']
    assert classes_for(".a { box-shadow: 1px 1px red; }") == ['shadow-[1px 1px red]']

def test_width_and_height():
    assert classes_for(".a { width: 50%; }") == ['w-1/2']
    assert classes_for(".a { width: 33.333333%; }") == ['w-1/3']
    assert classes_for(".a { height: 100vh; }") == ['h-screen']
    assert classes_for(".a { width: 120px; }") == ['w-[120px]']
    assert classes_for(".a { height: auto; }") == ['h-auto']

def test_unrecognized_only_rule_is_omitted():
    css = ".a { cursor: pointer; } .b { display: block; } .c { z-index: 3; }"
    suggestions = TailwindSuggester().suggest(css, 'a.css')
    assert len(suggestions) == 1
    assert suggestions[0].suggested_classes == ['block']

def test_empty_rule_is_omitted():
    assert TailwindSuggester().suggest(".a {}", 'a.css') == []

def test_confidence_counts_unmatched_declarations():
    s = TailwindSuggester().suggest(".a { display: flex; cursor: pointer; }", 'a.css')[0]
    assert s.confidence == 45
    assert s.explanation == 'Display flex'

def test_confidence_rounds_half_up():
    s = TailwindSuggester().suggest(".a { text-align: center; box-shadow: none; }", 'a.css')[0]
    assert s.confidence == 83
    assert round_half_up(56.5) == 57
    assert round_half_up(56.49) == 56

def test_matched_declaration_without_classes_still_scores():
    s = TailwindSuggester().suggest(".a { display: none; color: red; }", 'a.css')[0]
    assert s.suggested_classes == ['text-red']
    assert s.confidence == 85
    assert s.explanation == 'Display none Text color red'

def test_duplicate_classes_removed_in_order():
    s = TailwindSuggester().suggest(".a { display: flex; width: 100%; display: flex; }", 'a.css')[0]
    assert s.suggested_classes == ['flex', 'w-full']

def test_category_is_last_match():
    s = TailwindSuggester().suggest(".a { color: red; display: block; cursor: move; }", 'a.css')[0]
    assert s.category == 'layout'

def test_rules_inside_media_are_suggested():
    css = "@media (min-width: 640px) { .a { display: grid; } }"
    assert classes_for(css) == ['grid']

def test_idempotent():
    css = ".a { margin: 4px 8px; color: #333; } .b { font-size: 14px; }"
    suggester = TailwindSuggester()
    assert suggester.suggest(css, 'a.css') == suggester.suggest(css, 'a.css')

def test_parse_error_propagates():
    with pytest.raises(ParseError):
        TailwindSuggester().suggest(".a { color red; } .b { display: flex; }", 'a.css')

def test_unexpected_error_is_wrapped(monkeypatch):
    suggester = TailwindSuggester()
    def boom(rule):
        raise RuntimeError('boom')
    monkeypatch.setattr(suggester, 'analyze_rule', boom)
    with pytest.raises(GenerationError) as excinfo:
        suggester.suggest(".a { display: flex; }", 'a.css')
    assert str(excinfo.value) == 'Failed to suggest Tailwind classes: boom'

def test_to_dict_uses_camel_case():
    s = TailwindSuggester().suggest(".a { display: flex; }", 'a.css')[0]
    assert s.to_dict() == {
        'originalCSS': '.a { display: flex; }',
        'suggestedClasses': ['flex'],
        'confidence': 90,
        'explanation': 'Display flex',
        'category': 'layout',
    }

def test_coverage():
    css = ".a { display: flex; cursor: pointer; } .b { cursor: move; }"
    report = TailwindSuggester().coverage(css, 'a.css')
    assert report['total_rules'] == 2
    assert report['converted_rules'] == 1
    assert report['total_declarations'] == 3
    assert report['matched_declarations'] == 1
    assert report['coverage'] == 0.3333
    assert report['by_category'] == {'layout': 1}
    assert report['unmatched_properties'] == ['cursor']

def test_coverage_empty_stylesheet():
    report = TailwindSuggester().coverage("", 'a.css')
    assert report['coverage'] == 1.0
    assert report['total_rules'] == 0

def test_nested_rules_get_their_own_suggestions():
    css = ".a { display: flex; &:hover { color: red; } .b { margin: 1rem; } }"
    suggestions = TailwindSuggester().suggest(css, 'a.css')
    assert [s.suggested_classes for s in suggestions] == [['flex'], ['text-red'], ['m-4']]
    assert suggestions[0].confidence == 90
    assert suggestions[1].category == 'colors'

def test_property_rule_rejects_unknown_category():
    with pytest.raises(ValueError):
        PropertyRule('cursor', 'Cursor', 80, 'pointers', lambda v: [f"cursor-{v}"])

def test_property_rule_rejects_out_of_range_confidence():
    with pytest.raises(ValueError):
        PropertyRule('cursor', 'Cursor', 120, 'interactivity', lambda v: [f"cursor-{v}"])

def test_custom_rule_table():
    cursor = PropertyRule('cursor', 'Cursor', 80, 'interactivity', lambda v: [f"cursor-{v}"])
    suggester = TailwindSuggester(rules=PROPERTY_RULES + (cursor,))
    s = suggester.suggest(".a { cursor: pointer; }", 'a.css')[0]
    assert s.suggested_classes == ['cursor-pointer']
    assert s.category == 'interactivity'
