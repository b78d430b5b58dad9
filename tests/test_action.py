from bs4 import BeautifulSoup

from pf2statblock.action import action_cost, extract_action_glyph
from pf2statblock.action import has_action_glyph, has_reaction_glyph


def p(html):
    return BeautifulSoup(html, "html.parser").p


class TestActionCost:
    def test_costs(self):
        assert action_cost("One") == "(1)"
        assert action_cost("Two") == "(2)"
        assert action_cost("Three") == "(3)"
        assert action_cost("Reaction") == "(R)"
        assert action_cost("Free") == "(Free)"

    def test_none(self):
        assert action_cost(None) == ""


class TestExtractActionGlyph:
    def test_aria_label(self):
        el = p('<p><strong>Melee</strong> <span aria-label="Two Actions"></span> jaws</p>')
        assert extract_action_glyph(el) == "Two"

    def test_aria_label_single(self):
        el = p('<p><strong>Stride</strong> <span aria-label="Single Action"></span></p>')
        assert extract_action_glyph(el) == "One"

    def test_icon_class(self):
        el = p('<p><strong>Breath</strong> <i class="three-action-icon"></i></p>')
        assert extract_action_glyph(el) == "Three"

    def test_free_icon(self):
        el = p('<p><strong>Frenzy</strong> <i class="free-action-icon"></i></p>')
        assert extract_action_glyph(el) == "Free"

    def test_titled_span(self):
        el = p('<p><strong>Tail</strong> <span class="action" title="Reaction">[@]</span></p>')
        assert extract_action_glyph(el) == "Reaction"

    def test_none(self):
        assert extract_action_glyph(p('<p><strong>HP</strong> 90</p>')) is None


class TestGlyphFlags:
    def test_action_icon(self):
        el = p('<p><strong>Melee</strong> <i class="one-action-icon"></i></p>')
        assert has_action_glyph(el)
        assert not has_reaction_glyph(el)

    def test_reaction_icon_is_not_action(self):
        el = p('<p><strong>Ferocity</strong> <i class="reaction-icon"></i></p>')
        assert not has_action_glyph(el)
        assert has_reaction_glyph(el)

    def test_titled_span_action(self):
        el = p('<p><b>Jaws</b> <span class="action" title="Two Actions">[##]</span></p>')
        assert has_action_glyph(el)

    def test_plain(self):
        el = p('<p><strong>Speed</strong> 30 feet</p>')
        assert not has_action_glyph(el)
        assert not has_reaction_glyph(el)
