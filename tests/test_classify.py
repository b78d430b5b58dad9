import pytest

import pf2statblock.classify as kinds
from pf2statblock.classify import classify, classify_fragment, RULES
from pf2statblock.fragment import Fragment


class TestClassify:
    @pytest.mark.parametrize("label", ["Str", "str", "Strength", "DEX", "Cha"])
    def test_ability_labels(self, label):
        assert classify(label, "%s +4, Dex +2" % label) == kinds.ABILITIES

    def test_ability_wins_over_reaction_word(self):
        assert classify("Str", "Str +4 reaction") == kinds.ABILITIES

    def test_ability_lead_is_word_anchored(self):
        assert classify("Strike Back", "Strike Back text") == kinds.GENERIC_TRAIT

    def test_reaction_word(self):
        text = "Attack of Opportunity Trigger a creature ... Reaction"
        assert classify("Attack of Opportunity", text) == kinds.REACTION

    def test_reaction_word_case_insensitive(self):
        assert classify("Ferocity", "Ferocity REACTION") == kinds.REACTION

    def test_reaction_glyph(self):
        assert classify("Ferocity", "Ferocity", has_reaction_glyph=True) == kinds.REACTION

    def test_reaction_beats_action_glyph(self):
        assert classify("Tail Sweep", "Tail Sweep reaction", True) == kinds.REACTION

    def test_glyph_melee_is_attack(self):
        assert classify("Melee", "Melee jaws +23", True) == kinds.ATTACK

    def test_glyph_other_is_action(self):
        assert classify("Breath Weapon", "Breath Weapon fire", True) == kinds.ACTION

    def test_glyph_action_beats_known_key(self):
        assert classify("Speed", "Speed 30 feet", True) == kinds.ACTION

    def test_bare_ranged_is_attack(self):
        assert classify("ranged", "Ranged shortbow +10") == kinds.ATTACK

    @pytest.mark.parametrize("label", [
        "Perception", "Languages", "Skills", "AC", "HP", "Immunities",
        "Weaknesses", "Resistances", "Speed"])
    def test_known_keys(self, label):
        assert classify(label, "%s something" % label) == label

    @pytest.mark.parametrize("label", [
        "Arcane Innate Spells", "Divine Prepared Spells", "Occult Spontaneous Spells",
        "Primal Innate Spells", "Champion Focus Spells", "Rituals", "Cantrips"])
    def test_spell_blocks(self, label):
        assert classify(label, "%s DC 30" % label) == kinds.SPELL_BLOCK

    def test_unknown_is_generic_trait(self):
        assert classify("Frightful Presence", "Frightful Presence 90 feet") == kinds.GENERIC_TRAIT

    def test_empty_label(self):
        assert classify("", "") == kinds.GENERIC_TRAIT


class TestRuleOrder:
    def test_ability_rule_first(self):
        assert RULES[0][1] == kinds.ABILITIES

    def test_spell_block_rule_last(self):
        assert RULES[-1][1] == kinds.SPELL_BLOCK

    def test_reaction_before_action(self):
        order = [kind for _, kind in RULES]
        assert order.index(kinds.REACTION) < order.index(kinds.ACTION)


class TestClassifyFragment:
    def test_uses_fragment_flags(self):
        fragment = Fragment("Melee", "Melee jaws +23", has_action_glyph=True,
                            action_glyph_kind="Two")
        assert classify_fragment(fragment) == kinds.ATTACK
