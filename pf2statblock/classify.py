import re

from pf2statblock.constants import KNOWN_KEYS

ABILITIES = "Abilities"
REACTION = "Reaction"
ATTACK = "Attack"
ACTION = "Action"
PERCEPTION = "Perception"
LANGUAGES = "Languages"
SKILLS = "Skills"
AC = "AC"
HP = "HP"
IMMUNITIES = "Immunities"
WEAKNESSES = "Weaknesses"
RESISTANCES = "Resistances"
SPEED = "Speed"
SPELL_BLOCK = "SpellBlock"
GENERIC_TRAIT = "GenericTrait"

ABILITY_LEAD = re.compile(
    r'^(str|dex|con|int|wis|cha|strength|dexterity|constitution|'
    r'intelligence|wisdom|charisma)\b', re.I)
REACTION_WORD = re.compile(r'reaction', re.I)
ATTACK_LABEL = re.compile(r'^(melee|ranged)$', re.I)
SPELL_LABEL = re.compile(
    r'(arcane|divine|occult|primal).*spells|focus spells|rituals|cantrips',
    re.I)


def is_ability_label(label, raw_text, action_glyph, reaction_glyph):
    return bool(ABILITY_LEAD.search(label))


def is_reaction(label, raw_text, action_glyph, reaction_glyph):
    return reaction_glyph or bool(REACTION_WORD.search(raw_text))


def is_glyph_attack(label, raw_text, action_glyph, reaction_glyph):
    return action_glyph and is_attack_label(label)


def is_glyph_action(label, raw_text, action_glyph, reaction_glyph):
    return bool(action_glyph)


def is_bare_attack(label, raw_text, action_glyph, reaction_glyph):
    return is_attack_label(label)


def is_known_key(key):
    def test(label, raw_text, action_glyph, reaction_glyph):
        return label == key
    return test


def is_spell_block(label, raw_text, action_glyph, reaction_glyph):
    return bool(SPELL_LABEL.search(label))


def is_attack_label(label):
    return bool(ATTACK_LABEL.match(label.strip()))


# First match wins
RULES = [
    (is_ability_label, ABILITIES),
    (is_reaction, REACTION),
    (is_glyph_attack, ATTACK),
    (is_glyph_action, ACTION),
    (is_bare_attack, ATTACK),
]
RULES.extend([(is_known_key(key), key) for key in KNOWN_KEYS])
RULES.append((is_spell_block, SPELL_BLOCK))


def classify(label, raw_text, has_action_glyph=False, has_reaction_glyph=False):
    label = (label or "").strip()
    raw_text = raw_text or ""
    for test, kind in RULES:
        if test(label, raw_text, has_action_glyph, has_reaction_glyph):
            return kind
    return GENERIC_TRAIT


def classify_fragment(fragment):
    return classify(
        fragment.label, fragment.raw_text, fragment.has_action_glyph,
        fragment.has_reaction_glyph)
