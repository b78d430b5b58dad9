"""Field parsers, one per section kind.

Every parser takes a Fragment and returns an update dict. Parsers never
touch the record; the assembler in pf2statblock.record applies the update.
The keys an update may carry are:

    fields   -- {field: value} set or overwritten on the record
    nested   -- {field: {key: value}} merged into HP/AC
    append   -- {field: [items]} appended to list fields
    abilities -- {key: score}
    saves    -- [{Name, Modifier}] merged by save name
    senses   -- [text] added unless a Perception entry already exists
    text     -- {field: text} concatenated onto string fields
"""
import re

import pf2statblock.classify as kinds
from pf2statblock.action import action_cost
from pf2statblock.constants import ABILITY_NAMES, DEFENSE_FIELDS
from pf2statblock.fragment import fragment_value
from pf2statblock.modifiers import parse_modifier, parse_name_modifier
from pf2statblock.modifiers import modifier_to_score
from universal.utils import filter_entities, split_list, split_maintain_parens
from universal.utils import strip_markup

AC_VALUE = re.compile(r'AC\s+(\d+)')
HP_VALUE = re.compile(r'HP\s+(\d+)')
AC_SAVES = re.compile(
    r'Fort\s*([+-]\d+)[,;]?\s*Ref\s*([+-]\d+)[,;]?\s*Will\s*([+-]\d+)', re.I)
AC_NOTES = re.compile(r';\s*(.*)$', re.S)
ABILITY_CHUNK = re.compile(r'^([A-Za-z]+)\s*([+-]?\d+)')
ATTACK_PREFIX = re.compile(r'^(Melee|Ranged)\s*', re.I)
ATTACK_NAME = re.compile(r'^([^(+;]+?)(?:\s*[+;(]|$)')
FEET = re.compile(r'\bfeet\b', re.I)
HARDNESS = re.compile(r'Hardness\s+(\d+)', re.I)
REGENERATION = re.compile(r'Regeneration\s+([^;]+)', re.I)
FAST_HEALING = re.compile(r'Fast Healing\s+([^;]+)', re.I)


def _defense_clause(name):
    return re.compile(r'%s\s+([^;]+)' % name, re.I)


DEFENSE_CLAUSES = [
    (_defense_clause(label), field) for label, field in DEFENSE_FIELDS.items()]


def parse_perception(fragment):
    # Perception +28; darkvision, scent (imprecise) 60 feet
    return {
        'senses': [fragment.raw_text],
        'fields': {'InitiativeModifier': parse_modifier(fragment.value)}}


def parse_languages(fragment):
    return {'fields': {'Languages': split_list(fragment.value)}}


def parse_skills(fragment):
    # Athletics +31, Acrobatics +25 (can't be higher than...)
    skills = [
        parse_name_modifier(part)
        for part in split_maintain_parens(fragment.value, ",")]
    return {'fields': {'Skills': [s for s in skills if s['Name']]}}


def parse_abilities(fragment):
    # Str +7, Dex +2, Con +5, Int -4, Wis +2, Cha -2
    abilities = {}
    text = fragment.raw_text.replace(";", ",")
    for chunk in split_list(text):
        m = ABILITY_CHUNK.match(chunk)
        if not m:
            continue
        key = ABILITY_NAMES.get(m.group(1).lower())
        if not key:
            continue
        abilities[key] = modifier_to_score(m.group(2))
    return {'abilities': abilities}


def parse_ac(fragment):
    # AC 38; Fort +30, Ref +26, Will +28; +1 status to all saves vs. magic
    text = fragment.raw_text
    update = {}
    ac = {'Value': _first_int(AC_VALUE, text)}
    m = AC_SAVES.search(text)
    if m:
        update['saves'] = [
            {'Name': 'Fort', 'Modifier': int(m.group(1))},
            {'Name': 'Ref', 'Modifier': int(m.group(2))},
            {'Name': 'Will', 'Modifier': int(m.group(3))}]
    m = AC_NOTES.search(text)
    if m:
        ac['Notes'] = m.group(1).strip()
    update['nested'] = {'AC': ac}
    return update


def parse_hp(fragment):
    # HP 425; Hardness 10; Immunities fire, paralyzed; Weaknesses cold 15
    text = fragment.raw_text
    hp = {'Value': _first_int(HP_VALUE, text)}
    notes = []
    m = HARDNESS.search(text)
    if m:
        notes.append("Hardness %s" % m.group(1))
    m = REGENERATION.search(text)
    if m:
        notes.append("Regeneration %s" % m.group(1).strip())
    m = FAST_HEALING.search(text)
    if m:
        notes.append("Fast Healing %s" % m.group(1).strip())
    if notes:
        hp['Notes'] = "; ".join(notes)
    update = {'nested': {'HP': hp}}
    fields = {}
    for clause, field in DEFENSE_CLAUSES:
        m = clause.search(text)
        if m:
            fields[field] = split_list(m.group(1))
    if fields:
        update['fields'] = fields
    return update


def parse_defense(fragment):
    field = DEFENSE_FIELDS[fragment.label]
    return {'fields': {field: split_list(fragment.value)}}


def parse_speed(fragment):
    speeds = [FEET.sub("ft.", s) for s in split_list(fragment.value)]
    return {'fields': {'Speed': speeds}}


def parse_attack(fragment):
    # Melee [two-actions] jaws +23 (magical, reach 10 feet), Damage 3d8+12
    cost = action_cost(fragment.action_glyph_kind)
    text = ATTACK_PREFIX.sub("", fragment.raw_text, count=1).strip()
    m = ATTACK_NAME.match(text)
    short = m.group(1).strip() if m else "Attack"
    if not short:
        short = "Attack"
    short = short[0].upper() + short[1:]
    action = {
        'Name': ("%s %s" % (short, cost)).strip(),
        'Content': "%s Strike %s" % (fragment.label, fragment.value)}
    return {'append': {'Actions': [action]}}


def parse_reaction(fragment):
    reaction = {
        'Name': fragment.label,
        'Content': fragment.value,
        'Usage': ""}
    return {'append': {'Reactions': [reaction]}}


def parse_action(fragment):
    cost = action_cost(fragment.action_glyph_kind)
    action = {
        'Name': ("%s %s" % (fragment.label, cost)).strip(),
        'Content': fragment.value}
    return {'append': {'Actions': [action]}}


def parse_spell_block(fragment):
    # Arcane Innate Spells DC 29; <b>4th</b> <i>suggestion</i>
    if fragment.html:
        value = fragment_value(
            fragment.label, filter_entities(strip_markup(fragment.html)))
    else:
        value = strip_markup(fragment.value)
    text = "%s: %s\n\n" % (fragment.label, value)
    return {'text': {'Description': text}}


def parse_generic_trait(fragment):
    trait = {'Name': fragment.label, 'Content': fragment.value}
    return {'append': {'Traits': [trait]}}


def _first_int(regex, text):
    m = regex.search(text)
    if not m:
        return 0
    return int(m.group(1))


PARSERS = {
    kinds.PERCEPTION: parse_perception,
    kinds.LANGUAGES: parse_languages,
    kinds.SKILLS: parse_skills,
    kinds.ABILITIES: parse_abilities,
    kinds.AC: parse_ac,
    kinds.HP: parse_hp,
    kinds.IMMUNITIES: parse_defense,
    kinds.WEAKNESSES: parse_defense,
    kinds.RESISTANCES: parse_defense,
    kinds.SPEED: parse_speed,
    kinds.ATTACK: parse_attack,
    kinds.REACTION: parse_reaction,
    kinds.ACTION: parse_action,
    kinds.SPELL_BLOCK: parse_spell_block,
    kinds.GENERIC_TRAIT: parse_generic_trait,
}


def parse_section(kind, fragment):
    return PARSERS.get(kind, parse_generic_trait)(fragment)
