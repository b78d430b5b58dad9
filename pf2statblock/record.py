import re
import time

from pf2statblock.constants import ABILITY_KEYS, SAVE_NAMES
from pf2statblock.constants import SOURCE_TAG, RECORD_VERSION
from pf2statblock.modifiers import format_modifier

SAVE_WORDS = [re.compile(r'\b%s\b' % name, re.I) for name in SAVE_NAMES]


def new_record(now=None):
    if now is None:
        now = int(time.time() * 1000)
    return {
        'Source': SOURCE_TAG,
        'Name': "Unknown",
        'Type': "",
        'HP': {'Value': 0, 'Notes': ""},
        'AC': {'Value': 0, 'Notes': ""},
        'InitiativeModifier': 0,
        'InitiativeAdvantage': False,
        'Speed': [],
        'Abilities': dict([(key, 0) for key in ABILITY_KEYS]),
        'DamageVulnerabilities': [],
        'DamageResistances': [],
        'DamageImmunities': [],
        'ConditionImmunities': [],
        'Saves': [],
        'Skills': [],
        'Senses': [],
        'Languages': [],
        'Challenge': "0",
        'Traits': [],
        'Actions': [],
        'BonusActions': [],
        'Reactions': [],
        'LegendaryActions': [],
        'MythicActions': [],
        'Description': "",
        'Player': "",
        'Version': RECORD_VERSION,
        'ImageURL': "",
        'LastUpdateMs': now,
    }


class RecordAssembler():
    """Owns a StatRecord while fragments are applied to it.

    Fragment updates only set fields and append to lists.  The two passes
    in finish() are the only corrections made after the fragment loop.
    """
    def __init__(self, record=None):
        self.record = record if record is not None else new_record()
        self.fragments = []

    def set_field(self, field, value):
        assert field in self.record, "Unknown record field: %s" % field
        self.record[field] = value

    def set_nested(self, field, values):
        assert field in ('HP', 'AC'), "Not a nested field: %s" % field
        self.record[field].update(values)

    def extend(self, field, items):
        self.record[field].extend(items)

    def set_ability(self, key, score):
        assert key in ABILITY_KEYS, "Unknown ability: %s" % key
        self.record['Abilities'][key] = score

    def add_save(self, save):
        saves = self.record['Saves']
        for i, existing in enumerate(saves):
            if existing['Name'] == save['Name']:
                saves[i] = save
                return
        saves.append(save)

    def add_sense(self, text):
        senses = self.record['Senses']
        if any([s.startswith("Perception") for s in senses]):
            return
        senses.append(text)

    def append_text(self, field, text):
        self.record[field] += text

    def apply_header(self, header):
        for field in ('Name', 'Type', 'Challenge', 'ImageURL'):
            value = header.get(field)
            if value:
                self.set_field(field, value)

    def apply(self, update, fragment=None):
        if fragment is not None:
            self.fragments.append(fragment)
        for field, value in update.get('fields', {}).items():
            self.set_field(field, value)
        for field, values in update.get('nested', {}).items():
            self.set_nested(field, values)
        for field, items in update.get('append', {}).items():
            self.extend(field, items)
        for key, score in update.get('abilities', {}).items():
            self.set_ability(key, score)
        for save in update.get('saves', []):
            self.add_save(save)
        for text in update.get('senses', []):
            self.add_sense(text)
        for field, text in update.get('text', {}).items():
            self.append_text(field, text)

    def finish(self):
        save_fallback_pass(self.record, self.fragments)
        ac_notes_pass(self.record)
        return self.record


def save_fallback_pass(record, fragments):
    if record['Saves']:
        return
    for fragment in fragments:
        text = fragment.raw_text
        if all([w.search(text) for w in SAVE_WORDS]):
            for name in SAVE_NAMES:
                m = re.search(r'%s\s*([+-]\d+)' % name, text, re.I)
                if m:
                    record['Saves'].append(
                        {'Name': name, 'Modifier': int(m.group(1))})
            return


def ac_notes_pass(record):
    if record['AC']['Notes'] or len(record['Saves']) < 2:
        return
    record['AC']['Notes'] = build_saves_note(record['Saves'])


def build_saves_note(saves):
    values = dict([(s['Name'], s['Modifier']) for s in saves])
    return ", ".join([
        "%s %s" % (name, format_modifier(values.get(name)))
        for name in SAVE_NAMES])
