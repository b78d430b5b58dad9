import re

from universal.utils import SIGNED_INT, collapse_spaces

# Greedy name: the final signed integer is the modifier
NAME_MODIFIER = re.compile(r'^(.*)([+-]\d+)(.*)$', re.S)
LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_name_modifier(text):
    # Athletics +31
    # Acrobatics +25 (can't be higher than...)
    # Lore (+12
    text = (text or "").strip()
    if not text:
        return {"Name": "", "Modifier": 0}
    m = NAME_MODIFIER.match(text)
    if not m:
        return {"Name": collapse_spaces(text), "Modifier": 0}
    name, token, trailing = m.groups()
    modifier = parse_modifier(token)
    name = name.strip()
    trailing = trailing.strip()
    if trailing:
        if trailing[0] in "([" and _unclosed(trailing):
            name = ("%s %s" % (name, trailing)).strip()
            trailing = ""
        elif name.endswith("(") and trailing.endswith(")"):
            name = "%s%s" % (name, trailing)
            trailing = ""
    result = {"Name": collapse_spaces(name), "Modifier": modifier}
    if trailing:
        result["Notes"] = trailing
    return result


def _unclosed(text):
    return text.count("(") + text.count("[") > text.count(")") + text.count("]")


def parse_modifier(text):
    """Returns the first signed integer in text, 0 when there is none."""
    if text is None:
        return 0
    m = SIGNED_INT.search(str(text))
    if not m:
        return 0
    return int(m.group(0))


def parse_int(text):
    if isinstance(text, bool):
        return None
    if isinstance(text, int):
        return text
    m = LEADING_INT.match(str(text or ""))
    if not m:
        return None
    return int(m.group(1))


def modifier_to_score(token):
    modifier = parse_int(token)
    if modifier is None:
        return 0
    return 10 + 2 * modifier


def format_modifier(value):
    if value is None:
        value = 0
    if value >= 0:
        return "+%s" % value
    return str(value)
