import re

from pf2statblock.constants import SIZES, CREATURE_TYPES

ALIGNMENT_CODE = re.compile(r'^[A-Z]{1,2}$')


def parse_trait_list(text):
    # "Large|231, Dragon|41, Fire|72"
    traits = []
    for part in (text or "").split(","):
        name = part.split("|")[0].strip()
        if name:
            traits.append(name)
    return traits


def capitalize_trait(name):
    return name[:1].upper() + name[1:].lower()


def creature_type_summary(traits):
    """Builds the record's Type from a creature's trait names.

    Large Dragon Fire CE -> "Large dragon (fire)"
    """
    traits = [t.strip() for t in traits if t and t.strip()]
    size = next((t for t in traits if t in SIZES), "")
    kind = next(
        (t for t in traits if capitalize_trait(t) in CREATURE_TYPES), None)
    subtypes = [
        t.lower() for t in traits
        if t != size and t != kind and not ALIGNMENT_CODE.match(t)]
    if kind is None:
        kind = "Creature"
    summary = kind.lower()
    if size:
        summary = "%s %s" % (size, summary)
    if subtypes:
        summary = "%s (%s)" % (summary, ", ".join(subtypes))
    return summary.strip()
