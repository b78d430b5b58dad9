import re

from bs4 import Tag

from universal.utils import has_class_fragment

ONE = "One"
TWO = "Two"
THREE = "Three"
REACTION = "Reaction"
FREE = "Free"

ACTION_COSTS = {
    ONE: "(1)",
    TWO: "(2)",
    THREE: "(3)",
    REACTION: "(R)",
    FREE: "(Free)",
}

# Checked in order against the lower cased aria-label
LABEL_KINDS = [
    ("single", ONE),
    ("one", ONE),
    ("two", TWO),
    ("three", THREE),
    ("reaction", REACTION),
    ("free", FREE),
]

ICON_CLASSES = [
    ("one-action-icon", ONE),
    ("two-action-icon", TWO),
    ("three-action-icon", THREE),
    ("reaction-icon", REACTION),
    ("free-action-icon", FREE),
]

# <span class="action" title="Two Actions">[##]</span>
TITLE_KINDS = {
    "Single Action": ONE,
    "One Action": ONE,
    "Two Actions": TWO,
    "Three Actions": THREE,
    "Reaction": REACTION,
    "Free Action": FREE,
}


def action_cost(kind):
    if not kind:
        return ""
    return ACTION_COSTS.get(kind, "")


def _kind_from_label(label):
    label = label.lower()
    words = re.findall(r"[a-z]+", label)
    for token, kind in LABEL_KINDS:
        if token == "one":
            if token in words:
                return kind
        elif token in label:
            return kind
    return None


def extract_action_glyph(element):
    # aria-label first, then the icon class, then the older titled spans
    kind = _labelled_kind(element)
    if kind:
        return kind
    for cls, kind in ICON_CLASSES:
        if element.select_one("." + cls):
            return kind
    for span in element.find_all(is_action_span):
        kind = TITLE_KINDS.get(span["title"].strip())
        if kind:
            return kind
    return None


def has_action_glyph(element):
    for tag in element.find_all(True):
        if has_class_fragment(tag, "-action-icon"):
            return True
        if is_action_span(tag) and tag["title"].strip() != "Reaction":
            return True
    return _labelled_kind(element) not in (None, REACTION)


def has_reaction_glyph(element):
    if element.select_one(".reaction-icon"):
        return True
    for tag in element.find_all("span"):
        if is_action_span(tag) and tag["title"].strip() == "Reaction":
            return True
    return _labelled_kind(element) == REACTION


def _labelled_kind(element):
    span = element.select_one("span[aria-label]")
    if span:
        return _kind_from_label(span["aria-label"])
    return None


def is_action_span(tag):
    if type(tag) != Tag or tag.name != "span":
        return False
    return "action" in tag.get("class", []) and tag.has_attr("title")
