from universal.utils import filter_entities


class Fragment():
    """One labelled stat block line as delivered by a source adapter.

    action_glyph_kind is one of the names in pf2statblock.action.ACTION_COSTS
    or None when the line carries no action cost glyph.
    """
    def __init__(self, label, raw_text, has_action_glyph=False,
                 action_glyph_kind=None, has_reaction_glyph=False, html=None):
        self.label = filter_entities(label).strip()
        self.raw_text = filter_entities(raw_text).strip()
        self.has_action_glyph = has_action_glyph
        self.action_glyph_kind = action_glyph_kind
        self.has_reaction_glyph = has_reaction_glyph
        self.html = html

    @property
    def value(self):
        return fragment_value(self.label, self.raw_text)

    def __repr__(self):
        if self.action_glyph_kind:
            return "<Fragment %s [%s]: %s>" % (
                self.label, self.action_glyph_kind, self.raw_text)
        return "<Fragment %s: %s>" % (self.label, self.raw_text)


def fragment_value(label, raw_text):
    # Drops the first occurrence of the label, then a leading separator
    value = raw_text.replace(label, "", 1).strip() if label else raw_text.strip()
    while value[:1] in (";", ":", ","):
        value = value[1:].strip()
    return value
