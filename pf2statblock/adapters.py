import copy
import json
import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup

import pf2statblock.constants as constants
from pf2statblock.action import extract_action_glyph, has_action_glyph
from pf2statblock.action import has_reaction_glyph, is_action_span
from pf2statblock.errors import MissingSourceData, UnrecognizedSchema
from pf2statblock.fragment import Fragment
from pf2statblock.trait import creature_type_summary, parse_trait_list
from universal.utils import get_text, is_tag_named, filter_entities

LEVEL = re.compile(r'Creature\s+(-?\d+)', re.I)

# Key aliases seen in embedded creature payloads
PAYLOAD_NAME_KEYS = ["name", "title"]
PAYLOAD_LEVEL_KEYS = ["level"]
PAYLOAD_TRAIT_KEYS = ["trait", "traits"]
PAYLOAD_IMAGE_KEYS = ["thumbnail", "image", "thumbnail_path"]
PAYLOAD_HTML_KEYS = ["html", "statblock_html"]


class SourceAdapter():
    """Delivers page header data and stat block fragments to the parser."""
    def is_ready(self):
        raise NotImplementedError()

    def header(self):
        raise NotImplementedError()

    def fragments(self):
        raise NotImplementedError()


class LiveMarkupAdapter(SourceAdapter):
    """Reads a rendered creature page.

    page is the page markup, or a callable returning the current markup
    so that readiness polling sees later renders.
    """
    def __init__(self, page, base_url=None):
        self.page = page
        self.base_url = base_url
        self._soup = None

    @property
    def soup(self):
        if self._soup is None:
            self._soup = self._load()
        return self._soup

    def _load(self):
        page = self.page() if callable(self.page) else self.page
        return BeautifulSoup(page or "", "lxml")

    def is_ready(self):
        if callable(self.page):
            self._soup = None
        return bool(
            self.soup.select_one(constants.STAT_BLOCK_SELECTOR)
            and self.soup.select_one(constants.NAME_SELECTOR))

    def header(self):
        header = {}
        name = self.soup.select_one(constants.NAME_SELECTOR)
        if name:
            header['Name'] = filter_entities(get_text(name)).strip()
        level = self.soup.select_one(constants.LEVEL_SELECTOR)
        if level:
            m = LEVEL.search(get_text(level))
            if m:
                header['Challenge'] = m.group(1)
        traits = [
            get_text(b).strip()
            for b in self.soup.select(constants.TRAIT_SELECTOR)]
        header['Type'] = creature_type_summary(traits)
        img = self.soup.select_one(constants.THUMBNAIL_SELECTOR)
        if img and img.has_attr('src'):
            header['ImageURL'] = resolve_url(img['src'], self.base_url)
        return header

    def fragments(self):
        container = self.soup.select_one(constants.STAT_BLOCK_SELECTOR)
        if not container:
            raise MissingSourceData("Stat block container not found")
        return paragraph_fragments(container)


class EmbeddedDataAdapter(SourceAdapter):
    """Reads the structured creature blob some pages embed.

    blob may be a dict, a JSON string, or page markup carrying a
    <script type="application/json"> element.
    """
    def __init__(self, blob, base_url=None):
        self.blob = blob
        self.base_url = base_url
        self._payload = None

    def is_ready(self):
        return True

    @property
    def payload(self):
        if self._payload is None:
            self._payload = find_payload(load_blob(self.blob))
        return self._payload

    def header(self):
        payload = self.payload
        header = {}
        name = _first_key(payload, PAYLOAD_NAME_KEYS)
        if name:
            header['Name'] = filter_entities(str(name)).strip()
        level = _first_key(payload, PAYLOAD_LEVEL_KEYS)
        if isinstance(level, float) and level.is_integer():
            level = int(level)
        if level is not None and str(level).strip() != "":
            header['Challenge'] = str(level).strip()
        traits = _first_key(payload, PAYLOAD_TRAIT_KEYS)
        if isinstance(traits, list):
            traits = ",".join([str(t) for t in traits])
        header['Type'] = creature_type_summary(parse_trait_list(traits))
        image = _first_key(payload, PAYLOAD_IMAGE_KEYS)
        if image:
            header['ImageURL'] = resolve_url(image, self.base_url)
        return header

    def fragments(self):
        html = _first_key(self.payload, PAYLOAD_HTML_KEYS)
        bs = BeautifulSoup(html, 'html.parser')
        fragments = paragraph_fragments(bs) or line_fragments(bs)
        if not fragments:
            raise UnrecognizedSchema("Embedded html has no stat block lines")
        return fragments


def load_adapter(page, base_url=None):
    """Chooses the adapter for a saved page."""
    bs = BeautifulSoup(page, "lxml")
    if bs.select_one(constants.STAT_BLOCK_SELECTOR):
        return LiveMarkupAdapter(page, base_url)
    for script in bs.select(constants.DATA_SCRIPT_SELECTOR):
        try:
            find_payload(json.loads(script_text(script)))
        except (ValueError, UnrecognizedSchema):
            continue
        return EmbeddedDataAdapter(script_text(script), base_url)
    return LiveMarkupAdapter(page, base_url)


def load_blob(blob):
    if blob is None:
        raise MissingSourceData("No embedded creature data")
    if isinstance(blob, dict):
        return blob
    text = str(blob).strip()
    if not text:
        raise MissingSourceData("No embedded creature data")
    if text[0] not in "{[":
        bs = BeautifulSoup(text, "lxml")
        script = bs.select_one(constants.DATA_SCRIPT_SELECTOR)
        if not script:
            raise MissingSourceData("No embedded creature data")
        text = script_text(script)
    try:
        return json.loads(text)
    except ValueError as e:
        raise UnrecognizedSchema("Embedded data is not JSON: %s" % e)


def find_payload(blob):
    """Returns the first nested dict carrying a stat block."""
    def _is_payload(obj):
        if not isinstance(obj, dict):
            return False
        html = _first_key(obj, PAYLOAD_HTML_KEYS)
        return isinstance(html, str) and _first_key(
            obj, PAYLOAD_NAME_KEYS) is not None

    stack = [blob]
    while stack:
        obj = stack.pop(0)
        if _is_payload(obj):
            return obj
        if isinstance(obj, dict):
            stack.extend(obj.values())
        elif isinstance(obj, list):
            stack.extend(obj)
    raise UnrecognizedSchema("Embedded data has no creature stat block")


def paragraph_fragments(container):
    fragments = []
    for p in container.find_all("p"):
        strong = p.find("strong")
        if not strong:
            continue
        fragments.append(build_fragment(get_text(strong), p))
    return fragments


def line_fragments(bs):
    # <b>Perception</b> +12; darkvision<br/><b>Skills</b> ...<hr/>
    # The lines may sit directly in the document or inside one wrapper
    first = bs.find(['b', 'strong'])
    if first is None:
        return []
    fragments = []
    key = None
    value = []

    def _add(key, value):
        if key:
            p = BeautifulSoup(
                "<p>%s</p>" % ''.join([str(v) for v in value]), 'html.parser').p
            fragments.append(build_fragment(key, p))

    for obj in list(first.parent.children):
        if is_tag_named(obj, ['br', 'hr']):
            _add(key, value)
            key = None
            value = []
        elif key is None and is_tag_named(obj, ['b', 'strong']):
            key = get_text(obj)
            value = [obj]
        elif key:
            value.append(obj)
    _add(key, value)
    return fragments


def build_fragment(label, p):
    text_p = copy.copy(p)
    for span in text_p.find_all(is_action_span):
        span.decompose()
    return Fragment(
        label,
        get_text(text_p),
        has_action_glyph=has_action_glyph(p),
        action_glyph_kind=extract_action_glyph(p),
        has_reaction_glyph=has_reaction_glyph(p),
        html=str(text_p))


def resolve_url(src, base_url=None):
    src = str(src).strip()
    if base_url:
        return urljoin(base_url, src)
    return src


def _first_key(obj, keys):
    for key in keys:
        if key in obj and obj[key] is not None:
            return obj[key]
    return None


def script_text(script):
    return script.string or ""
