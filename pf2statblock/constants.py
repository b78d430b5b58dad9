SOURCE_TAG = "Pathfinder 2e"
RECORD_VERSION = "3.13.2"

SIZES = ["Tiny", "Small", "Medium", "Large", "Huge", "Gargantuan"]

CREATURE_TYPES = [
    "Aberration", "Animal", "Astral", "Beast", "Celestial", "Construct",
    "Dragon", "Elemental", "Fey", "Fiend", "Fungus", "Giant", "Humanoid",
    "Monitor", "Ooze", "Plant", "Spirit", "Undead"]

ABILITY_KEYS = ["Str", "Dex", "Con", "Int", "Wis", "Cha"]

ABILITY_NAMES = {
    "strength": "Str", "str": "Str",
    "dexterity": "Dex", "dex": "Dex",
    "constitution": "Con", "con": "Con",
    "intelligence": "Int", "int": "Int",
    "wisdom": "Wis", "wis": "Wis",
    "charisma": "Cha", "cha": "Cha",
}

SAVE_NAMES = ["Fort", "Ref", "Will"]

# Labels that map directly onto a section kind
KNOWN_KEYS = [
    "Perception", "Languages", "Skills", "AC", "HP", "Immunities",
    "Weaknesses", "Resistances", "Speed"]

# Defense label -> record field
DEFENSE_FIELDS = {
    "Immunities": "DamageImmunities",
    "Weaknesses": "DamageVulnerabilities",
    "Resistances": "DamageResistances",
}

# Live markup selectors
STAT_BLOCK_SELECTOR = ".page-inner-holder"
NAME_SELECTOR = ".elem-disp-header-name-page h1"
LEVEL_SELECTOR = ".element-display-header-tag-creature"
TRAIT_SELECTOR = ".trait-tag button"
THUMBNAIL_SELECTOR = ".elem-disp-header-thumb-img-page"
DATA_SCRIPT_SELECTOR = 'script[type="application/json"]'

READINESS_ATTEMPTS = 40
READINESS_INTERVAL = 0.25

PARSE_FAILURE_DETAILS = (
    "Make sure you're on a creature page and it has fully loaded.")
