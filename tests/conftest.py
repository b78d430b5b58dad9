import json

import pytest

LIVE_PAGE = """
<html><body>
<div class="elem-disp-header-name-page"><h1>Young Red Dragon</h1></div>
<div class="element-display-header-tag-creature">Creature 10</div>
<div class="trait-tag"><button>Uncommon</button></div>
<div class="trait-tag"><button>CE</button></div>
<div class="trait-tag"><button>Large</button></div>
<div class="trait-tag"><button>Dragon</button></div>
<div class="trait-tag"><button>Fire</button></div>
<img class="elem-disp-header-thumb-img-page" src="/images/young-red-dragon.png"/>
<div class="page-inner-holder">
<p><strong>Perception</strong> +20; darkvision, scent (imprecise) 60 feet</p>
<p><strong>Languages</strong> Common, Draconic, Jotun</p>
<p><strong>Skills</strong> Acrobatics +17, Athletics +22, Intimidation +21</p>
<p><strong>Str</strong> +6, <strong>Dex</strong> +1, <strong>Con</strong> +4, <strong>Int</strong> +2, <strong>Wis</strong> +2, <strong>Cha</strong> +4</p>
<p><strong>AC</strong> 30; <strong>Fort</strong> +21, <strong>Ref</strong> +17, <strong>Will</strong> +19; +1 status to all saves vs. magic</p>
<p><strong>HP</strong> 210; <strong>Immunities</strong> fire, paralyzed, sleep; <strong>Weaknesses</strong> cold 10</p>
<p><strong>Frightful Presence</strong> (aura, emotion, fear, mental) 90 feet, DC 27</p>
<p><strong>Attack of Opportunity</strong> <i class="reaction-icon"></i> Trigger a creature within reach uses a manipulate action</p>
<p><strong>Speed</strong> 40 feet, fly 120 feet</p>
<p><strong>Melee</strong> <span aria-label="Single Action"></span> jaws +23 (fire, magical, reach 10 feet), <strong>Damage</strong> 2d12+12 piercing plus 2d6 fire</p>
<p><strong>Arcane Innate Spells</strong> DC 29; <strong>4th</strong> <i>suggestion</i></p>
<p><strong>Breath Weapon</strong> <span aria-label="Two Actions"></span> The dragon breathes a blast of flame</p>
<p>A paragraph with no label.</p>
</div>
</body></html>
"""

EMBEDDED_PAYLOAD = {
    "props": {
        "pageProps": {
            "creature": {
                "name": "Goblin Warrior",
                "level": -1,
                "trait": "Small|1,Goblin|2,Humanoid|3,NE|4",
                "thumbnail": "/thumbs/goblin.png",
                "html": (
                    "<p><strong>Perception</strong> +2; darkvision</p>"
                    "<p><strong>Skills</strong> Acrobatics +5, Athletics +2, Stealth +5</p>"
                    "<p><strong>Str</strong> +0, <strong>Dex</strong> +3, <strong>Con</strong> +1, "
                    "<strong>Int</strong> +0, <strong>Wis</strong> -1, <strong>Cha</strong> +1</p>"
                    "<p><strong>AC</strong> 16; <strong>Fort</strong> +5, <strong>Ref</strong> +7, "
                    "<strong>Will</strong> +3</p>"
                    "<p><strong>HP</strong> 6</p>"
                    "<p><strong>Speed</strong> 25 feet</p>"
                    "<p><strong>Melee</strong> <span aria-label=\"Single Action\"></span> "
                    "dogslicer +7 (agile, backstabber, finesse), <strong>Damage</strong> 1d6 slashing</p>"
                ),
            }
        }
    }
}


@pytest.fixture
def live_page():
    return LIVE_PAGE


@pytest.fixture
def embedded_payload():
    return json.loads(json.dumps(EMBEDDED_PAYLOAD))


@pytest.fixture
def embedded_page():
    return (
        '<html><head><script id="__NEXT_DATA__" type="application/json">%s</script>'
        '</head><body><div id="root"></div></body></html>' % json.dumps(EMBEDDED_PAYLOAD))
