from pf2statblock.trait import creature_type_summary, parse_trait_list


class TestParseTraitList:
    def test_drops_ids(self):
        assert parse_trait_list("Large|231, Dragon|41,Fire|72") == ["Large", "Dragon", "Fire"]

    def test_empty(self):
        assert parse_trait_list("") == []
        assert parse_trait_list(None) == []


class TestCreatureTypeSummary:
    def test_size_kind_subtypes(self):
        assert creature_type_summary(["Large", "Dragon", "Fire", "CE"]) == "Large dragon (fire)"

    def test_kind_case_normalized(self):
        assert creature_type_summary(["Medium", "HUMANOID", "Elf"]) == "Medium humanoid (elf)"

    def test_no_kind(self):
        assert creature_type_summary(["Small", "Uncommon"]) == "Small creature (uncommon)"

    def test_no_size(self):
        assert creature_type_summary(["Undead", "Zombie", "Mindless"]) == "undead (zombie, mindless)"

    def test_empty(self):
        assert creature_type_summary([]) == "creature"
