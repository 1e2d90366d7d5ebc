from seqfeatures.feature.attributes import FeatureAttributes, NO_ATTRIBUTE_SET


class TestFeatureAttributes:
    def test_get_missing(self):
        attributes = FeatureAttributes()
        assert attributes.get("Name") is NO_ATTRIBUTE_SET
        assert "Name" not in attributes
        assert len(attributes) == 0

    def test_set_get(self):
        attributes = FeatureAttributes()
        attributes.set("Name", "abcD")
        assert attributes.get("Name") == "abcD"
        attributes.set("Name", "efgH")
        assert attributes.get("Name") == "efgH"
        assert len(attributes) == 1

    def test_case_sensitive(self):
        attributes = FeatureAttributes({"Name": "abcD"})
        assert attributes.get("name") is NO_ATTRIBUTE_SET

    def test_get_or_insert(self):
        attributes = FeatureAttributes()
        assert attributes.get_or_insert("Note") == ""
        assert "Note" in attributes
        assert attributes.get("Note") == ""
        assert attributes.get_or_insert("Alias", "x") == "x"
        assert attributes.get_or_insert("Alias", "y") == "x"

    def test_remove(self):
        attributes = FeatureAttributes({"Name": "abcD"})
        attributes.remove("Name")
        assert attributes.get("Name") is NO_ATTRIBUTE_SET
        attributes.remove("Name")
        assert len(attributes) == 0

    def test_names(self):
        attributes = FeatureAttributes({"b": "2", "a": "1"})
        assert attributes.names() == {"a", "b"}
        assert set(attributes) == {"a", "b"}

    def test_copy(self):
        attributes = FeatureAttributes({"a": "1"})
        other = attributes.copy()
        assert other == attributes
        other.set("a", "2")
        assert attributes.get("a") == "1"
        assert other != attributes

    def test_to_dict_is_a_copy(self):
        attributes = FeatureAttributes({"a": "1"})
        d = attributes.to_dict()
        d["a"] = "2"
        assert attributes.get("a") == "1"

    def test_input_mapping_not_shared(self):
        source = {"a": "1"}
        attributes = FeatureAttributes(source)
        source["a"] = "2"
        assert attributes.get("a") == "1"
