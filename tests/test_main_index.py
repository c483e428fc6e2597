# ==============================================
# Tests for Identity + MainIndex
# ==============================================

import pytest

from classification_list.indexing import MainIndex, read_identifier, has_identifier


class TestReadIdentifier:
    """Reading the identifying field from dicts and objects."""

    def test_dict_element(self):
        assert read_identifier({"id": "a"}) == "a"

    def test_object_element(self, make_item):
        assert read_identifier(make_item(id="a")) == "a"

    def test_custom_field(self, make_item):
        assert read_identifier({"key": "k1"}, "key") == "k1"
        assert read_identifier(make_item(sku="s1"), "sku") == "s1"

    @pytest.mark.parametrize("element", [None, {}, {"id": None}, {"id": ""}, object()])
    def test_missing_identifier(self, element):
        assert read_identifier(element) is None
        assert has_identifier(element) is False


class TestMainIndex:
    """MainIndex build/add/get behaviour."""

    def test_build_indexes_every_element(self):
        elements = [{"id": "a"}, {"id": "b"}, {"id": "c"}]
        index = MainIndex()

        assert index.build(elements) is True
        assert len(index) == 3
        for element in elements:
            assert index.get(element["id"]) is element

    def test_duplicate_ids_last_write_wins(self):
        first, second = {"id": "a", "v": 1}, {"id": "a", "v": 2}
        index = MainIndex()
        index.build([first, second])

        assert index.get("a") is second
        assert len(index) == 1

    def test_build_skipped_when_first_element_has_no_id(self):
        index = MainIndex()
        index.add({"id": "kept"})

        assert index.build([{"name": "no id"}, {"id": "b"}]) is False
        # Previous entries survive, later identified elements are not indexed
        assert index.get("kept") == {"id": "kept"}
        assert "b" not in index

    def test_build_skipped_for_empty_list_or_none_first(self):
        index = MainIndex()
        assert index.build([]) is False
        assert index.build([None, {"id": "a"}]) is False
        assert len(index) == 0

    def test_build_resets_previous_entries(self):
        index = MainIndex()
        index.add({"id": "old"})
        index.build([{"id": "new"}])

        assert "old" not in index
        assert "new" in index

    def test_build_skips_unidentified_later_elements(self):
        index = MainIndex()
        index.build([{"id": "a"}, {"name": "anon"}, {"id": "b"}])
        assert len(index) == 2

    def test_add_without_identifier_is_ignored(self):
        index = MainIndex()
        assert index.add({"name": "anon"}) is False
        assert index.add(None) is False
        assert len(index) == 0

    def test_get_missing_returns_none(self):
        assert MainIndex().get("nope") is None

    def test_clear(self):
        index = MainIndex()
        index.add({"id": "a"})
        index.clear()
        assert len(index) == 0

    def test_custom_id_field(self, make_item):
        index = MainIndex(id_field="sku")
        item = make_item(sku="s-1")
        index.build([item])
        assert index.get("s-1") is item
