"""Tests for the Trie engine: insertion, lookup, matching and traversal."""

import pytest

from seqtrie import MatchResult, Trie


class TestInsertAndLookup:
    """Insertion, indexed lookup and default data on miss."""

    def test_insert_and_lookup_words(self):
        """Stored values come back; prefixes and unknown keys read as default."""
        trie = Trie(int)
        assert trie.is_leaf()

        trie.insert("test", 42)
        trie.insert("trie", 1)
        trie.insert("abc", 7)
        assert not trie.is_leaf()

        assert trie["test"] == 42
        assert trie["trie"] == 1
        assert trie["t"] == 0
        assert trie["abd"] == 0

        trie["abd"] = 3
        assert trie["abd"] == 3

    def test_round_trip(self):
        trie = Trie(int)
        keys = ["a", "ab", "abc", "b", "zzz", ""]
        for value, key in enumerate(keys, start=10):
            trie[key] = value

        for value, key in enumerate(keys, start=10):
            assert trie[key] == value
            assert trie.match(key) == (True, value)

    def test_default_on_miss_creates_nodes(self):
        trie = Trie(int)
        assert trie["never"] == 0
        assert trie.node_count() == 6
        assert trie.match("never").matched

    def test_insert_leaves_prefix_data_untouched(self):
        trie = Trie(int)
        trie["ab"] = 5
        trie["abcd"] = 9
        assert trie["ab"] == 5
        assert trie["abc"] == 0

    def test_empty_key_sets_root_data(self):
        trie = Trie(int)
        trie.insert("", 11)
        assert trie.data == 11
        assert trie[""] == 11
        assert trie.is_leaf()

    def test_callable_value_is_stored_not_applied(self):
        trie = Trie(lambda: None)
        trie.insert("x", len)
        assert trie["x"] is len

    def test_mutable_data_is_returned_by_reference(self):
        trie = Trie(list)
        trie["ab"].append(1)
        trie["ab"].append(2)
        assert trie["ab"] == [1, 2]
        assert trie["a"] == []

    def test_insert_or_get_edge(self):
        trie = Trie(int)
        version = trie.structural_version

        child = trie.insert_or_get_edge(0, "a")
        assert trie.structural_version == version + 1
        assert trie.node_count() == 2

        assert trie.insert_or_get_edge(0, "a") == child
        assert trie.structural_version == version + 1
        assert trie.node_count() == 2

        grandchild = trie.insert_or_get_edge(child, "b")
        assert grandchild != child
        assert trie.structural_version == version + 2
        assert trie.match("ab").matched

    def test_insert_or_get_edge_keeps_edges_sorted(self):
        trie = Trie(int)
        for element in [3, 1, 2]:
            trie.insert_or_get_edge(0, element)
        assert list(trie) == [([1], 0), ([2], 0), ([3], 0)]

    def test_lookup_or_insert_is_indexing(self):
        trie = Trie(dict)
        trie.lookup_or_insert("k")["seen"] = True
        assert trie["k"] == {"seen": True}


class TestUpdate:
    """Applying a function over every prefix of a key."""

    def test_update_bumps_every_prefix(self, word_trie):
        assert word_trie["t"] == 1
        assert word_trie["tr"] == 1
        assert word_trie["tre"] == 1
        assert word_trie["tree"] == 1

    def test_update_includes_root(self, word_trie):
        assert word_trie.data == 1

    def test_update_leaves_siblings_alone(self, word_trie):
        assert word_trie["test"] == 42
        assert word_trie["te"] == 0
        assert word_trie["trie"] == 1
        assert word_trie["tri"] == 0

    def test_update_counts_passes(self):
        trie = Trie(int)
        for word in ["car", "cat", "cart"]:
            trie.update(word, lambda data: data + 1)

        assert trie.data == 3
        assert trie["c"] == 3
        assert trie["ca"] == 3
        assert trie["car"] == 2
        assert trie["cat"] == 1
        assert trie["cart"] == 1


class TestMatch:
    """Matching without creating nodes."""

    def test_match_flags(self, word_trie):
        assert word_trie.match("trie").matched
        assert word_trie.match("tree").matched
        assert word_trie.match("tr").matched
        assert not word_trie.match("true").matched

    def test_match_returns_longest_prefix_data(self, word_trie):
        word_trie["tr"] = 29
        assert word_trie.match("tr").data == 29
        assert word_trie.match("true").data == 29

    def test_prefix_monotonicity(self):
        trie = Trie(int)
        trie["ab"] = 5
        assert trie.match("abcd") == (False, 5)

    def test_match_does_not_create_nodes(self, word_trie):
        before = word_trie.node_count()
        word_trie.match("xylophone")
        assert word_trie.node_count() == before

    def test_nothing_matched_reports_root(self):
        trie = Trie(int)
        trie.data = 4
        trie["abc"] = 1
        assert trie.match("xyz") == MatchResult(False, 4)

    def test_empty_sequence_matches_root(self):
        trie = Trie(int)
        trie.data = 8
        assert trie.match("") == (True, 8)

    def test_match_result_unpacks(self, word_trie):
        matched, data = word_trie.match("test")
        assert matched is True
        assert data == 42

    def test_contains(self, word_trie):
        assert "tes" in word_trie
        assert "tesla" not in word_trie


class TestTraversal:
    """each_elem and each walk the trie in pre-order."""

    def test_each_elem_order(self, word_trie):
        accu = []

        def visit(element, data):
            accu.append(element)
            return True

        word_trie.each_elem(visit)
        assert "".join(accu) == "abcdtestreeie"

    def test_each_order(self, word_trie):
        accu = []

        def visit(key, data):
            if key:
                accu.append(key)
            return True

        word_trie.each(visit)
        assert "".join(accu) == "aababcabdttetestesttrtretreetritrie"

    def test_each_visits_root_first(self, word_trie):
        visited = []
        word_trie.each(lambda key, data: visited.append((key, data)) or True)
        assert visited[0] == ("", 1)

    def test_each_elem_skips_subtree(self, word_trie):
        accu = []

        def visit(element, data):
            accu.append(element)
            return element != "a"

        word_trie.each_elem(visit)
        assert "".join(accu) == "atestreeie"

    def test_each_skips_subtree_and_continues(self, word_trie):
        keys = []

        def visit(key, data):
            keys.append(key)
            return key != "t"

        word_trie.each(visit)
        assert keys == ["", "a", "ab", "abc", "abd", "t"]

    def test_each_stops_at_root(self, word_trie):
        keys = []
        word_trie.each(lambda key, data: keys.append(key))
        assert keys == [""]

    def test_each_elem_with_depth(self, word_trie):
        seen = []
        word_trie.each_elem_with_depth(lambda element, data, depth: seen.append((element, depth)) or True)
        assert seen[:4] == [("a", 1), ("b", 2), ("c", 3), ("d", 3)]

    def test_each_passes_data(self, word_trie):
        found = {}
        word_trie.each(lambda key, data: found.setdefault(key, data) is not None)
        assert found["test"] == 42
        assert found["abd"] == 3

    def test_iteration_yields_items_in_pre_order(self):
        trie = Trie(int)
        trie["ba"] = 2
        trie["a"] = 1
        assert list(trie) == [("a", 1), ("b", 0), ("ba", 2)]

    @pytest.mark.parametrize("key", ["abc", "abd", "test", "tree", "trie"])
    def test_every_inserted_key_is_visited(self, word_trie, key):
        keys = [k for k, _ in word_trie]
        assert key in keys


class TestFormatting:

    def test_format_lines(self):
        trie = Trie(int)
        trie["ab"] = 1
        assert trie.format() == "{ } : 0\n{ a } : 0\n{ a b } : 1"

    def test_str_is_format(self):
        trie = Trie(int)
        trie[[3, 14]] = 7
        assert str(trie) == "{ } : 0\n{ 3 } : 0\n{ 3 14 } : 7"

    def test_repr(self):
        trie = Trie(int)
        trie["ab"] = 1
        assert repr(trie) == "Trie(nodes=3, default_factory=int)"
