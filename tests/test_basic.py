import unittest

from token_table import (
    DOMAIN_SIZE,
    REFERENCE_TOKEN_TABLE,
    TOKEN_CHARS,
    TOKEN_TABLE,
    BitmapIndex,
    build_table,
    compare_tables,
    members_from_table,
    tables_equal,
    token_members,
)


class TestBuildTable(unittest.TestCase):
    def test_small_table(self):
        self.assertEqual(build_table({1, 3, 4}, 8, set_flag="1", unset_flag="0"), "01011000")

    def test_empty_set(self):
        self.assertEqual(build_table(set(), 4, set_flag="1", unset_flag="0"), "0000")

    def test_length_matches_size(self):
        for size in (0, 1, 63, 64, 65, 256):
            self.assertEqual(len(build_table({0, 5, 200}, size)), size)

    def test_membership_per_position(self):
        members = {0, 7, 64, 255}
        table = build_table(members)
        for i, flag in enumerate(table):
            self.assertEqual(flag == "\x01", i in members)

    def test_out_of_range_members_ignored(self):
        self.assertEqual(
            build_table({-1, 2, 8, 300}, 8, set_flag="1", unset_flag="0"),
            build_table({2}, 8, set_flag="1", unset_flag="0")
        )

    def test_non_integer_member_crashes(self):
        with self.assertRaises(TypeError):
            build_table({"a"}, 4)

    def test_invalid_arguments(self):
        with self.assertRaises(ValueError):
            build_table({1}, -1)
        with self.assertRaises(ValueError):
            build_table({1}, 4, set_flag="11")
        with self.assertRaises(ValueError):
            build_table({1}, 4, set_flag="x", unset_flag="x")

    def test_token_table(self):
        self.assertEqual(len(TOKEN_TABLE), DOMAIN_SIZE)
        self.assertEqual(len(token_members()), len(TOKEN_CHARS))
        self.assertEqual(members_from_table(TOKEN_TABLE), token_members())
        self.assertEqual(TOKEN_TABLE[ord("!")], "\x01")
        self.assertEqual(TOKEN_TABLE[ord(":")], "\x00")
        self.assertEqual(TOKEN_TABLE[0x7f], "\x00")

    def test_token_table_matches_reference(self):
        self.assertTrue(tables_equal(TOKEN_TABLE, REFERENCE_TOKEN_TABLE))


class TestCompareTables(unittest.TestCase):
    def test_reflexive(self):
        table = build_table({1, 2, 3})
        self.assertTrue(tables_equal(table, table))
        self.assertTrue(compare_tables(table, table).equal)

    def test_symmetric(self):
        a = build_table({1, 2}, 8, set_flag="1", unset_flag="0")
        b = build_table({1, 3}, 8, set_flag="1", unset_flag="0")
        self.assertEqual(tables_equal(a, b), tables_equal(b, a))
        self.assertEqual(compare_tables(a, b).mismatches, compare_tables(b, a).mismatches)

    def test_mismatch_positions(self):
        diff = compare_tables("0110", "0101")
        self.assertFalse(diff.equal)
        self.assertEqual(diff.mismatches, [2, 3])
        self.assertEqual(diff.distance, 2)

    def test_length_mismatch_not_equal(self):
        self.assertFalse(tables_equal("0101", "010"))
        diff = compare_tables("0101", "010")
        self.assertFalse(diff.equal)
        self.assertFalse(diff.same_length)
        self.assertEqual(diff.mismatches, [])
        self.assertEqual(diff.distance, 1)

    def test_divergence_logged(self):
        with self.assertLogs("token_table.engine", level="WARNING"):
            compare_tables("01", "10")

    def test_to_dict(self):
        diff = compare_tables("01", "00")
        self.assertEqual(diff.to_dict(), {
            "equal": False,
            "length_a": 2,
            "length_b": 2,
            "distance": 1,
            "mismatches": [1]
        })


class TestBitmapIndex(unittest.TestCase):
    def test_set_get_count(self):
        bitmap = BitmapIndex(130)
        for i in (0, 64, 129, 130, -3):
            bitmap.set(i)
        self.assertTrue(bitmap.get(64))
        self.assertFalse(bitmap.get(130))
        self.assertEqual(bitmap.count(), 3)
        self.assertEqual(list(bitmap.indices()), [0, 64, 129])

    def test_word_boundaries(self):
        bitmap = BitmapIndex(128)
        for i in (63, 64, 127):
            bitmap.set(i)
        self.assertEqual(bitmap.word_count, 2)
        self.assertEqual(list(bitmap.indices()), [63, 64, 127])
        self.assertEqual(bitmap.to_flags("1", "0").count("1"), bitmap.count())
        self.assertEqual(BitmapIndex(0).to_flags("1", "0"), "")

    def test_negative_capacity(self):
        with self.assertRaises(ValueError):
            BitmapIndex(-1)


if __name__ == "__main__":
    unittest.main()
