import unittest

import csv_loader
import table_editor
from table import Table
from table_errors import IndexOutOfRange, ShapeMismatch


class EditorExampleTests(unittest.TestCase):
    def test_set_then_delete(self):
        table = csv_loader.load("1,2,3\n4,5,6\n", 3, 2)

        table_editor.set_field(table, 1, 0, "X")
        self.assertEqual(table.row(1), ["X", "5", "6"])

        table_editor.delete_row(table, 0)
        self.assertEqual(table.rows, [["X", "5", "6"]])
        self.assertEqual(table.row_count, 1)
        self.assertEqual(table.column_count, 3)


class DeleteRowTests(unittest.TestCase):
    def setUp(self):
        self.original = [[str(r), f"v{r}"] for r in range(5)]
        self.table = Table.from_rows(self.original)

    def test_later_rows_shift_up(self):
        table_editor.delete_row(self.table, 2)
        self.assertEqual(self.table.row_count, 4)
        self.assertEqual(self.table.rows, self.original[:2] + self.original[3:])

    def test_delete_last_row(self):
        table_editor.delete_row(self.table, 4)
        self.assertEqual(self.table.rows, self.original[:4])

    def test_delete_every_row(self):
        for _ in range(5):
            table_editor.delete_row(self.table, 0)
        self.assertEqual(self.table.row_count, 0)
        self.assertEqual(self.table.column_count, 2)
        with self.assertRaises(IndexOutOfRange):
            table_editor.delete_row(self.table, 0)

    def test_edit_after_delete_uses_new_positions(self):
        table_editor.delete_row(self.table, 0)
        table_editor.set_field(self.table, 0, 1, "edited")
        self.assertEqual(self.table.row(0), ["1", "edited"])

    def test_out_of_range_leaves_table_unchanged(self):
        for index in (5, 99, -1):
            with self.assertRaises(IndexOutOfRange):
                table_editor.delete_row(self.table, index)
        self.assertEqual(self.table.rows, self.original)


class SetFieldTests(unittest.TestCase):
    def setUp(self):
        self.table = Table.from_rows([["a", "b"], ["c", "d"]])

    def test_value_is_stored_as_string(self):
        table_editor.set_field(self.table, 0, 1, 42)
        self.assertEqual(self.table.cell(0, 1), "42")
        table_editor.set_field(self.table, 1, 0, None)
        self.assertEqual(self.table.cell(1, 0), "")

    def test_shape_unchanged(self):
        table_editor.set_field(self.table, 1, 1, "z")
        self.assertEqual(self.table.shape, (2, 2))

    def test_bad_indices(self):
        for row, col in ((2, 0), (0, 2), (-1, 0), (0, -1)):
            with self.assertRaises(IndexOutOfRange):
                table_editor.set_field(self.table, row, col, "x")
        self.assertEqual(self.table.rows, [["a", "b"], ["c", "d"]])

    def test_index_error_compatible(self):
        with self.assertRaises(IndexError):
            table_editor.set_field(self.table, 9, 0, "x")


class ReplaceRowTests(unittest.TestCase):
    def setUp(self):
        self.table = Table.from_rows([["a", "b"], ["c", "d"]])

    def test_replace(self):
        table_editor.replace_row(self.table, 1, ["x", "y"])
        self.assertEqual(self.table.rows, [["a", "b"], ["x", "y"]])

    def test_wrong_width(self):
        with self.assertRaises(ShapeMismatch):
            table_editor.replace_row(self.table, 0, ["only"])
        with self.assertRaises(ShapeMismatch):
            table_editor.replace_row(self.table, 0, ["1", "2", "3"])
        self.assertEqual(self.table.rows, [["a", "b"], ["c", "d"]])

    def test_bad_row(self):
        with self.assertRaises(IndexOutOfRange):
            table_editor.replace_row(self.table, 2, ["x", "y"])
        self.assertEqual(self.table.rows, [["a", "b"], ["c", "d"]])


if __name__ == "__main__":
    unittest.main()
