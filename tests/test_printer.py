"""
Tests for the structure printer
"""

import pytest

from zinc_util.printer import (
   ABSENT, Absent, Collection, Labeled, Present, Scalar,
   as_value, render, render_lines, show
)


class TestRender:
   """Test rendering of each value variant"""

   def test_scalar(self):
      """Test unlabeled top-level scalar"""
      assert render_lines(Scalar(42)) == ["42"]

   def test_empty_collection_with_prefix(self):
      """Test empty collection renders as {}"""
      assert render_lines(Collection(()), prefix="x = ") == ["x = {}"]

   def test_labeled_collection(self):
      """Test label decorates the collection, not its children"""
      value = Labeled("a", Collection((Scalar("b"), Scalar("c"))))

      assert render_lines(value) == ["a = {", "   b", "   c", "}"]

   def test_absent_with_prefix(self):
      """Test absent optional prints only indent and prefix"""
      assert render_lines(ABSENT, prefix="k = ", depth=1) == ["   k = "]

   def test_absent_top_level(self):
      """Test absent optional at top level prints an empty line"""
      assert render_lines(Absent()) == [""]

   def test_present_is_transparent(self):
      """Test present optional does not add indentation"""
      value = Present(Present(Scalar("v")))

      assert render_lines(value, prefix="p = ", depth=2) == ["      p = v"]

   def test_labeled_absent(self):
      """Test a label on an absent value"""
      assert render_lines(Labeled("missing", ABSENT)) == ["missing = "]

   def test_closing_brace_has_no_prefix(self):
      """Test closing brace is indented but never prefixed"""
      value = Collection((Scalar(1),))

      assert render_lines(value, prefix="n = ", depth=1) == ["   n = {", "      1", "   }"]

   def test_nested_collections(self):
      """Test mixed empty and non-empty nested collections"""
      value = Collection((
         Collection(()),
         Collection((Scalar("x"), Collection(()))),
         Labeled("e", Collection(())),
      ))

      assert render_lines(value) == [
         "{",
         "   {}",
         "   {",
         "      x",
         "      {}",
         "   }",
         "   e = {}",
         "}",
      ]

   def test_sink_called_once_per_line(self):
      """Test the sink receives each line separately and in order"""
      received = []
      render(Labeled("a", Collection((Scalar("b"),))), received.append)

      assert received == ["a = {", "   b", "}"]

   def test_rendering_is_repeatable(self):
      """Test rendering the same value twice gives identical output"""
      value = Labeled("cfg", Collection((Labeled("x", Present(Scalar(1))), ABSENT)))

      assert render_lines(value) == render_lines(value)

   def test_unknown_value_raises(self):
      """Test non-Value input is rejected"""
      with pytest.raises(TypeError):
         render_lines("plain string")


class TestAsValue:
   """Test conversion of plain Python data"""

   def test_none_is_absent(self):
      """Test None converts to absent"""
      assert as_value(None) == ABSENT

   def test_pair_is_labeled(self):
      """Test two-element tuples become labeled pairs"""
      assert as_value(("a", 1)) == Labeled("a", Scalar(1))

   def test_dict_is_collection_of_pairs(self):
      """Test dicts keep insertion order"""
      assert as_value({"b": 2, "a": None}) == Collection((
         Labeled("b", Scalar(2)),
         Labeled("a", ABSENT),
      ))

   def test_list_is_collection(self):
      """Test lists become collections"""
      assert as_value([1, [2]]) == Collection((Scalar(1), Collection((Scalar(2),))))

   def test_values_pass_through(self):
      """Test existing values are not wrapped again"""
      value = Scalar("x")
      assert as_value(value) is value

   def test_show_plain_data(self):
      """Test show renders plain data"""
      lines = []
      show(("deps", {"core": ["a.jar", "b.jar"], "test": []}), lines.append)

      assert lines == [
         "deps = {",
         "   core = {",
         "      a.jar",
         "      b.jar",
         "   }",
         "   test = {}",
         "}",
      ]
