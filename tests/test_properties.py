"""
Tests for system properties
"""

from pathlib import Path

import pytest

from zinc_util.properties import (
   SystemProperties, file_property, int_property, load_properties,
   opt_file_property, properties_from_resource, property_from_resource,
   set_properties, string_set_property
)


@pytest.fixture
def props():
   """Fresh property registry"""
   return SystemProperties({"zinc.jobs": "4", "zinc.bad": "four", "zinc.dir": "/tmp/out"})


class TestTypedProperties:
   """Test typed property accessors"""

   def test_int_property(self, props):
      """Test integer parsing with defaults"""
      assert int_property("zinc.jobs", 1, props) == 4
      assert int_property("zinc.bad", 1, props) == 1
      assert int_property("zinc.missing", 7, props) == 7

   def test_string_set_property(self, props):
      """Test comma separated sets"""
      props["zinc.names"] = "a,b,a"

      assert string_set_property("zinc.names", set(), props) == {"a", "b"}
      assert string_set_property("zinc.missing", {"x"}, props) == {"x"}

   def test_string_set_property_trailing_commas(self, props):
      """Test trailing empty items are dropped, inner ones kept"""
      props["zinc.trailing"] = "a,b,,"
      props["zinc.inner"] = "a,,b"
      props["zinc.commas"] = ",,"
      props["zinc.empty"] = ""

      assert string_set_property("zinc.trailing", set(), props) == {"a", "b"}
      assert string_set_property("zinc.inner", set(), props) == {"a", "", "b"}
      assert string_set_property("zinc.commas", {"x"}, props) == set()
      assert string_set_property("zinc.empty", set(), props) == {""}

   def test_file_property(self, props):
      """Test path properties"""
      assert file_property("zinc.dir", props) == Path("/tmp/out")
      assert file_property("zinc.missing", props) == Path("")

   def test_opt_file_property(self, props):
      """Test optional path properties"""
      assert opt_file_property("zinc.dir", props) == Path("/tmp/out")
      assert opt_file_property("zinc.missing", props) is None

   def test_set_properties(self, props):
      """Test key=value entries, malformed ones ignored"""
      set_properties(["a=1", "b", "c=2=3", "d="], props)

      assert props["a"] == "1"
      assert "b" not in props
      assert "c" not in props
      assert props["d"] == ""

   def test_values_stored_as_strings(self, props):
      """Test registry coerces values to strings"""
      props["n"] = 5
      assert props["n"] == "5"


class TestLoadProperties:
   """Test .properties parsing"""

   def test_separators_and_comments(self):
      """Test =, : and whitespace separators"""
      text = (
         "# comment\n"
         "! also a comment\n"
         "\n"
         "a=1\n"
         "b : 2\n"
         "c 3\n"
         "   d=  spaced value\n"
      )

      assert load_properties(text) == {"a": "1", "b": "2", "c": "3", "d": "spaced value"}

   def test_continuation_lines(self):
      """Test backslash joins lines"""
      text = "list=a,\\\n    b,\\\n    c\n"

      assert load_properties(text) == {"list": "a,b,c"}

   def test_escapes(self):
      """Test escaped separators and unicode escapes"""
      text = "key\\ with\\=sep=tab\\there \\u0041\n"

      assert load_properties(text) == {"key with=sep": "tab\there A"}

   def test_escaped_backslash_before_u(self):
      """Test an escaped backslash is not read as a unicode escape"""
      text = "path=C:\\\\u0041\\\\dir\n"

      assert load_properties(text) == {"path": "C:\\u0041\\dir"}

   def test_short_unicode_escape(self):
      """Test a \\u without four hex digits keeps the letter"""
      assert load_properties("a=\\u12\n") == {"a": "u12"}

   def test_key_without_value(self):
      """Test a bare key has an empty value"""
      assert load_properties("flag\n") == {"flag": ""}


class TestResources:
   """Test packaged properties resources"""

   def test_bundled_version(self):
      """Test the bundled properties file"""
      from zinc_util import __version__

      assert property_from_resource("zinc.properties", "version") == __version__

   def test_missing_resource(self):
      """Test a missing resource yields no properties"""
      assert properties_from_resource("missing.properties") == {}
      assert property_from_resource("missing.properties", "version") is None
