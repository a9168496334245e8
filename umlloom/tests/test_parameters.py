"""Tests for parameter list formatting and ordering."""

from umlloom.core.uml.parameters import ParamNames, Parameters, TypeDisplay, TypeName

STRING = TypeName("String", "java.lang.String")
INT = TypeName.of("int")
STRINGS = TypeName("String[]", "java.lang.String[]")


# =========================================================================
# Tests: Rendering
# =========================================================================

class TestRendering:
    def test_empty(self, params):
        assert params.render() == "()"

    def test_name_before_type(self, params):
        params.add("a", STRING).add("b", INT)
        assert params.render(ParamNames.BEFORE_TYPE, TypeDisplay.SIMPLE) == "(a: String, b: int)"

    def test_name_after_type(self, params):
        params.add("a", STRING)
        assert params.render(ParamNames.AFTER_TYPE, TypeDisplay.SIMPLE) == "(String: a)"

    def test_qualified_types(self, params):
        params.add("a", STRING)
        assert params.render(ParamNames.BEFORE_TYPE, TypeDisplay.QUALIFIED) == "(a: java.lang.String)"

    def test_names_only(self, params):
        params.add("a", STRING).add("b", INT)
        assert params.render(ParamNames.BEFORE_TYPE, TypeDisplay.NONE) == "(a, b)"

    def test_types_only(self, params):
        params.add("a", STRING).add("b", INT)
        assert params.render(ParamNames.NONE, TypeDisplay.SIMPLE) == "(String, int)"

    def test_varargs_last_parameter(self, params):
        params.add("first", STRINGS).add("rest", STRINGS).varargs(True)
        assert params.render() == "(first: String[], rest: String...)"

    def test_array_without_varargs(self, params):
        params.add("args", STRINGS)
        assert params.render() == "(args: String[])"


# =========================================================================
# Tests: Ordering
# =========================================================================

class TestOrdering:
    def test_fewer_parameters_first(self):
        one = Parameters().add("a", STRING)
        two = Parameters().add("a", INT).add("b", INT)
        assert sorted([two, one]) == [one, two]

    def test_types_break_ties(self):
        by_int = Parameters().add("x", INT)
        by_string = Parameters().add("x", STRING)
        assert by_int < by_string

    def test_names_do_not_matter(self):
        assert Parameters().add("a", STRING) == Parameters().add("b", STRING)


class TestTypeName:
    def test_to_uml(self):
        assert STRING.to_uml(TypeDisplay.SIMPLE) == "String"
        assert STRING.to_uml(TypeDisplay.QUALIFIED) == "java.lang.String"
        assert STRING.to_uml(TypeDisplay.NONE) == ""
