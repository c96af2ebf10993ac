import pytest

from clarg import ArgumentKind, Parser
from clarg.exceptions import (
    DuplicateNameError,
    DuplicateShortNameError,
    InvalidArgumentError,
)


def test_str():
    """Test the string representation of Parser."""
    parser = Parser()
    assert str(parser) == "Parser(args=0, flags=0, options=0, positional=0, required=0)"

    parser.add_flag("verbose").with_short_name("v")
    parser.add_option("output").required()
    parser.add_positional("input").required()
    assert (
        str(parser) == "Parser(args=3, flags=1, options=1, positional=1, required=2)"
    )
    assert repr(parser) == str(parser)


def test_add_returns_builder_with_defaults():
    parser = Parser()
    builder = parser.add_option("output")
    definition = builder.definition
    assert definition.name == "output"
    assert definition.kind is ArgumentKind.OPTION
    assert definition.short_name is None
    assert definition.help == ""
    assert definition.required is False


def test_builder_calls_in_any_order():
    parser = Parser()
    parser.add_option("output").required().with_help("Output file.").with_short_name("o")
    parser.add_option("mode").with_short_name("m").with_help("Mode.").required()

    output = parser.get_argument("output")
    assert output.short_name == "o"
    assert output.help == "Output file."
    assert output.required is True
    assert parser.get_argument("mode") == parser.get_argument("mode")
    assert parser.get_argument("mode").required is True


def test_with_help_overwrites():
    parser = Parser()
    parser.add_flag("verbose").with_help("first").with_help("second")
    assert parser.get_argument("verbose").help == "second"


def test_definitions_are_replaced_not_mutated():
    parser = Parser()
    builder = parser.add_option("output")
    before = builder.definition
    builder.with_help("Output file.")
    assert before.help == ""
    assert parser.get_argument("output").help == "Output file."


def test_duplicate_name():
    parser = Parser()
    parser.add_flag("verbose")
    with pytest.raises(DuplicateNameError) as excinfo:
        parser.add_option("verbose")
    assert excinfo.value.name == "verbose"
    assert len(parser) == 1


def test_duplicate_name_across_kinds():
    parser = Parser()
    parser.add_positional("input")
    with pytest.raises(DuplicateNameError):
        parser.add_flag("input")


def test_duplicate_short_name():
    parser = Parser()
    parser.add_flag("verbose").with_short_name("v")
    with pytest.raises(DuplicateShortNameError) as excinfo:
        parser.add_option("version").with_short_name("v")
    assert excinfo.value.short_name == "v"
    assert excinfo.value.owner == "verbose"
    assert parser.get_argument("version").short_name is None


def test_reset_own_short_name():
    parser = Parser()
    builder = parser.add_flag("verbose").with_short_name("v")
    builder.with_short_name("v")
    builder.with_short_name("V")
    parser.add_flag("very").with_short_name("v")
    assert parser.get_argument("verbose").short_name == "V"
    assert parser.get_argument("very").short_name == "v"


def test_help_is_reserved():
    parser = Parser()
    with pytest.raises(DuplicateNameError):
        parser.add_flag("help")
    with pytest.raises(DuplicateShortNameError):
        parser.add_flag("hostname").with_short_name("h")


def test_positional_cannot_have_short_name():
    parser = Parser()
    with pytest.raises(InvalidArgumentError):
        parser.add_positional("input").with_short_name("i")


def test_required_on_flag_is_an_error():
    parser = Parser()
    with pytest.raises(InvalidArgumentError):
        parser.add_flag("verbose").required()
    assert parser.get_argument("verbose").required is False


@pytest.mark.parametrize("short_name", ["", "ab", "-", " ", "1"])
def test_invalid_short_name(short_name):
    parser = Parser()
    with pytest.raises(InvalidArgumentError):
        parser.add_flag("verbose").with_short_name(short_name)


@pytest.mark.parametrize("name", ["", "--verbose", "-v", "two words", "a=b"])
def test_invalid_name(name):
    parser = Parser()
    with pytest.raises(InvalidArgumentError):
        parser.add_flag(name)


def test_add_with_kind_alias():
    parser = Parser()
    parser.add("output", "opt")
    parser.add("input", "arg")
    assert parser.get_argument("output").is_option
    assert parser.get_argument("input").is_positional
    with pytest.raises(InvalidArgumentError):
        parser.add("other", "bogus")


def test_to_definition_list():
    parser = Parser()
    parser.add_flag("verbose").with_short_name("v").with_help("Verbose output.")
    parser.add_option("output").required()
    parser.add_positional("input")
    assert parser.to_definition_list() == [
        {"name": "verbose", "kind": "flag", "short": "v", "help": "Verbose output."},
        {"name": "output", "kind": "option", "required": True},
        {"name": "input", "kind": "positional"},
    ]


def test_arguments_in_registration_order():
    parser = Parser()
    parser.add_positional("b")
    parser.add_flag("a")
    parser.add_option("c")
    assert [arg.name for arg in parser.arguments] == ["b", "a", "c"]
    assert "a" in parser
    assert "z" not in parser
