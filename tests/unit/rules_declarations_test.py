"""Unit tests for declaration parsing, naming and one-declaration rules."""

from lintstyle.core.languages import get_profile
from lintstyle.core.lines import split_lines
from lintstyle.core.rules import NamingCaseRule, OneDeclarationPerStatementRule, Rule, SemicolonRule
from lintstyle.core.rules.declarations import iter_declarations
from lintstyle.core.tokenizer import tokenize
from lintstyle.models import SourceFile, Violation

_JS_DECLARATIONS = get_profile("javascript").declaration_keywords


def _check(rule: Rule, text: str, language: str = "javascript") -> list[Violation]:
    source = SourceFile.from_text("sample", text, language)
    return rule.check(source, tokenize(text, get_profile(language)), split_lines(text))


def _names(text: str) -> list[list[str | None]]:
    return [
        [d.name.text if d.name else None for d in declaration.declarators]
        for declaration in iter_declarations(tokenize(text), _JS_DECLARATIONS)
    ]


class TestIterDeclarations:
    def test_single_declarator(self) -> None:
        assert _names("var a = 1;") == [["a"]]

    def test_multiple_declarators(self) -> None:
        assert _names("var a = 1, b = f(x, y), c;") == [["a", "b", "c"]]

    def test_destructuring_has_no_simple_name(self) -> None:
        assert _names("const { a, b } = obj;") == [[None]]

    def test_newline_terminates_without_semicolon(self) -> None:
        declarations = list(iter_declarations(tokenize("let a = 1\nlet b = 2\n"), _JS_DECLARATIONS))
        assert len(declarations) == 2
        assert declarations[0].terminator is not None
        assert declarations[0].terminator.text == "\n"

    def test_trailing_comma_continues_on_next_line(self) -> None:
        assert _names("var a = 1,\n    b = 2;") == [["a", "b"]]

    def test_multiline_initializer(self) -> None:
        assert _names("const f = function () {\n  return 1;\n};") == [["f"]]

    def test_for_of_loop_ends_at_closing_paren(self) -> None:
        (declaration,) = iter_declarations(tokenize("for (const k of keys) {}"), _JS_DECLARATIONS)
        assert declaration.terminator is not None
        assert declaration.terminator.text == ")"

    def test_type_annotation_is_skipped(self) -> None:
        assert _names("let count: number = 0;") == [["count"]]

    def test_member_access_is_not_a_declaration(self) -> None:
        assert _names("obj.var = 1;") == []

    def test_literal_initializer_detection(self) -> None:
        declarations = list(
            iter_declarations(tokenize("const A = 1; const B = -2; const C = 'x'; const D = f();"), _JS_DECLARATIONS)
        )
        assert [d.declarators[0].has_literal_initializer for d in declarations] == [True, True, True, False]


class TestOneDeclarationPerStatement:
    def test_single_declaration_passes(self) -> None:
        assert _check(OneDeclarationPerStatementRule(), "var a = 1;\nvar b = 2;\n") == []

    def test_multiple_declarations_are_reported(self) -> None:
        violations = _check(OneDeclarationPerStatementRule(), "var a = 1, b = 2;\n")
        assert len(violations) == 1
        assert violations[0].line == 1
        assert violations[0].column == 1
        assert "declares 2 variables" in violations[0].message

    def test_commas_inside_initializer_do_not_count(self) -> None:
        assert len(_check(OneDeclarationPerStatementRule(), "var a = [1, 2], b;\n")) == 1
        assert _check(OneDeclarationPerStatementRule(), "var a = f(1, 2);\n") == []

    def test_keywords_can_be_configured(self) -> None:
        rule = OneDeclarationPerStatementRule(declaration_keywords=frozenset({"let"}))
        assert _check(rule, "var a, b;\n") == []
        assert len(_check(rule, "let a, b;\n")) == 1


class TestNamingCase:
    def test_lower_camel_case_variables_pass(self) -> None:
        assert _check(NamingCaseRule(), "var userName = getName();\nlet _private = x;\n") == []

    def test_snake_case_variable_is_reported(self) -> None:
        violations = _check(NamingCaseRule(), "var user_name = getName();\n")
        assert len(violations) == 1
        assert violations[0].column == 5
        assert "lowerCamelCase" in violations[0].message

    def test_function_names(self) -> None:
        assert _check(NamingCaseRule(), "function doThing() {}\n") == []
        assert len(_check(NamingCaseRule(), "function Do_thing() {}\n")) == 1

    def test_generator_function_name(self) -> None:
        assert len(_check(NamingCaseRule(), "function* bad_name() {}\n")) == 1

    def test_class_names_are_upper_camel_case(self) -> None:
        assert _check(NamingCaseRule(), "class UserStore {}\n") == []
        violations = _check(NamingCaseRule(), "class userStore {}\n")
        assert len(violations) == 1
        assert "UpperCamelCase" in violations[0].message

    def test_constant_literal_must_be_upper_snake_case(self) -> None:
        assert _check(NamingCaseRule(), "const MAX_SIZE = 10;\n") == []
        violations = _check(NamingCaseRule(), "const maxSize = 10;\n")
        assert len(violations) == 1
        assert "UPPER_SNAKE_CASE" in violations[0].message

    def test_constant_with_computed_value_is_lower_camel_case(self) -> None:
        assert _check(NamingCaseRule(), "const fs = require('fs');\n") == []
        assert len(_check(NamingCaseRule(), "const FS = require('fs');\n")) == 1

    def test_regular_variable_with_literal_may_be_upper_snake_case(self) -> None:
        assert _check(NamingCaseRule(), "var MINUTE = 60;\nvar minute = 60;\n") == []
        assert len(_check(NamingCaseRule(), "var SECOND = 1 * 1000;\n")) == 1

    def test_every_declarator_is_checked(self) -> None:
        violations = _check(NamingCaseRule(), "let good = 1, bad_one = 2;\n")
        assert [v.message for v in violations] == ["Name 'bad_one' should be lowerCamelCase or UPPER_SNAKE_CASE."]

    def test_custom_patterns(self) -> None:
        rule = NamingCaseRule(variable_pattern=r"^[a-z][a-z0-9_]*$")
        assert _check(rule, "var user_name = f();\n") == []

    def test_names_in_strings_and_comments_are_ignored(self) -> None:
        assert _check(NamingCaseRule(), "// var bad_name = 1;\nvar s = 'class foo';\n") == []

    def test_rust_profile_uses_its_own_keywords(self) -> None:
        rule = NamingCaseRule(variable_pattern=r"^[a-z][a-z0-9_]*$")
        assert _check(rule, "let mut total_count = f();\n", language="rust") == []
        assert len(_check(rule, "struct point {}\n", language="rust")) == 1


class TestSemicolon:
    def test_disabled_by_default(self) -> None:
        assert SemicolonRule.default_enabled is False

    def test_missing_semicolon_is_reported(self) -> None:
        violations = _check(SemicolonRule(), "var a = 1\nvar b = 2;\nlet c = 3")
        assert [v.line for v in violations] == [1, 3]

    def test_for_loop_header_is_exempt(self) -> None:
        assert _check(SemicolonRule(), "for (const k of keys) {}\n") == []
