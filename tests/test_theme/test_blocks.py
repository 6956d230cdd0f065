"""Tests for block extraction, variable parsing, merging and composition."""

import pytest

from clyro.theme import (
    block_body,
    compose_block,
    extract_block,
    extract_variables,
    merge_variables,
)


# ---------------------------------------------------------------------------
# extract_block
# ---------------------------------------------------------------------------


class TestExtractBlock:
    def test_simple_block(self):
        text = "body { color: red; }\n:root { --a: 1; }\n.x {}"
        assert extract_block(text, ":root") == ":root { --a: 1; }"

    def test_missing_keyword_returns_empty(self):
        assert extract_block("body { color: red; }", ":root") == ""

    def test_missing_brace_returns_empty(self):
        assert extract_block("@layer base;", "@layer base") == ""

    def test_nested_braces(self):
        text = "@layer base {\n  * { a: b; }\n  body { c: d; }\n}\n.after { x: y; }"
        assert extract_block(text, "@layer base") == (
            "@layer base {\n  * { a: b; }\n  body { c: d; }\n}"
        )

    def test_deeply_nested(self):
        text = "@media x { a { b { c { } } } } tail"
        assert extract_block(text, "@media x") == "@media x { a { b { c { } } } }"

    def test_unbalanced_runs_to_end_of_input(self):
        text = "pre :root { --a: 1; a { b: c;"
        assert extract_block(text, ":root") == ":root { --a: 1; a { b: c;"

    def test_first_occurrence_wins(self):
        text = ":root { --a: 1; }\n:root { --a: 2; }"
        assert extract_block(text, ":root") == ":root { --a: 1; }"

    def test_braces_in_strings_are_counted(self):
        text = ':root { --q: "}"; --r: 1; }'
        assert extract_block(text, ":root") == ':root { --q: "}'

    def test_selector_mode_skips_mentions_without_brace(self):
        text = "@custom-variant dark (&:is(.dark *));\n\n.dark {\n  --a: 1;\n}"
        assert extract_block(text, ".dark", selector=True) == ".dark {\n  --a: 1;\n}"

    def test_plain_mode_takes_first_mention(self):
        text = "@custom-variant dark (&:is(.dark *));\n.dark { --a: 1; }"
        assert extract_block(text, ".dark").startswith(".dark *));")

    def test_selector_mode_missing(self):
        assert extract_block("a:is(.dark *) x", ".dark", selector=True) == ""


class TestBlockBody:
    def test_body_between_braces(self):
        assert block_body(":root {\n  --a: 1;\n}") == "\n  --a: 1;\n"

    def test_body_of_unbalanced_block(self):
        assert block_body(":root { --a: 1;") == " --a: 1;"

    def test_body_of_empty_string(self):
        assert block_body("") == ""


# ---------------------------------------------------------------------------
# extract_variables
# ---------------------------------------------------------------------------


class TestExtractVariables:
    def test_basic(self):
        body = "\n  --radius: 0.625rem;\n  --background: oklch(1 0 0);\n"
        assert extract_variables(body) == {
            "--radius": "0.625rem",
            "--background": "oklch(1 0 0)",
        }

    def test_preserves_order(self):
        body = "--b: 2;\n--a: 1;\n--c: 3;"
        assert list(extract_variables(body)) == ["--b", "--a", "--c"]

    def test_last_duplicate_wins(self):
        body = "--a: 1;\n--b: 2;\n--a: 3;"
        result = extract_variables(body)
        assert result == {"--a": "3", "--b": "2"}
        assert list(result) == ["--a", "--b"]

    def test_inline_comment_stripped(self):
        body = "  --a: red; /* brand */\n  /* note */ --b: blue;"
        assert extract_variables(body) == {"--a": "red", "--b": "blue"}

    def test_non_matching_lines_ignored(self):
        body = "\n  color: red;\n  --ok: 1;\n  --missing-semicolon: 2\n\n"
        assert extract_variables(body) == {"--ok": "1"}

    def test_value_up_to_final_semicolon(self):
        body = '--font: "a;b", serif;'
        assert extract_variables(body) == {"--font": '"a;b", serif'}

    def test_value_without_space_after_colon(self):
        assert extract_variables("--a:1;") == {"--a": "1"}

    def test_multiline_comment_not_handled(self):
        body = "/* start\n--hidden: 1;\nend */"
        assert extract_variables(body) == {"--hidden": "1"}

    def test_empty_body(self):
        assert extract_variables("") == {}


# ---------------------------------------------------------------------------
# merge_variables
# ---------------------------------------------------------------------------


class TestMergeVariables:
    def test_user_value_wins(self):
        merged = merge_variables({"--primary": "blue"}, {"--primary": "red"})
        assert merged == {"--primary": "red"}

    def test_union_of_keys(self):
        merged = merge_variables({"--primary": "blue"}, {"--custom": "1px"})
        assert merged == {"--primary": "blue", "--custom": "1px"}

    def test_template_order_then_user_only(self):
        template = {"--a": "9", "--c": "3", "--e": "5"}
        user = {"--x": "x", "--e": "user-e", "--a": "1", "--y": "y"}
        merged = merge_variables(template, user)
        assert list(merged) == ["--a", "--c", "--e", "--x", "--y"]
        assert merged["--a"] == "1"
        assert merged["--e"] == "user-e"

    def test_empty_user(self):
        assert merge_variables({"--a": "1"}, {}) == {"--a": "1"}

    def test_inputs_not_mutated(self):
        template = {"--a": "1"}
        user = {"--b": "2"}
        merge_variables(template, user)
        assert template == {"--a": "1"}
        assert user == {"--b": "2"}


# ---------------------------------------------------------------------------
# compose_block
# ---------------------------------------------------------------------------


class TestComposeBlock:
    def test_format(self):
        assert compose_block(":root", {"--a": "1", "--b": "red"}) == (
            ":root {\n  --a: 1;\n  --b: red;\n}"
        )

    def test_empty_map(self):
        assert compose_block(".dark", {}) == ".dark {\n\n}"

    @pytest.mark.parametrize(
        "variables",
        [
            {},
            {"--a": "1"},
            {"--radius": "0.625rem", "--ring": "oklch(0.708 0 0)"},
            {"--font": '"Inter", sans-serif', "--grid": "repeat(2, minmax(0, 1fr))"},
            {"--shadow": "0 1px 2px rgb(0 0 0 / 5%)", "--x_y-z": "calc(1px + 2px)"},
        ],
    )
    def test_round_trip(self, variables):
        block = compose_block(":root", variables)
        assert extract_variables(block_body(block)) == variables
        assert extract_variables(block) == variables
