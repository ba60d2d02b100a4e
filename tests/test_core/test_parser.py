import pytest
from pydantic import ValidationError

from promptgen.core.chunker import group
from promptgen.core.errors import InvalidSyntax, ParseError, UnterminatedLabelLiteral
from promptgen.core.lexer import scan
from promptgen.core.models import Prompt, Response
from promptgen.core.parser import build, parse, parse_file


def build_from(source):
    return build(group(scan(source)), source)


def test_build_prompts_with_responses():
    prompts = build_from(
        '> (NONHUMAN) "Are you human?"\n'
        '< (HUMAN) "Yes"\n'
        '< (NONHUMAN) "No"\n'
        '> (HUMAN) "Nice to meet you"\n'
    )

    assert prompts == [
        Prompt(
            text="Are you human?",
            label="NONHUMAN",
            responses=(
                Response(text="Yes", label="HUMAN"),
                Response(text="No", label="NONHUMAN"),
            ),
        ),
        Prompt(text="Nice to meet you", label="HUMAN"),
    ]
    assert not prompts[1].has_responses


def test_leading_responses_are_dropped():
    prompts = build_from('< "a"\n< "b"\n> "Who are you?"\n< "c"')

    assert len(prompts) == 1
    assert prompts[0].text == "Who are you?"
    assert [r.text for r in prompts[0].responses] == ["c"]


def test_responses_stop_at_next_prompt():
    prompts = build_from('> "one"\n< "a"\n< "b"\n> "two"\n< "c"')

    assert [[r.text for r in p.responses] for p in prompts] == [["a", "b"], ["c"]]


def test_build_nothing():
    assert build([], "") == []


def test_parse_sample(sample_source):
    prompts = parse(sample_source)

    assert prompts == [
        Prompt(
            text="Are you a human?",
            label="START",
            responses=(
                Response(text="Yes, I am", label=None),
                Response(text="No", label="ANS_NO"),
            ),
        ),
        Prompt(
            text="That's very weird! Care to try again?",
            label="ANS_NO",
            responses=(Response(text="Please!", label="START"),),
        ),
    ]


def test_parse_keeps_newlines_in_text():
    prompts = parse('> "line one\nline two"')
    assert prompts[0].text == "line one\nline two"


def test_parse_empty_label():
    prompts = parse('> () "a"\n< () "b"\n> "c"')

    assert prompts[0].label == ""
    assert prompts[0].responses[0].label == ""
    assert prompts[1].label is None


def test_parse_unterminated_label():
    with pytest.raises(UnterminatedLabelLiteral) as exc:
        parse("> (")

    assert (exc.value.line, exc.value.column) == (1, 3)


def test_parse_locates_syntax_errors():
    with pytest.raises(InvalidSyntax) as exc:
        parse('> "a"\n<')

    assert (exc.value.line, exc.value.column) == (2, 1)


def test_parse_error_family():
    with pytest.raises(ParseError):
        parse('> (A) (B) "x"')


def test_prompts_are_frozen(sample_prompts):
    with pytest.raises(ValidationError):
        sample_prompts[0].text = "changed"

    assert isinstance(sample_prompts[0].responses, tuple)


def test_parse_file(script_file, sample_prompts):
    assert parse_file(script_file) == sample_prompts


def test_empty_label_survives_tree_building():
    prompts = parse('> () "a"\n< () "b"\n< "c"')

    assert prompts[0].label == ""
    assert prompts[0].responses[0].label == ""
    assert prompts[0].responses[1].label is None
