import shlex

import pytest

from runes.spell import (
    Spell,
    cast_spell,
    expand,
    map_spells,
    parse_name,
    parse_spell,
    seek_spell,
)


def _redirect(path):
    return shlex.quote(str(path))


def test_parse_name_bare():
    assert parse_name("build all the things") == "build"


def test_parse_name_quoted():
    assert parse_name('"my spell" trailing') == "my spell"


def test_parse_name_no_alnum_prefix():
    assert parse_name("-x") == ""


def test_parse_spell_reads_until_closing_brace():
    lines = iter(["{\n", "  a = 1  \n", "\n", "!echo hi\n", "}\n", "after\n"])
    spell = parse_spell(lines, "build {")
    assert spell.name == "build"
    assert spell.commands == ["a = 1", "!echo hi"]
    assert next(lines) == "after\n"


def test_parse_spell_without_closing_brace_takes_everything():
    spell = parse_spell(iter(["x = 1", "y = 2"]), "s")
    assert spell.commands == ["x = 1", "y = 2"]


def test_map_spells_later_wins():
    first = Spell("a", ["x = 1"])
    second = Spell("a", ["x = 2"])
    other = Spell("b")
    mapping = map_spells([first, other, second])
    assert mapping["a"] is second
    assert set(mapping) == {"a", "b"}


def test_seek_spell():
    spell = Spell("all")
    spells = {"all": spell}
    assert seek_spell(spells, "all") is spell
    assert seek_spell(spells, "missing") is None


def test_expand_double_dollar():
    assert expand("cost $$5", {}, {}) == "cost $5"


def test_expand_variable_before_constant():
    result = expand("${v}", {"v": "from-var"}, {"v": "from-const"})
    assert result == "from-var"


def test_expand_falls_back_to_constant():
    assert expand("${CC}", {}, {"CC": "gcc"}) == "gcc"


def test_expand_surrounding_text_kept():
    assert expand("pre-${a}-post", {"a": "mid"}, {}) == "pre-mid-post"


def test_expand_unknown_variable(capsys):
    assert expand("[${q}]", {}, {}) == "[]"
    assert "Unknown variable: q" in capsys.readouterr().err


def test_expand_unterminated_reference():
    with pytest.raises(ValueError):
        expand("${open", {}, {})


def test_expand_plain_text_unchanged():
    assert expand("no references", {}, {}) == "no references"


def test_cast_spell_assignments_return_variables():
    spell = Spell("s", ["a = 1", "b = ${a}2"])
    result = cast_spell({"s": spell}, {}, spell)
    assert result["a"] == "1"
    assert result["b"] == result["a"] + "2"


def test_cast_spell_does_not_mutate_given_variables():
    spell = Spell("s", ["a = changed"])
    given = {"a": "orig"}
    result = cast_spell({"s": spell}, {}, spell, given)
    assert given == {"a": "orig"}
    assert result["a"] == "changed"


def test_cast_spell_quiet_shell(tmp_path, capfd):
    target = tmp_path / "out.txt"
    spell = Spell("s", ["word = hello", f"$ echo ${{word}} > {_redirect(target)}"])
    cast_spell({"s": spell}, {}, spell)
    assert target.read_text().strip() == "hello"
    assert "echo" not in capfd.readouterr().out


def test_cast_spell_echoing_shell(tmp_path, capfd):
    target = tmp_path / "out.txt"
    line = f"echo shown > {_redirect(target)}"
    spell = Spell("s", [f"!{line}"])
    cast_spell({"s": spell}, {}, spell)
    assert line in capfd.readouterr().out
    assert target.read_text().strip() == "shown"


def test_cast_other_spell_with_arguments(tmp_path):
    target = tmp_path / "out.txt"
    child = Spell("child", [f"$ echo ${{x}}${{y}} > {_redirect(target)}"])
    main = Spell("main", ["cast child x=ab, y=${x}"])
    spells = map_spells([child, main])
    cast_spell(spells, {}, main)
    assert target.read_text().strip() == "ab" * 2


def test_cast_argument_uses_constant(tmp_path):
    target = tmp_path / "out.txt"
    child = Spell("child", [f"$ echo ${{x}} > {_redirect(target)}"])
    main = Spell("main", ["cast child x=${NAME}"])
    cast_spell(map_spells([child, main]), {"NAME": "constval"}, main)
    assert target.read_text().strip() == "constval"


def test_cast_argument_without_equals_names_itself(tmp_path):
    target = tmp_path / "out.txt"
    child = Spell("child", [f"$ echo ${{flag}} > {_redirect(target)}"])
    main = Spell("main", ["cast child flag"])
    cast_spell(map_spells([child, main]), {}, main)
    assert target.read_text().strip() == "flag"


def test_cast_quoted_spell_name(tmp_path):
    target = tmp_path / "out.txt"
    child = Spell("two words", [f"$ echo ${{x}} > {_redirect(target)}"])
    main = Spell("main", ['cast "two words" x=quoted'])
    cast_spell(map_spells([child, main]), {}, main)
    assert target.read_text().strip() == "quoted"


def test_caller_variables_not_visible_to_cast_spell(capsys):
    child = Spell("child", ["seen = ${secret_value}"])
    main = Spell("main", ["secret_value = hidden", "cast child"])
    result = cast_spell(map_spells([child, main]), {}, main)
    assert "Unknown variable: secret_value" in capsys.readouterr().err
    assert "seen" not in result


def test_cast_unknown_spell_reported(capsys):
    main = Spell("main", ["cast nope"])
    cast_spell({"main": main}, {}, main)
    assert "Couldn't find spell 'nope'" in capsys.readouterr().err


def test_unknown_command_reported(capsys):
    spell = Spell("s", ["gibberish"])
    result = cast_spell({"s": spell}, {}, spell)
    assert "Unknown command 'gibberish' in spell s" in capsys.readouterr().err
    assert result == {}