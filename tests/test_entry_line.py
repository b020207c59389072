from amm.core.entry_line import EntryLine


def test_declaration_is_read_between_brackets():
    line = EntryLine("  [Desktop Entry]  ")
    assert line.is_declaration()
    assert line.declaration() == "Desktop Entry"
    assert not line.is_assignment()
    assert line.key() == ""


def test_assignment_splits_on_first_equals():
    line = EntryLine(" Exec = env FOO=bar app ")
    assert line.is_assignment()
    assert line.key() == "Exec"
    assert line.value() == "env FOO=bar app"
    assert line.declaration() == ""


def test_empty_line_is_neither():
    for raw in ("", "   ", "\t\n"):
        line = EntryLine(raw)
        assert not line.is_declaration()
        assert not line.is_assignment()
        assert line.key() == ""
        assert line.value() == ""


def test_half_bracketed_line_is_not_a_declaration():
    assert not EntryLine("[Desktop Entry").is_declaration()
    assert not EntryLine("]").is_declaration()
    assert EntryLine("[]").declaration() == ""


def test_comment_with_equals_is_an_assignment_with_unknown_key():
    line = EntryLine("#Name=x")
    assert line.is_assignment()
    assert line.key() == "#Name"
    assert not line.is_declaration()


def test_assignment_with_empty_value():
    line = EntryLine("Icon=")
    assert line.is_assignment()
    assert line.key() == "Icon"
    assert line.value() == ""
