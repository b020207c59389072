import pytest

from amm.core.representation import (
    MenuEnd,
    MenuStart,
    Program,
    SubcategoryEnd,
    SubcategoryStart,
)
from amm.core.transformer import JwmTransformer, Transformer, encode, strip_field_code


def test_jwm_renders_nested_menus():
    nodes = [
        MenuStart(),
        SubcategoryStart("Accessories", "accessories.png"),
        Program("Mousepad", "accessories-text-editor.png", "mousepad %F"),
        SubcategoryEnd("Accessories"),
        MenuEnd(),
    ]
    assert JwmTransformer().render(nodes) == (
        "<JWM>\n"
        '  <Menu label="Accessories" icon="accessories.png">\n'
        '    <Program label="Mousepad" icon="accessories-text-editor.png">mousepad</Program>\n'
        "  </Menu>\n"
        "</JWM>\n"
    )


def test_accept_dispatches_to_node_kind():
    transformer = JwmTransformer()
    assert MenuStart().accept(transformer) == "<JWM>"
    assert SubcategoryEnd("Games").accept(transformer) == "  </Menu>"


def test_program_escapes_markup():
    line = JwmTransformer().program(Program('Tom & "Jerry"', "<icon>", "sh -c 'a > b'"))
    assert line == (
        '    <Program label="Tom &amp; &quot;Jerry&quot;" icon="&lt;icon&gt;">'
        "sh -c &apos;a &gt; b&apos;</Program>"
    )


def test_encode_leaves_plain_text():
    assert encode("plain text") == "plain text"
    assert encode("&<>\"'") == "&amp;&lt;&gt;&quot;&apos;"


@pytest.mark.parametrize(
    "command, expected",
    [
        ("mousepad %F", "mousepad"),
        ("/usr/bin/vlc --started-from-file %U", "/usr/bin/vlc --started-from-file"),
        ("app %u %f", "app %u"),
        ("app --flag", "app --flag"),
        ("app", "app"),
        ("%F", "%F"),
        ("app\t%i  ", "app"),
        ("echo 100 %%", "echo 100 %%"),
    ],
)
def test_strip_field_code(command, expected):
    assert strip_field_code(command) == expected


def test_base_transformer_rejects_unknown_nodes():
    with pytest.raises(TypeError):
        Transformer().transform(object())


def test_base_transformer_requires_rendering_rules():
    with pytest.raises(NotImplementedError):
        MenuStart().accept(Transformer())
