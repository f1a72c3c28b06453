"""Tests for the canonical text serializer."""

from scripts.astappcnt import (
    AstArray,
    AstBareWord,
    AstBool,
    AstDocument,
    AstNumber,
    AstObject,
    AstSerializer,
    AstString,
    QuestionRecord,
    serialize,
)


def _app(**properties) -> AstDocument:
    return AstDocument(app=properties)


class TestLayout:
    def test_empty_document(self):
        assert serialize(AstDocument()) == "\n"

    def test_block_order_and_blank_lines(self):
        document = AstDocument(
            questions=[
                QuestionRecord(id="q1", type="text", properties={"text": AstString(value="One")}),
                QuestionRecord(id="q2", type="text"),
            ],
            style={"font": AstString(value="Arial")},
            app={"name": AstString(value="Test")},
        )
        assert serialize(document) == (
            "APP {\n"
            '  name: "Test";\n'
            "}\n"
            "\n"
            "STYLE {\n"
            '  font: "Arial";\n'
            "}\n"
            "\n"
            'QUESTION "q1" TYPE "text" {\n'
            '  text: "One";\n'
            "}\n"
            "\n"
            'QUESTION "q2" TYPE "text" {\n'
            "}\n"
        )

    def test_question_header_is_escaped(self):
        document = AstDocument(questions=[QuestionRecord(id='a"b', type="x\\y")])
        assert serialize(document).startswith(r'QUESTION "a\"b" TYPE "x\\y" {')

    def test_reserved_question_keys_are_not_emitted(self):
        question = QuestionRecord(id="q1", type="text")
        question.properties["id"] = AstString(value="shadow")
        question.properties["points"] = AstNumber(value=1)
        output = serialize(AstDocument(questions=[question]))
        assert "shadow" not in output
        assert "  points: 1;\n" in output

    def test_custom_indent_size(self):
        serializer = AstSerializer(indent_size=4)
        output = serializer.serialize(_app(a=AstNumber(value=1)))
        assert output == "APP {\n    a: 1;\n}\n"

    def test_from_config_uses_defaults_for_missing_keys(self):
        serializer = AstSerializer.from_config({"inline_width": 10})
        assert serializer.indent_size == 2
        assert serializer.inline_width == 10


class TestScalars:
    def test_string_escaping(self):
        output = serialize(_app(s=AstString(value='a"b\\c')))
        assert '  s: "a\\"b\\\\c";\n' in output

    def test_newline_in_string_is_literal(self):
        output = serialize(_app(s=AstString(value="one\ntwo")))
        assert '  s: "one\ntwo";\n' in output

    def test_booleans(self):
        output = serialize(_app(yes=AstBool(value=True), no=AstBool(value=False)))
        assert "  yes: true;\n  no: false;\n" in output

    def test_integer_never_gains_decimal_point(self):
        assert "  n: 10;\n" in serialize(_app(n=AstNumber(value=10)))

    def test_float_keeps_decimal_point(self):
        output = serialize(_app(a=AstNumber(value=5.0), b=AstNumber(value=-0.25)))
        assert "  a: 5.0;\n  b: -0.25;\n" in output

    def test_float_is_written_without_exponent(self):
        output = serialize(_app(big=AstNumber(value=1e20), small=AstNumber(value=1.5e-7)))
        assert "  big: 100000000000000000000.0;\n" in output
        assert "  small: 0.00000015;\n" in output

    def test_bare_word_is_unquoted(self):
        assert "  shape: square;\n" in serialize(_app(shape=AstBareWord(value="square")))


class TestArrays:
    def test_empty_array(self):
        assert "  a: [];\n" in serialize(_app(a=AstArray()))

    def test_short_array_is_inline(self):
        value = AstArray(items=[AstNumber(value=1), AstString(value="x"), AstBool(value=True)])
        assert '  a: [1, "x", true];\n' in serialize(_app(a=value))

    def test_eighty_characters_stays_inline(self):
        text = "x" * 76
        output = serialize(_app(a=AstArray(items=[AstString(value=text)])))
        assert f'  a: ["{text}"];\n' in output

    def test_eighty_one_characters_breaks_lines(self):
        text = "x" * 77
        output = serialize(_app(a=AstArray(items=[AstString(value=text)])))
        assert output == f'APP {{\n  a: [\n    "{text}",\n  ];\n}}\n'

    def test_nested_long_arrays_indent_per_level(self):
        inner = AstArray(items=[AstString(value=ch * 30) for ch in "abc"])
        outer = AstArray(items=[inner, AstNumber(value=1)])
        output = serialize(_app(m=outer))
        assert output == (
            "APP {\n"
            "  m: [\n"
            "    [\n"
            f'      "{"a" * 30}",\n'
            f'      "{"b" * 30}",\n'
            f'      "{"c" * 30}",\n'
            "    ],\n"
            "    1,\n"
            "  ];\n"
            "}\n"
        )

    def test_custom_inline_width(self):
        serializer = AstSerializer(inline_width=5)
        output = serializer.serialize(_app(a=AstArray(items=[AstNumber(value=1), AstNumber(value=2)])))
        assert output == "APP {\n  a: [\n    1,\n    2,\n  ];\n}\n"


class TestObjects:
    def test_object_is_compact(self):
        value = AstObject(properties={"id": AstString(value="a"), "correct": AstBool(value=True)})
        assert '  o: {id:"a", correct:true};\n' in serialize(_app(o=value))

    def test_empty_object(self):
        assert "  o: {};\n" in serialize(_app(o=AstObject()))

    def test_long_object_stays_on_one_line(self):
        value = AstObject(
            properties={
                "text": AstString(value="y" * 90),
                "list": AstArray(items=[AstString(value="z" * 90)]),
            }
        )
        output = serialize(_app(o=value))
        assert f'  o: {{text:"{"y" * 90}", list:["{"z" * 90}"]}};\n' in output

    def test_objects_inside_long_array(self):
        items = [AstObject(properties={"id": AstString(value=str(i)), "text": AstString(value="t" * 20)}) for i in range(3)]
        output = serialize(_app(options=AstArray(items=items)))
        assert "  options: [\n" in output
        assert f'    {{id:"0", text:"{"t" * 20}"}},\n' in output
        assert output.endswith("  ];\n}\n")
