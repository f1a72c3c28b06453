"""Round-trip and idempotence tests across parse and serialize."""

import pytest

from scripts.astappcnt import AstArray, AstNumber, parse, serialize

RICH_DOCUMENT = r"""
// Staff application
APP {
  id: "example_staff_app";
  name: "Staff Application";
  description: "Line one
line two";
  group_id: 12345;
  pass_score: 75.5;
  target_role: "groups/12345/roles/99999";
  status: draft;
  negative: -4;
  weights: [0.1, 2.25, -3.0];
}

STYLE {
  primary_color: "#ff4b6e";
  background: "gradient:linear,#000,#fff";
  button_shape: rounded;
}

QUESTION "q1" TYPE "multiple_choice" {
  text: "Which \"quoted\" option?";
  points: 10;
  options: [{id:"a", text:"A", correct:true}, {id:"b", text:"B", correct:false}];
}

QUESTION "q2" TYPE "short_answer" {
  text: "Explain C:\\path handling";
  rubric: {min_words: 20, keywords: ["path", "escape"], strict: false};
  hints: ["first hint is fairly long to push past the width", "second hint is also quite long", "third"];
  nested: [[1, 2], [], {}];
}
"""


class TestRoundTrip:
    def test_parse_serialize_parse_is_equal(self):
        document = parse(RICH_DOCUMENT)
        assert parse(serialize(document)) == document

    def test_serialize_is_idempotent(self):
        once = serialize(parse(RICH_DOCUMENT))
        assert serialize(parse(once)) == once

    def test_number_kinds_survive(self):
        document = parse(serialize(parse(RICH_DOCUMENT)))
        assert not document.app["group_id"].is_float
        assert document.app["pass_score"].is_float
        weights = document.app["weights"]
        assert isinstance(weights, AstArray)
        assert all(isinstance(item, AstNumber) and item.is_float for item in weights.items)

    def test_key_order_survives(self):
        document = parse(serialize(parse(RICH_DOCUMENT)))
        assert list(document.app) == [
            "id",
            "name",
            "description",
            "group_id",
            "pass_score",
            "target_role",
            "status",
            "negative",
            "weights",
        ]
        assert list(document.questions[1].properties) == ["text", "rubric", "hints", "nested"]

    def test_long_array_is_multiline_after_round_trip(self):
        output = serialize(parse(RICH_DOCUMENT))
        assert "  hints: [\n" in output
        assert '  options: [{id:"a", text:"A", correct:true}, {id:"b", text:"B", correct:false}];\n' in output

    @pytest.mark.parametrize(
        ("literal", "expected"),
        [
            ('"a\\"b\\\\c"', '"a\\"b\\\\c"'),
            ("5.0", "5.0"),
            ("007", "7"),
            ("-0.50", "-0.5"),
        ],
    )
    def test_scalar_canonical_forms(self, literal, expected):
        output = serialize(parse(f"APP {{ v: {literal}; }}"))
        assert output == f"APP {{\n  v: {expected};\n}}\n"
