"""
bracesetter demonstration script.
"""

import bracesetter


def main():
    print("bracesetter - Structural Repair Demo")
    print("=" * 40)

    json_examples = [
        ('[{"a":1}, {"b":2},]', "Trailing comma"),
        ('[{"a": 1}, {"b": 2', "Truncated mid-object"),
        ('[{"start":{"id":"a"}},{"start":{"id":"c"}]', "Object still open at ]"),
        ('[{"id": 1}{"id": 2}]', "Missing comma between objects"),
        ('{"label": "unterminated', "Unterminated string"),
    ]

    for i, (text, description) in enumerate(json_examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {text}")
        print(f"Output: {bracesetter.repair_json(text)}")

    markup_examples = [
        ("<div><p>Hello</div>", "Missing </p>"),
        ("<root><item>one</item><item>two", "Truncated document"),
        ('<mxCell id="2"><mxGeometry x="1"/></mxCell', "Cut-off closing tag"),
    ]

    offset = len(json_examples)
    for i, (text, description) in enumerate(markup_examples, offset + 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {text}")
        print(f"Output: {bracesetter.fix_markup(text)}")

    print(f"\n{offset + len(markup_examples) + 1}. Full element-array preset")
    answer = (
        "Here is the diagram:\n"
        "```json\n"
        '{"elements": [{"id": "a", "type": "rectangle"}, {"id": "b", "type": "arrow"'
        "\n```\nLet me know if you want changes."
    )
    print(f"Input:\n{answer}")
    print(f"Output:\n{bracesetter.process_json_array(answer)}")


if __name__ == "__main__":
    main()
