"""
Streaming functionality demonstration for bracesetter.
"""

import bracesetter


def main():
    print("bracesetter - Streaming Features Demo")
    print("=" * 40)

    # Example 1: JSON element array arriving in chunks
    print("\n1. Element array preview while streaming")
    chunks = [
        "Sure, here it is:\n```json\n[",
        '{"id": "a", "type": "rect',
        'angle"}, {"id": "b",',
        ' "type": "ellipse"}]\n```',
    ]
    stream = bracesetter.StreamingProcessor(bracesetter.JSON_ARRAY_PROCESSOR)
    for n, snapshot in enumerate(stream.iter_snapshots(chunks), 1):
        print(f"  after chunk {n}: {snapshot!r}")

    # Example 2: Diagram XML arriving in chunks
    print("\n2. Diagram XML preview while streaming")
    chunks = [
        "```xml\n<mxfile><diagram><mxGraphModel><root>",
        '<mxCell id="0"/><mxCell id="1" parent="0"/>',
        '<mxCell id="2" value="Start" vertex="1" parent="1"><mxGeometry',
        ' x="10" y="10" width="80" height="40" as="geometry"/></mxCell>',
    ]
    stream = bracesetter.StreamingProcessor(bracesetter.MARKUP_PROCESSOR)
    for chunk in chunks:
        stream.feed(chunk)
    print(f"  final: {stream.finish()}")


if __name__ == "__main__":
    main()
