"""
Test cases for incremental processing of streamed output.
"""

import json
import unittest
import xml.etree.ElementTree as ET

from bracesetter import JSON_ARRAY_PROCESSOR, MARKUP_PROCESSOR, StreamingProcessor

JSON_CHUNKS = ["```json\n[", '{"id": "a"', '}, {"id": "b"}]', "\n```"]

MARKUP_CHUNKS = [
    "Here you go:\n<mxfile><diagram>",
    '<mxGraphModel><root><mxCell id="0"/',
    '><mxCell id="1" parent="0"/></root>',
    "</mxGraphModel></diagram></mxfile>",
]


class TestStreamingProcessor(unittest.TestCase):
    def test_json_snapshots_are_arrays(self):
        stream = StreamingProcessor(JSON_ARRAY_PROCESSOR)
        snapshots = [json.loads(s) for s in stream.iter_snapshots(JSON_CHUNKS)]

        self.assertEqual(
            snapshots,
            [
                [],
                [{"id": "a"}],
                [{"id": "a"}, {"id": "b"}],
                [{"id": "a"}, {"id": "b"}],
            ],
        )
        self.assertEqual(stream.chunk_count, 4)
        self.assertEqual(stream.text, "".join(JSON_CHUNKS))

    def test_markup_snapshots_are_well_formed(self):
        stream = StreamingProcessor(MARKUP_PROCESSOR)
        for chunk in MARKUP_CHUNKS:
            root = ET.fromstring(stream.feed(chunk))
            self.assertEqual(root.tag, "mxfile")

        cells = ET.fromstring(stream.finish()).findall(".//mxCell")
        self.assertEqual([cell.get("id") for cell in cells], ["0", "1"])

    def test_empty_chunks_ignored(self):
        stream = StreamingProcessor(JSON_ARRAY_PROCESSOR)
        stream.feed("[1")
        stream.feed("")
        stream.feed(None)
        self.assertEqual(stream.chunk_count, 1)
        self.assertEqual(json.loads(stream.snapshot()), [1])

    def test_nothing_received(self):
        stream = StreamingProcessor(JSON_ARRAY_PROCESSOR)
        self.assertEqual(stream.snapshot(), "")

    def test_reset(self):
        stream = StreamingProcessor(JSON_ARRAY_PROCESSOR)
        stream.feed("[1, 2")
        stream.reset()
        self.assertEqual(stream.text, "")
        self.assertEqual(stream.chunk_count, 0)
        self.assertEqual(json.loads(stream.feed("[3")), [3])


if __name__ == "__main__":
    unittest.main()
