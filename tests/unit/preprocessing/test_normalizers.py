"""
Test cases for markup normalization steps.
"""

import unittest

from bracesetter.preprocessing.normalizers import (
    EntityUnescaper,
    MarkupBlockExtractor,
    TagCaseNormalizer,
    extract_markup_block,
    normalize_tag_case,
    unescape_html,
)


class TestEntityUnescaping(unittest.TestCase):
    def test_escaped_document_is_decoded(self):
        text = "&lt;mxfile&gt;&lt;diagram name=&quot;a&quot;&gt;"
        self.assertEqual(unescape_html(text), '<mxfile><diagram name="a">')

    def test_apostrophe(self):
        self.assertEqual(unescape_html("&lt;p&gt;it&#39;s&lt;/p&gt;"), "<p>it's</p>")

    def test_ampersand_decoded_last(self):
        text = "&lt;a title=&quot;x &amp;lt; y&quot;&gt;"
        self.assertEqual(unescape_html(text), '<a title="x &lt; y">')

    def test_raw_markup_left_alone(self):
        text = "<a>&lt;b&gt;</a>"
        self.assertEqual(unescape_html(text), text)

    def test_text_without_escaped_tags_left_alone(self):
        self.assertEqual(unescape_html("Tom &amp; Jerry"), "Tom &amp; Jerry")
        self.assertEqual(unescape_html("&lt; 3"), "&lt; 3")

    def test_needs_unescape(self):
        self.assertTrue(EntityUnescaper.needs_unescape("&lt;!-- c --&gt;"))
        self.assertFalse(EntityUnescaper.needs_unescape("<?xml?>&lt;a&gt;"))


class TestMarkupBlockExtraction(unittest.TestCase):
    def test_prose_removed(self):
        text = 'Sure! <mxfile host="x"><diagram/></mxfile> Enjoy'
        self.assertEqual(
            extract_markup_block(text), '<mxfile host="x"><diagram/></mxfile>'
        )

    def test_root_matched_ignoring_case(self):
        text = "x <MXGRAPHMODEL><root/></MXGRAPHMODEL> y"
        self.assertEqual(
            extract_markup_block(text), "<MXGRAPHMODEL><root/></MXGRAPHMODEL>"
        )

    def test_no_root_element(self):
        text = "<html><body/></html>"
        self.assertEqual(extract_markup_block(text), text)

    def test_root_name_must_be_complete(self):
        self.assertEqual(extract_markup_block("a <diagrams> b"), "a <diagrams> b")

    def test_last_gt_before_root(self):
        self.assertEqual(extract_markup_block("a > b <mxfile "), "a > b <mxfile ")

    def test_custom_root_tags(self):
        step = MarkupBlockExtractor(["svg"])
        self.assertEqual(step("see <svg><g/></svg>!"), "<svg><g/></svg>")


class TestTagCaseNormalization(unittest.TestCase):
    def test_known_tags_canonicalized(self):
        text = '<mxcell id="1"><MXGEOMETRY/></MxCell>'
        self.assertEqual(
            normalize_tag_case(text), '<mxCell id="1"><mxGeometry/></mxCell>'
        )

    def test_spaced_closing_tag(self):
        self.assertEqual(normalize_tag_case("< /mxpoint>"), "< /mxPoint>")

    def test_longer_names_and_text_untouched(self):
        self.assertEqual(normalize_tag_case("<mxcells>"), "<mxcells>")
        self.assertEqual(normalize_tag_case("mxcell <p>"), "mxcell <p>")

    def test_custom_table(self):
        step = TagCaseNormalizer({"Foo": "FooBar"})
        self.assertEqual(step("<foo></FOO>"), "<FooBar></FooBar>")

    def test_mixed_case_table_keys(self):
        table = {"MyNode": "MyNode"}
        self.assertEqual(
            normalize_tag_case("<mynode></MYNODE>", table), "<MyNode></MyNode>"
        )
        self.assertEqual(
            TagCaseNormalizer.normalize("<MYNODE/>", table), "<MyNode/>"
        )

    def test_empty_table(self):
        self.assertEqual(TagCaseNormalizer.normalize("<mxcell>", {}), "<mxcell>")


if __name__ == "__main__":
    unittest.main()
