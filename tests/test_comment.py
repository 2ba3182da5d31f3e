from __future__ import annotations

import unittest

from mapwrite.comment import data_uri, decode_data_uri, detect_newline, find_source_mapping_url, format_comment


class FormatCommentTests(unittest.TestCase):
    def test_js_like_extensions_use_line_comment(self) -> None:
        for ext in ('js', 'mjs', 'cjs', 'jsx', '.js', 'JS'):
            self.assertEqual(format_comment(ext, 'a.js.map'), '\n//# sourceMappingURL=a.js.map\n', ext)

    def test_css_uses_block_comment(self) -> None:
        self.assertEqual(format_comment('css', 'a.css.map'), '\n/*# sourceMappingURL=a.css.map */\n')

    def test_other_extensions_get_no_comment(self) -> None:
        for ext in ('txt', 'html', ''):
            self.assertEqual(format_comment(ext, 'a.map'), '')

    def test_uses_given_newline(self) -> None:
        self.assertEqual(format_comment('js', 'a.js.map', '\r\n'), '\r\n//# sourceMappingURL=a.js.map\r\n')


class DetectNewlineTests(unittest.TestCase):
    def test_defaults_to_lf(self) -> None:
        self.assertEqual(detect_newline(''), '\n')
        self.assertEqual(detect_newline('one line'), '\n')

    def test_crlf_when_dominant(self) -> None:
        self.assertEqual(detect_newline('a\r\nb\r\nc\n'), '\r\n')
        self.assertEqual(detect_newline('a\r\nb\nc\n'), '\n')


class DataUriTests(unittest.TestCase):
    def test_data_uri_shape(self) -> None:
        self.assertEqual(data_uri('{}'), 'data:application/json;charset=utf8;base64,e30=')
        self.assertEqual(data_uri('{}', 'utf-8'), 'data:application/json;charset=utf-8;base64,e30=')

    def test_decode_reverses_encoding(self) -> None:
        payload = '{"sources":["héllo.js"]}'
        self.assertEqual(decode_data_uri(data_uri(payload)), payload)

    def test_decode_rejects_other_uris(self) -> None:
        with self.assertRaises(ValueError):
            decode_data_uri('../maps/a.js.map')


class FindUrlTests(unittest.TestCase):
    def test_finds_trailing_js_annotation(self) -> None:
        text = 'var a;\n//# sourceMappingURL=../maps/a.js.map\n'
        self.assertEqual(find_source_mapping_url(text), '../maps/a.js.map')

    def test_finds_trailing_css_annotation(self) -> None:
        text = 'a{}\r\n/*# sourceMappingURL=a.css.map */\r\n'
        self.assertEqual(find_source_mapping_url(text), 'a.css.map')

    def test_missing_annotation(self) -> None:
        self.assertIsNone(find_source_mapping_url('var a;\n'))


if __name__ == '__main__':
    unittest.main()
