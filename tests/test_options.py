from __future__ import annotations

import unittest

from mapwrite.errors import InvalidOption
from mapwrite.options import Computed, Literal, WriteOptions, as_dynamic, resolve


class DynamicValueTests(unittest.TestCase):
    def test_literal_and_computed_resolution(self) -> None:
        self.assertEqual(resolve(Literal('/src'), object()), '/src')
        self.assertEqual(resolve(Computed(lambda artifact: artifact.upper()), 'a'), 'A')
        self.assertIsNone(resolve(None, object()))

    def test_raw_values_are_wrapped(self) -> None:
        self.assertEqual(as_dynamic(''), Literal(''))
        self.assertIsInstance(as_dynamic(lambda artifact: None), Computed)
        self.assertIsNone(as_dynamic(None))
        literal = Literal('x')
        self.assertIs(as_dynamic(literal), literal)


class WriteOptionsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        options = WriteOptions()
        self.assertTrue(options.include_content)
        self.assertTrue(options.add_comment)
        self.assertIsNone(options.source_root)
        self.assertEqual(options.charset, 'utf8')
        self.assertFalse(options.debug)

    def test_from_mapping_accepts_camel_and_snake_case(self) -> None:
        options = WriteOptions.from_mapping(
            {'includeContent': False, 'add_comment': False, 'sourceRoot': '', 'destPath': 'dist'}
        )
        self.assertFalse(options.include_content)
        self.assertFalse(options.add_comment)
        self.assertEqual(options.source_root, Literal(''))
        self.assertEqual(options.dest_path, 'dist')

    def test_unknown_option_is_rejected(self) -> None:
        with self.assertRaises(InvalidOption) as ctx:
            WriteOptions.from_mapping({'sourceRot': '/src'})
        self.assertEqual(ctx.exception.code, 'MW004')

    def test_wrong_types_are_rejected(self) -> None:
        bad = [
            {'include_content': 'yes'},
            {'debug': 1},
            {'map_file': 'maps/a.map'},
            {'map_sources': 3},
            {'source_root': 3},
            {'source_mapping_url_prefix': True},
            {'dest_path': 5},
            {'charset': ''},
        ]
        for kwargs in bad:
            with self.assertRaises(InvalidOption, msg=str(kwargs)):
                WriteOptions(**kwargs)


if __name__ == '__main__':
    unittest.main()
