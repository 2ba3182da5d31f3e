from __future__ import annotations

import posixpath
import unittest

from mapwrite.errors import HookError
from mapwrite.hooks import load_hook, parse_hook_spec


class HookTests(unittest.TestCase):
    def test_parse_hook_spec(self) -> None:
        self.assertEqual(parse_hook_spec(' posixpath : basename '), ('posixpath', 'basename'))

    def test_spec_requires_module_and_function(self) -> None:
        for spec in ('', 'posixpath', 'posixpath:', ':basename'):
            with self.assertRaises(HookError, msg=spec) as ctx:
                parse_hook_spec(spec)
            self.assertEqual(ctx.exception.code, 'MW005')

    def test_load_hook_returns_callable(self) -> None:
        self.assertIs(load_hook('posixpath:basename'), posixpath.basename)

    def test_missing_attribute(self) -> None:
        with self.assertRaises(HookError) as ctx:
            load_hook('posixpath:no_such_function')
        self.assertEqual(ctx.exception.code, 'MW006')

    def test_non_callable_attribute(self) -> None:
        with self.assertRaises(HookError) as ctx:
            load_hook('posixpath:sep')
        self.assertEqual(ctx.exception.code, 'MW007')

    def test_missing_module(self) -> None:
        with self.assertRaises(HookError) as ctx:
            load_hook('mapwrite_no_such_module:fn')
        self.assertEqual(ctx.exception.code, 'MW008')


if __name__ == '__main__':
    unittest.main()
