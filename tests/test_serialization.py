from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from mapwrite.artifact import Artifact
from mapwrite.serialization import map_to_json, output_path, write_artifact


class SerializationTests(unittest.TestCase):
    def test_map_to_json_is_compact_and_ordered(self) -> None:
        payload = map_to_json({'version': 3, 'sources': ['a.js'], 'file': 'a.js'})
        self.assertEqual(payload, '{"version":3,"sources":["a.js"],"file":"a.js"}')

    def test_map_to_json_keeps_non_ascii(self) -> None:
        self.assertEqual(map_to_json({'sources': ['é.js']}), '{"sources":["é.js"]}')

    def test_write_artifact_mirrors_base_relative_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            base = os.path.join(tmp, 'assets')
            artifact = Artifact(
                path=os.path.join(base, 'maps', 'a.js.map'),
                base=base,
                cwd=tmp,
                contents=b'{}',
            )
            out = os.path.join(tmp, 'out')
            self.assertEqual(output_path(artifact), Path(artifact.path))

            written = write_artifact(artifact, out)
            self.assertEqual(written, Path(out, 'maps', 'a.js.map'))
            self.assertEqual(written.read_bytes(), b'{}')


if __name__ == '__main__':
    unittest.main()
