import unittest
import sys
import os
import io
from contextlib import redirect_stdout

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.main import main


class TestCli(unittest.TestCase):
    def run_cli(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(list(argv))
        return out.getvalue()

    def test_headless_generate(self):
        output = self.run_cli("generate", "--width", "3", "--height", "2", "--seed", "1")
        lines = output.splitlines()
        self.assertEqual(lines[:2], ["◼◼◼", "◼◼◼"])
        self.assertTrue(lines[2].startswith("cells=6/6 carved=5 "))

    def test_custom_glyphs(self):
        output = self.run_cli("generate", "--width", "2", "--height", "2", "--glyphs", ".#")
        self.assertEqual(output.splitlines()[:2], ["##", "##"])

    def test_invalid_dimensions_exit(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli("generate", "--width", "0", "--height", "4")
        self.assertEqual(ctx.exception.code, 2)

    def test_bad_glyphs(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli("generate", "--glyphs", "abc")
        self.assertEqual(ctx.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
