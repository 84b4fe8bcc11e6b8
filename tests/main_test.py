import contextlib
import io
import os
import tempfile
import unittest
from unittest import mock

from phrasal import main


class MainTestCase(unittest.TestCase):

    def test_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "program.phr")
            with open(path, "w") as file:
                file.write("token(iov.name)\nname == \"hi\"\nphrase name;\nnl\n")

            stdout = io.StringIO()
            with contextlib.redirect_stdout(stdout):
                main.main([path])

        self.assertEqual("hi\n\n", stdout.getvalue())

    def test_missing_file(self):
        with contextlib.redirect_stderr(io.StringIO()) as stderr:
            with self.assertRaises(SystemExit) as ctx:
                main.main([os.path.join(tempfile.gettempdir(), "no", "such", "program.phr")])

        self.assertEqual(1, ctx.exception.code)
        self.assertIn("could not be opened", stderr.getvalue())

    def test_conversion_fault(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "program.phr")
            with open(path, "w") as file:
                file.write("phrase \"before\";\nx == deci\nphrase \"after\"\n")

            stdout = io.StringIO()
            with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit) as ctx:
                    main.main([path])

        self.assertEqual(1, ctx.exception.code)
        self.assertEqual("before\n", stdout.getvalue())

    def test_command_line_mode(self):
        with mock.patch("phrasal.main.Shell") as shell:
            main.main(["--sentinel", "run"])

        sess = shell.call_args[0][0]
        self.assertEqual("run", sess.sentinel)
        self.assertEqual("<in>", sess.path)
        shell.return_value.cmdloop.assert_called_once_with()

    def test_debug(self):
        with mock.patch("phrasal.main.logging.basicConfig") as basic_config, \
                mock.patch("phrasal.main.Shell"):
            main.main(["--debug"])
        basic_config.assert_called_once_with(level=main.logging.DEBUG)


if __name__ == '__main__':
    unittest.main()
