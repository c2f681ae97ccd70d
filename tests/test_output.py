import pathlib
import unittest

from pgdumpsplit import output

from . import base


class DiscardTestCase(unittest.TestCase):

    def test_write_returns_length(self):
        self.assertEqual(output.Discard().write('abc'), 3)


class FileOutputTestCase(base.TempDirTestCase):

    def setUp(self) -> None:
        super().setUp()
        self.output = output.FileOutput(self.base_dir)

    def tearDown(self) -> None:
        self.output.close()
        super().tearDown()

    def test_starts_suppressed(self):
        self.assertTrue(self.output.suppressed)
        self.assertIsNone(self.output.path)

    def test_redirect_creates_parents(self):
        self.output.redirect(pathlib.PurePosixPath('a/b/c.sql'))
        self.assertTrue((self.base_dir / 'a' / 'b').is_dir())
        self.assertTrue((self.base_dir / 'a' / 'b' / 'c.sql').is_file())
        self.assertFalse(self.output.suppressed)
        self.assertEqual(str(self.output.path), 'a/b/c.sql')

    def test_redirect_flushes_previous(self):
        self.output.redirect(pathlib.PurePosixPath('one.sql'))
        self.output.write('SELECT 1;')
        self.output.redirect(pathlib.PurePosixPath('two.sql'))
        self.assertEqual(self.read('one.sql'), 'SELECT 1;\n')
        self.assertEqual(self.read('two.sql'), '')

    def test_redirect_truncates(self):
        (self.base_dir / 'one.sql').write_text('old\n')
        self.output.redirect(pathlib.PurePosixPath('one.sql'))
        self.output.write('new')
        self.output.close()
        self.assertEqual(self.read('one.sql'), 'new\n')

    def test_reopen_appends(self):
        self.output.redirect(pathlib.PurePosixPath('roles/bob.sql'))
        self.output.write('first')
        self.output.redirect(pathlib.PurePosixPath('roles/alice.sql'))
        self.output.redirect(pathlib.PurePosixPath('roles/bob.sql'))
        self.output.write('second')
        self.output.close()
        self.assertEqual(self.read('roles', 'bob.sql'), 'first\nsecond\n')

    def test_suppress_discards(self):
        self.output.redirect(pathlib.PurePosixPath('one.sql'))
        self.output.write('kept')
        self.output.suppress()
        self.assertTrue(self.output.suppressed)
        self.output.write('dropped')
        self.output.close()
        self.assertEqual(self.read('one.sql'), 'kept\n')
        self.assertEqual([p.name for p in self.base_dir.iterdir()],
                         ['one.sql'])

    def test_flush(self):
        self.output.redirect(pathlib.PurePosixPath('one.sql'))
        self.output.write('SELECT 1;')
        self.output.flush()
        self.assertEqual(self.read('one.sql'), 'SELECT 1;\n')

    def test_utf8(self):
        self.output.redirect(pathlib.PurePosixPath('one.sql'))
        self.output.write("SELECT 'grüße';")
        self.output.close()
        self.assertEqual(
            (self.base_dir / 'one.sql').read_bytes(),
            "SELECT 'grüße';\n".encode('utf-8'))

    def test_ensure_directory(self):
        self.output.ensure_directory(pathlib.PurePosixPath('schemas/public'))
        self.output.ensure_directory(pathlib.PurePosixPath('schemas/public'))
        self.assertTrue((self.base_dir / 'schemas' / 'public').is_dir())


class MemoryOutputTestCase(unittest.TestCase):

    def setUp(self) -> None:
        self.output = output.MemoryOutput()

    def test_records_redirects(self):
        self.output.redirect(pathlib.PurePosixPath('a/one.sql'))
        self.output.suppress()
        self.output.redirect(pathlib.PurePosixPath('two.sql'))
        self.assertEqual(self.output.redirects, ['a/one.sql', None, 'two.sql'])

    def test_contents_survive_close(self):
        self.output.redirect(pathlib.PurePosixPath('one.sql'))
        self.output.write('SELECT 1;')
        self.output.close()
        self.assertEqual(self.output.contents('one.sql'), 'SELECT 1;\n')

    def test_reopen_appends(self):
        self.output.redirect(pathlib.PurePosixPath('one.sql'))
        self.output.write('first')
        self.output.suppress()
        self.output.redirect(pathlib.PurePosixPath('one.sql'))
        self.output.write('second')
        self.assertEqual(self.output.contents('one.sql'), 'first\nsecond\n')

    def test_directories(self):
        self.output.ensure_directory(pathlib.PurePosixPath('schemas/public'))
        self.output.redirect(pathlib.PurePosixPath('roles/bob.sql'))
        self.assertEqual(self.output.directories,
                         {'schemas', 'schemas/public', 'roles'})

    def test_unknown_contents(self):
        with self.assertRaises(KeyError):
            self.output.contents('missing.sql')

    def test_repr(self):
        self.output.redirect(pathlib.PurePosixPath('one.sql'))
        self.assertEqual(repr(self.output), "<MemoryOutput path='one.sql'>")
