import io

from django.test import SimpleTestCase

from app.common import files


class FileUtilsTests(SimpleTestCase):
    def test_safe_filename_basic(self):
        self.assertEqual(files.safe_filename('My Report.pdf'), 'My-Report.pdf')

    def test_safe_filename_strips_paths(self):
        self.assertEqual(files.safe_filename('../../etc/passwd'), 'passwd')

    def test_safe_filename_unicode_and_length(self):
        out = files.safe_filename('Ãccentuated 文件 名称.TXT', max_length=16)
        self.assertTrue(out.endswith('.txt'))
        self.assertLessEqual(len(out), 16)
        self.assertNotIn(' ', out)

    def test_checksum_equivalence_bytes_text_and_stream(self):
        data = b'hello world' * 1000
        c1 = files.compute_checksum(data)
        c2 = files.compute_checksum(io.BytesIO(data))
        c3 = files.compute_checksum(data.decode())
        self.assertEqual(c1.hex, c2.hex)
        self.assertEqual(c1.hex, c3.hex)
        self.assertEqual(c1.algo, 'sha256')

    def test_checksum_rejects_other_types(self):
        with self.assertRaises(TypeError):
            files.compute_checksum(123)

    def test_file_extension(self):
        self.assertEqual(files.file_extension('RFP.Final.PDF'), 'pdf')
        self.assertEqual(files.file_extension('noext'), '')
        self.assertEqual(files.file_extension(None), '')
