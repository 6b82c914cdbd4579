from fromposix.lib.posix.decoder import decode

from .. import TestBase


class TestValueDecoder(TestBase):

    def test_unquoted(self):
        self.assertEqual(decode('bar'), 'bar')
        self.assertEqual(decode('$HOME'), '$HOME')
        self.assertEqual(decode(''), '')

    def test_unquoted_escapes(self):
        self.assertEqual(decode('a\\ b'), 'a b')
        self.assertEqual(decode('\\$HOME'), '$HOME')
        self.assertEqual(decode('\\n'), 'n')
        self.assertEqual(decode('a\\'), 'a\\')

    def test_double_quoted_escaped_quote(self):
        self.assertEqual(decode('"a\\"b"'), 'a"b')

    def test_double_quoted_escapes(self):
        self.assertEqual(decode('"\\$x\\`\\\\"'), '$x`\\')
        self.assertEqual(decode('"a\\\nb"'), 'a\nb')

    def test_double_quoted_backslash_before_ordinary_character(self):
        self.assertEqual(decode('"a\\nb"'), 'a\\nb')
        self.assertEqual(decode('"C:\\Users"'), 'C:\\Users')

    def test_single_quoted_is_literal(self):
        self.assertEqual(decode("'a\\nb'"), 'a\\nb')
        self.assertEqual(decode("'\"$x\"'"), '"$x"')

    def test_mixed_quotes(self):
        self.assertEqual(decode('"it\'s"'), "it's")
        self.assertEqual(decode('"a"b\'c\''), 'abc')
        self.assertEqual(decode('/usr/"local bin"/x'), '/usr/local bin/x')

    def test_concatenated_quote_idiom(self):
        self.assertEqual(decode("'it'\\''s'"), "it's")

    def test_unterminated_quotes_are_closed(self):
        self.assertEqual(decode("'abc"), 'abc')
        self.assertEqual(decode('"abc'), 'abc')
        self.assertEqual(decode('"a\\'), 'a\\')

    def test_decode_is_total(self):
        for size in range(1, 200, 7):
            text = self.generate_random_text(size)
            self.assertIsInstance(decode(text), str)

    def test_decode_is_idempotent_without_metacharacters(self):
        for size in range(1, 200, 7):
            text = ''.join(c for c in self.generate_random_text(size) if c not in '\'"\\')
            self.assertEqual(decode(text), text)
            self.assertEqual(decode(decode(text)), text)
