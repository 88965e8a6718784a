#!/usr/bin/env python3

# run from dir above intraline/ dir
# python3 -m pytest intraline/tests/unit/test_tokenizers.py

import unittest

from intraline.diff.base import UnknownTokenizerError
from intraline.diff.tokenizers import (
    TOKENIZERS,
    CodeTokenizer,
    WordTokenizer,
    create_tokenizer,
    tokenize_code,
    tokenize_words,
)


class TestCodeTokenizer(unittest.TestCase):

    def setUp(self):
        self.tokenizer = CodeTokenizer()

    def test_token_classes(self):
        test_cases = [
            # Identifiers
            ("func", ["func"]),
            ("myVariable", ["myVariable"]),
            ("_privateVar", ["_privateVar"]),
            ("var123", ["var123"]),
            # Numbers
            ("123", ["123"]),
            ("3.14", ["3.14"]),
            # String literals
            ('"hello"', ['"hello"']),
            ("'x'", ["'x'"]),
            ('"a b, c"', ['"a b, c"']),
            # Operators
            ("+", ["+"]),
            (":=", [":="]),
            ("==", ["=="]),
            ("!==", ["!=="]),
            # Punctuation, always one character each
            ("()", ["(", ")"]),
            ("{}", ["{", "}"]),
            ("[]", ["[", "]"]),
            (";", [";"]),
            (",", [","]),
            ("..", [".", "."]),
            # Whitespace preserved
            ("a b", ["a", " ", "b"]),
            ("a  b", ["a", "  ", "b"]),
            ("a\tb", ["a", "\t", "b"]),
            (" \t\n ", [" \t\n "]),
            # Combined expressions
            ("x + y", ["x", " ", "+", " ", "y"]),
            ("foo(1, 2)", ["foo", "(", "1", ",", " ", "2", ")"]),
            ("x := 42", ["x", " ", ":=", " ", "42"]),
            ("a.b()", ["a", ".", "b", "(", ")"]),
            # Catch-all
            ("@#$?", ["@", "#", "$", "?"]),
            ("@decorator", ["@", "decorator"]),
        ]

        for text, expected in test_cases:
            with self.subTest(text=text):
                self.assertEqual(self.tokenizer.tokenize(text), expected)

    def test_empty_string(self):
        self.assertEqual(self.tokenizer.tokenize(""), [])

    def test_number_needs_digits_after_point(self):
        self.assertEqual(self.tokenizer.tokenize("3."), ["3", "."])
        self.assertEqual(self.tokenizer.tokenize("1.2.3"), ["1.2", ".", "3"])

    def test_identifier_takes_priority_over_number(self):
        self.assertEqual(self.tokenizer.tokenize("x1 1x"), ["x1", " ", "1", "x"])

    def test_unterminated_quote_falls_through(self):
        self.assertEqual(self.tokenizer.tokenize('"abc'), ['"', 'abc'])

    def test_quote_spans_lines(self):
        self.assertEqual(self.tokenizer.tokenize("'a\nb'"), ["'a\nb'"])

    def test_non_ascii_is_split_per_code_point(self):
        self.assertEqual(self.tokenizer.tokenize("hello 世界"), ["hello", " ", "世", "界"])
        self.assertEqual(self.tokenizer.tokenize("café"), ["caf", "é"])
        self.assertEqual(self.tokenizer.tokenize("a👋b"), ["a", "👋", "b"])

    def test_line_separator_is_kept(self):
        # U+2028 is whitespace to re, U+0085 too, both must survive
        for text in ("a b", "a\u0085b", "a\x00b"):
            with self.subTest(text=repr(text)):
                self.assertEqual(''.join(self.tokenizer.tokenize(text)), text)

    def test_reconstruction(self):
        samples = [
            "",
            "    return fmt.Sprintf(\"%d items\", len(xs)) // done",
            "if (a <= b && c != 'd') { x[i] += 3.5; }",
            "école שלום 👨‍👩‍👧 🇯🇵",
            "\t\t  \r\n",
            "unterminated \"string and 'mixed",
        ]
        for text in samples:
            with self.subTest(text=text):
                self.assertEqual(''.join(self.tokenizer.tokenize(text)), text)
                self.assertNotIn('', self.tokenizer.tokenize(text))

    def test_module_function(self):
        self.assertEqual(tokenize_code("x+1"), ["x", "+", "1"])


class TestWordTokenizer(unittest.TestCase):

    def test_words_and_whitespace_runs(self):
        test_cases = [
            ("Hello world", ["Hello", " ", "world"]),
            ("one  two.", ["one", "  ", "two."]),
            ("  lead", ["  ", "lead"]),
            ("trail\n", ["trail", "\n"]),
            ("", []),
        ]
        for text, expected in test_cases:
            with self.subTest(text=text):
                self.assertEqual(WordTokenizer().tokenize(text), expected)

    def test_module_function(self):
        self.assertEqual(tokenize_words("foo(bar) baz"), ["foo(bar)", " ", "baz"])


class TestTokenizerRegistry(unittest.TestCase):

    def test_registry(self):
        self.assertIs(TOKENIZERS['code'], CodeTokenizer)
        self.assertIs(TOKENIZERS['words'], WordTokenizer)

    def test_create_tokenizer(self):
        self.assertIsInstance(create_tokenizer(), CodeTokenizer)
        self.assertIsInstance(create_tokenizer('WORDS'), WordTokenizer)

    def test_unknown_tokenizer(self):
        with self.assertRaises(UnknownTokenizerError) as ctx:
            create_tokenizer('html_tags')
        self.assertIn('code', str(ctx.exception))
        # Also a LookupError for callers not importing our exceptions
        self.assertIsInstance(ctx.exception, LookupError)


if __name__ == '__main__':
    unittest.main()
