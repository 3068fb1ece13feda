import unittest

from reference_scanner import ReferenceScanner, is_abandoned, reference_patterns


class ReferenceScannerTest(unittest.TestCase):
    def test_patterns(self):
        self.assertEqual(reference_patterns("Hello"), ('"Hello"', '"@Hello"', "'Hello'"))

    def test_each_quoted_form_counts_as_a_reference(self):
        self.assertFalse(is_abandoned("Hello", 'NSLocalizedString("Hello", nil)'))
        self.assertFalse(is_abandoned("Hello", '<string key="text" value="@Hello"/>'))
        self.assertFalse(is_abandoned("Hello", "t('Hello')"))

    def test_unquoted_or_partial_mentions_do_not_count(self):
        corpus = 'let hello = Hello + "HelloWorld" + "@Hello2"'
        self.assertTrue(is_abandoned("Hello", corpus))

    def test_mixed_quotes_do_not_count(self):
        self.assertTrue(is_abandoned("Hello", "\"Hello' + 'Hello\""))

    def test_substring_match_is_accepted(self):
        # no escape awareness: a quoted match inside a longer literal still counts
        self.assertFalse(is_abandoned("A", 'x = "prefix" + "A" + "suffix"'))

    def test_find_abandoned_keeps_order_and_dedupes(self):
        scanner = ReferenceScanner("\"Used\" 'AlsoUsed'")
        result = scanner.find_abandoned(["Zed", "Used", "Alpha", "Zed", "AlsoUsed"])
        self.assertEqual(result, ["Zed", "Alpha"])

    def test_empty_corpus_abandons_everything(self):
        scanner = ReferenceScanner("")
        self.assertTrue(scanner.is_abandoned("Anything"))


if __name__ == "__main__":
    unittest.main()
