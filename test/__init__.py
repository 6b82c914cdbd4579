import logging
import random
import string
import unittest

import fromposix


__all__ = ['fromposix', 'TestBase']


class TestBase(unittest.TestCase):

    def generate_random_text(self, size):
        return ''.join(string.printable[
            random.randrange(0, len(string.printable))] for _ in range(size))

    def setUp(self):
        random.seed(0xBAADF00D)  # guarantee deterministic 'random' inputs
        logging.disable(logging.CRITICAL)

    def tearDown(self):
        logging.disable(logging.NOTSET)

    def assertContains(self, container, member, msg=None):
        self.assertIn(member, container, msg)

    def assertAssignments(self, text, *expected):
        self.assertListEqual(fromposix.parse_posix_exports(text), list(expected))
