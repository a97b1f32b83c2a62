from kestrel.utils import get_auth_header, is_blank, merge_dicts, varmap
from kestrel.utils.encoding import to_unicode
from kestrel.utils.testutils import TestCase


class MergeDictsTest(TestCase):
    def test_later_wins(self):
        assert merge_dicts({'a': 1, 'b': 2}, {'b': 3}, None, {'c': 4}) == {
            'a': 1, 'b': 3, 'c': 4}

    def test_returns_new_dict(self):
        d = {'a': 1}
        rv = merge_dicts(d)
        assert rv == d
        assert rv is not d


class VarmapTest(TestCase):
    def test_nested(self):
        seen = []

        def func(key, value):
            seen.append((key, value))
            return value

        result = varmap(func, {'a': [1, {'b': 2}]})
        assert result == {'a': [1, {'b': 2}]}
        assert seen == [('a', 1), ('b', 2)]

    def test_cycle(self):
        data = {}
        data['self'] = data
        result = varmap(lambda k, v: v, data)
        assert result == {'self': '<...>'}


class IsBlankTest(TestCase):
    def test_blank(self):
        for value in (None, '', '   ', '\t\n'):
            assert is_blank(value)

    def test_not_blank(self):
        for value in ('root', ' x ', {}, 0):
            assert not is_blank(value)


class AuthHeaderTest(TestCase):
    def test_with_secret(self):
        assert get_auth_header(protocol='6', timestamp=1, client='c/1',
                               api_key='pub', api_secret='sec') == (
            'Sentry sentry_timestamp=1, sentry_client=c/1, sentry_version=6, '
            'sentry_key=pub, sentry_secret=sec')

    def test_without_secret(self):
        assert get_auth_header(protocol='6', timestamp=1, client='c/1',
                               api_key='pub') == (
            'Sentry sentry_timestamp=1, sentry_client=c/1, sentry_version=6, '
            'sentry_key=pub')


class ToUnicodeTest(TestCase):
    def test_bytes(self):
        assert to_unicode(b'caf\xc3\xa9') == 'caf\xe9'

    def test_object(self):
        assert to_unicode(1) == '1'

    def test_broken_str(self):
        class Broken(object):
            def __str__(self):
                raise ValueError

        assert to_unicode(Broken()) == str(repr(Broken))
