import threading

from kestrel.context import Context, get_active_contexts
from kestrel.packet import RequestFactory, UserFactory
from kestrel.utils.testutils import InMemoryClient, TestCase


class ContextTest(TestCase):
    def test_simple(self):
        context = Context()
        context.merge({'foo': 'bar'})
        context.merge({'biz': 'baz'})
        context.merge({'biz': 'boz'})
        assert context.get() == {
            'foo': 'bar',
            'biz': 'boz',
        }

    def test_user(self):
        context = Context()
        context.merge({'user': {'id': 1}})
        context.merge({'user': {'email': 'foo@example.com'}})
        assert context.get() == {
            'user': {
                'id': 1,
                'email': 'foo@example.com',
            }
        }

    def test_clear(self):
        context = Context()
        context.merge({'user': {'id': 1}})
        context.breadcrumbs = ['crumb']
        context.clear()
        assert context.get() == {}
        assert context.breadcrumbs is None

    def test_activation(self):
        context = Context()
        assert context not in get_active_contexts()
        context.activate()
        assert context in get_active_contexts()
        context.deactivate()
        assert context not in get_active_contexts()
        with context:
            assert context in get_active_contexts()
        assert context not in get_active_contexts()

    def test_add_breadcrumb(self):
        context = Context()
        context.add_breadcrumb('one')
        context.add_breadcrumb('two')
        assert context.breadcrumbs == ['one', 'two']

    def test_thread_local_data(self):
        context = Context()
        context.merge({'user': {'id': 1}})
        seen = []

        def worker():
            seen.append(dict(context.get()))
            context.merge({'user': {'id': 2}})

        t = threading.Thread(target=worker)
        t.start()
        t.join()

        assert seen == [{}]
        assert context.get() == {'user': {'id': 1}}


class FactoryTest(TestCase):
    def test_user_factory(self):
        client = InMemoryClient()
        factory = UserFactory(client.context)
        assert factory.create() is None
        client.user_context({'id': 5})
        assert factory.create() == {'id': 5}

    def test_request_factory(self):
        client = InMemoryClient()
        factory = RequestFactory(client.context)
        assert factory.create() is None
        client.http_context({'url': 'http://example.com', 'method': 'GET'})
        assert factory.create() == {'url': 'http://example.com', 'method': 'GET'}

    def test_context_reaches_packet(self):
        client = InMemoryClient()
        client.user_context({'id': 5})
        client.http_context({'url': 'http://example.com'})
        client.captureMessage('foo')
        assert client.events[0]['user'] == {'id': 5}
        assert client.events[0]['request'] == {'url': 'http://example.com'}
