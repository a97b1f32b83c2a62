import time

from kestrel.context import get_active_contexts


class Breadcrumb(object):
    """
    A single entry of the trail recorded ahead of an event. The client
    never looks inside a breadcrumb, it only collects them and sends
    ``to_dict()`` along with the next captured event.
    """

    def __init__(self, message=None, category=None, level=None, type=None,
                 data=None, timestamp=None):
        if not (message or data):
            raise ValueError('You must pass either `message` or `data`')
        if timestamp is None:
            timestamp = time.time()
        self.message = message
        self.category = category
        self.level = level
        self.type = type or 'default'
        self.data = data
        self.timestamp = timestamp

    def __repr__(self):
        return '<%s: %s %r>' % (type(self).__name__, self.category or self.type,
                                self.message)

    def to_dict(self):
        return {
            'type': self.type,
            'timestamp': self.timestamp,
            'level': self.level,
            'message': self.message,
            'category': self.category,
            'data': self.data,
        }


def record(message=None, timestamp=None, level=None, category=None,
           data=None, type=None):
    """Records a breadcrumb for all active contexts of the current thread.
    This is what integration code should use rather than invoking the
    `add_trail` method on a specific client.

    >>> with client.context:
    >>>     record(message="cache miss", category="cache")
    >>>     client.captureMessage("slow request")
    """
    crumb = Breadcrumb(message=message, category=category, level=level,
                       type=type, data=data, timestamp=timestamp)
    for ctx in get_active_contexts():
        ctx.add_breadcrumb(crumb)
    return crumb
