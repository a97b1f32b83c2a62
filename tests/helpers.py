import gzip
import threading

from http.server import BaseHTTPRequestHandler, HTTPServer


class StoreHandler(BaseHTTPRequestHandler):
    def do_POST(self):
        length = int(self.headers.get('Content-Length') or 0)
        body = self.rfile.read(length)
        self.server.requests.append({
            'path': self.path,
            'headers': self.headers,
            'body': body,
        })

        status, payload, encoding = self.server.reply
        self.send_response(status)
        if encoding == 'gzip':
            payload = gzip.compress(payload)
            self.send_header('Content-Encoding', 'gzip')
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format, *args):
        pass


class StoreServer(object):
    """
    A local Sentry store endpoint answering every POST with ``reply``
    and remembering what it received.
    """

    def __init__(self, status=200, payload=b'{"id":"abc123"}', encoding=None):
        self.httpd = HTTPServer(('127.0.0.1', 0), StoreHandler)
        self.httpd.requests = []
        self.httpd.reply = (status, payload, encoding)
        self.thread = threading.Thread(target=self.httpd.serve_forever)
        self.thread.daemon = True

    def __enter__(self):
        self.thread.start()
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.httpd.shutdown()
        self.httpd.server_close()
        self.thread.join()

    @property
    def requests(self):
        return self.httpd.requests

    @property
    def port(self):
        return self.httpd.server_address[1]

    def dsn(self, scheme='http'):
        return '%s://public:secret@127.0.0.1:%d/1' % (scheme, self.port)

    def url(self):
        return 'http://127.0.0.1:%d/api/1/store/' % self.port
