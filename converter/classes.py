from threading import Lock


class Draft:
    """Last submitted markdown and its HTML, shared by all requests."""

    def __init__(self, markdown="", html=""):
        self.lock = Lock()
        self.markdown = markdown
        self.html = html

    @property
    def pair(self):
        with self.lock:
            return self.markdown, self.html

    def update(self, markdown, html):
        with self.lock:
            self.markdown = markdown
            self.html = html
