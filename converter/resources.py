from falcon import HTTPFound, HTTPNotFound, before
from falcon.status_codes import HTTP_200

from converter.classes import Draft
from converter.forms import get_input
from converter.hooks import form_required
from converter.jinja import render
from converter.markdown import convert
from converter.validation import valid_input
from project.vars import MIME_TYPES, ROOT


class StaticResource:
    binary = ['png', 'ico']

    def on_get(self, req, resp, filename):  # noqa
        name, dot, ext = filename.rpartition('.')
        path = ROOT / 'static' / filename
        if not name or ext not in MIME_TYPES or not path.is_file():
            raise HTTPNotFound
        resp.status = HTTP_200
        resp.content_type = MIME_TYPES[ext]
        resp.cache_control = ["max-age=3600000"]
        if ext in self.binary:
            resp.data = path.read_bytes()
        else:
            resp.text = path.read_text()


class MainResource:
    def __init__(self, draft=None):
        self.draft = draft if draft is not None else Draft()

    def on_get(self, req, resp):
        markdown, html = self.draft.pair
        resp.text = render(
            page='index', view='index', markdown=markdown, html=html, errors={}
        )

    @before(form_required)
    def on_post(self, req, resp):
        form = req.get_media()
        markdown = get_input(form)
        errors = {}
        errors['input'] = valid_input(markdown)
        errors = {k: v for k, v in errors.items() if v}
        if errors:
            resp.text = render(
                page='index', view='index', markdown=markdown, html="",
                errors=errors
            )
        else:
            self.draft.update(markdown, convert(markdown))
            raise HTTPFound('/')
