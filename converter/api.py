from falcon import before

from converter.hooks import json_required
from converter.markdown import convert
from converter.validation import valid_input


class ConvertEndpoint:
    @before(json_required)
    def on_post(self, req, resp):
        form = req.get_media()
        value = form.get('input') if isinstance(form, dict) else None
        errors = {}
        if value is None:
            errors['input'] = "Value is required"
        else:
            errors['input'] = valid_input(value)
        errors = {k: v for k, v in errors.items() if v}
        if errors:
            resp.media = {'errors': errors}
        else:
            resp.media = {'html': convert(value)}
