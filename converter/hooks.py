from falcon import HTTPUnsupportedMediaType, MEDIA_JSON, MEDIA_URLENCODED


def form_required(req, resp, resource, params):
    if not req.content_type or not req.content_type.startswith(MEDIA_URLENCODED):
        raise HTTPUnsupportedMediaType(description="Submit the form as urlencoded")


def json_required(req, resp, resource, params):
    resp.content_type = MEDIA_JSON
    if not req.content_type or not req.content_type.startswith(MEDIA_JSON):
        raise HTTPUnsupportedMediaType(description="Send a JSON body")
