import logging

from falcon import App
from falcon.constants import MEDIA_HTML

from converter import api, resources
from project.settings import DEBUG, LOG_LEVEL

logger = logging.getLogger('converter')
logger.setLevel(LOG_LEVEL)
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(handler)

app = App(media_type=MEDIA_HTML)
app.req_options.strip_url_path_trailing_slash = True

app.add_route('/', resources.MainResource())

app.add_route('/api/convert', api.ConvertEndpoint())

if DEBUG:
    app.add_route('/static/{filename}', resources.StaticResource())

application = app
