import logging

from jinja2 import Environment, FileSystemBytecodeCache, FileSystemLoader

from project.settings import DEBUG
from project.vars import PLACEHOLDER, ROOT

logger = logging.getLogger(__name__)

env = Environment(autoescape=True)

env.auto_reload = DEBUG
env.bytecode_cache = FileSystemBytecodeCache()
env.loader = FileSystemLoader(ROOT / 'templates')

env.filters['rows'] = lambda txt, least=12: max(least, txt.count("\n") + 2)

env.globals['brand'] = "Markdown Converter"
env.globals['placeholder'] = PLACEHOLDER
env.globals['v'] = 1


def render(page, **kwargs):
    logger.debug("render %s", page)
    template = env.get_template(f'pages/{page}.html')
    return template.render(**kwargs)
