from os import environ


def env_flag(name, default=False):
    value = environ.get(name, '')
    if not value:
        return default
    return value.lower() in ('1', 'true', 'yes', 'on')


DEBUG = env_flag('MARKDOWN_DEBUG')

LOG_LEVEL = environ.get('MARKDOWN_LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

MAX_INPUT = int(environ.get('MARKDOWN_MAX_INPUT', 100000))
