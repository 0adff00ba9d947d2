import logging
import re
from collections import namedtuple

from project.vars import FALLBACK

logger = logging.getLogger(__name__)

# control characters and space, nothing else
TRIM = "".join(map(chr, range(33)))

HEADING = re.compile(r"(#{1,6})\s+([^\r\n\x85\u2028\u2029]*)", re.ASCII)
ITEM = re.compile(r"(\*|[0-9]+\.)\s+([^\r\n\x85\u2028\u2029]*)", re.ASCII)
LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
NEWLINE = re.compile(r"\r?\n")

Blank = namedtuple('Blank', '')
Heading = namedtuple('Heading', 'level content')
ListItem = namedtuple('ListItem', 'ordered content')
Text = namedtuple('Text', 'content')

Converted = namedtuple('Converted', 'html')
Failed = namedtuple('Failed', 'error')


def classify(line):
    """Tag one trimmed line as blank, heading, list item or text."""
    if not line:
        return Blank()
    m = HEADING.fullmatch(line)
    if m:
        return Heading(len(m.group(1)), m.group(2))
    m = ITEM.fullmatch(line)
    if m:
        return ListItem(m.group(1) != "*", m.group(2))
    return Text(line)


def linkify(text):
    """Replace [label](target) with anchors, leave anything malformed."""
    return LINK.sub('<a href="\\2">\\1</a>', text)


class Markdown:
    def __init__(self):
        self.out = []
        self.block = []
        self.handlers = {
            Blank: self.render_blank,
            Heading: self.render_heading,
            ListItem: self.render_item,
            Text: self.render_text,
        }

    def flush_block(self):
        paragraph = " ".join(self.block).strip(TRIM)
        self.block = []
        if paragraph:
            logger.debug("Ending paragraph")
            self.out.append(f"<p>{paragraph}</p>")

    def render_blank(self, line):
        self.flush_block()

    def render_heading(self, line):
        self.flush_block()
        self.out.append("<h%d>%s</h%d>" % (line.level, line.content, line.level))

    def render_item(self, line):
        self.flush_block()
        tag = "ol" if line.ordered else "ul"
        self.out.append(f"<{tag}><li>{line.content}</li></{tag}>")

    def render_text(self, line):
        content = linkify(line.content)
        logger.debug("Converted line with links: %s", content)
        self.block.append(content)

    def render_line(self, line):
        line = line.strip(TRIM)
        logger.debug("Processing line: %s", line)
        token = classify(line)
        self.handlers[type(token)](token)

    def render(self, lines):
        for line in lines:
            self.render_line(line)

        # Render trailing paragraph
        self.flush_block()
        return "".join(self.out)


def render(text):
    """Convert text to HTML, reporting faults as a Failed value."""
    logger.info("Starting Markdown to HTML conversion")
    try:
        html = Markdown().render(NEWLINE.split(text))
    except Exception as e:
        logger.exception("Error converting Markdown to HTML")
        return Failed(e)
    logger.info("Markdown to HTML conversion completed successfully")
    return Converted(html)


def convert(text):
    result = render(text)
    if isinstance(result, Failed):
        return FALLBACK
    return result.html
