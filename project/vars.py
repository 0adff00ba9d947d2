from pathlib import Path

ROOT = Path(__file__).parent.parent

FALLBACK = "<p>An error occurred while processing the Markdown text.</p>"

PLACEHOLDER = "# Title\n\nWrite some text with a [link](https://example.com)."

MIME_TYPES = {
    'css': "text/css",
    'js': "application/javascript",
    'png': "image/png",
    'ico': "image/x-icon"
}
