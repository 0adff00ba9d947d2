from setuptools import setup

setup(
    name="markdown-converter",
    version="1.0.0",
    description="Line-oriented Markdown to HTML converter with a web form",
    packages=["converter", "project"],
    py_modules=["router"],
    python_requires=">=3.8",
    install_requires=[
        "falcon>=3.0",
        "gunicorn",
        "jinja2",
    ],
    extras_require={
        "test": ["pytest"],
    },
)

# templates/ and static/ are read from the checkout, install with pip install -e .
# gunicorn -c gunicorn.conf.py
