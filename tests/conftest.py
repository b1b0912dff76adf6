"""
Shared test fixtures for the snippet_resolver test suite.
"""

import pytest

from snippet_resolver.snippets import SnippetRegistry


@pytest.fixture
def registry():
    """Registry with the snippets used across resolver tests."""
    return SnippetRegistry(
        {
            "a": "a[href]",
            "img": "img[src alt]/",
            "link": "link[rel=stylesheet href]/",
            "link:css2": 'link[href="style2.css"]',
            "bq": "blockquote",
            "adr": "address",
            "str": "strong",
            "meta": "meta/",
            "doc": "html>(head>meta[charset=UTF-8]+title{Document})+body",
            "script": "script[!src]",
            "inp": "input[type=text name value]/",
            "list": "ul.list>li",
            "dl-item": "dt+dd",
        }
    )
