from io import BytesIO, StringIO
from pathlib import Path

import httpx
import pytest
from pytest_httpx import IteratorStream

from sprig import ParserOptions, load
from sprig.exceptions import DuplicateAttribute, FailedDocumentLoading, TagMismatch
from sprig.plugins import buffer_loader, path_loader, plugin_manager, text_loader

from _sprig.parser import parse_document
from _sprig.plugins import PluginManager
from _sprig.plugins.web_loader import web_loader

TEST_FILE = Path(__file__).resolve().parent / "files" / "page.xml"
TEST_CONTENTS = TEST_FILE.read_text()
LATIN_ONE_FILE = TEST_FILE.parent / "latin-one.xml"


def test_default_loaders_order():
    assert plugin_manager.loaders == [
        path_loader,
        buffer_loader,
        web_loader,
        text_loader,
    ]


def test_buffer_loader():
    with TEST_FILE.open("rb") as f:
        document = load(f)
    assert document.root.local_name == "html"

    with TEST_FILE.open("rt") as f:
        f.read()
        document = load(f)
    assert document.root.local_name == "html"

    assert load(StringIO("<p>text</p>")).root.children == ("text",)


def test_buffer_loader_with_encoding():
    data = "<p>Kaffee für alle</p>".encode("latin-1")
    document = load(BytesIO(data), ParserOptions(encoding="latin-1"))
    assert document.root.children == ("Kaffee für alle",)


def test_path_loader():
    document = load(TEST_FILE)
    assert document.declaration["encoding"] == "UTF-8"
    assert document.root.attributes["lang"].value == "en"


def test_path_loader_with_declared_encoding():
    document = load(LATIN_ONE_FILE)
    assert document.root.children[0].text == "Café crème"


@pytest.mark.parametrize("s", ("", "s"))
def test_web_loader(httpx_mock, s):
    contents = TEST_CONTENTS.encode()
    httpx_mock.add_response(
        stream=IteratorStream(
            contents[i : i + 64] for i in range(0, len(contents), 64)
        )
    )
    url = f"http{s}://sprig.example/page.xml"

    document = load(url)

    assert document.root.local_name == "html"
    assert httpx_mock.get_request().url == url


def test_web_loader_with_custom_client(httpx_mock):
    httpx_mock.add_response(
        content=b'<?xml version="1.0" encoding="UTF-8"?><p>remote</p>'
    )
    client = httpx.Client(headers={"User-Agent": "sprig-tests"})
    config = type("Config", (), {"parser_options": ParserOptions()})()

    document = web_loader("https://sprig.example/remote.xml", config, client=client)

    assert document.root.children == ("remote",)
    assert httpx_mock.get_request().headers["User-Agent"] == "sprig-tests"


def test_web_loader_with_http_error(httpx_mock):
    httpx_mock.add_response(status_code=404)

    with pytest.raises(FailedDocumentLoading) as excinfo:
        load("https://sprig.example/missing.xml")

    assert isinstance(excinfo.value.excuses[web_loader], httpx.HTTPStatusError)


def test_web_loader_ignores_other_strings():
    config = type("Config", (), {"parser_options": ParserOptions()})()
    assert isinstance(web_loader("<p/>", config), str)
    assert isinstance(web_loader("ftp://sprig.example/", config), str)


def test_text_loader():
    document = load(TEST_CONTENTS)
    assert document.root.local_name == "html"

    document = load(TEST_CONTENTS.encode())
    assert document.root.local_name == "html"


def test_text_loader_without_known_encoding():
    with pytest.warns(UserWarning):
        document = load("<p>Müsli</p>".encode())
    assert document.root.children == ("Müsli",)


def test_parser_options_are_passed():
    with pytest.raises(DuplicateAttribute):
        load('<a b="1" b="2"/>', ParserOptions(reject_duplicate_attributes=True))


def test_parsing_errors_are_propagated():
    with pytest.raises(TagMismatch):
        load("<a></b>")


def test_unsupported_source():
    with pytest.raises(FailedDocumentLoading) as excinfo:
        load(42)

    assert excinfo.value.source == 42
    assert set(excinfo.value.excuses) == set(plugin_manager.loaders)
    assert all(isinstance(e, str) for e in excinfo.value.excuses.values())


def test_custom_loader(monkeypatch):
    store = {"greeting": "<p>Hello!</p>"}

    def store_loader(source, config):
        if isinstance(source, str) and source.startswith("store:"):
            assert config.user == "guest"
            return parse_document(store[source[6:]], config.parser_options)
        return "The input value is not a store reference."

    monkeypatch.setattr(
        plugin_manager, "loaders", [store_loader, *plugin_manager.loaders]
    )

    assert load("store:greeting", user="guest").root.children == ("Hello!",)
    assert load("<p/>", user="guest").root.local_name == "p"


def test_register_loader():
    manager = PluginManager()

    @manager.register_loader()
    def first(data, config):
        return "first"

    @manager.register_loader()
    def last(data, config):
        return "last"

    @manager.register_loader(before=last)
    def middle(data, config):
        return "middle"

    @manager.register_loader(before=(first, middle))
    def very_first(data, config):
        return "very first"

    @manager.register_loader(after=(first, middle))
    def between(data, config):
        return "between"

    assert manager.loaders == [very_first, first, middle, between, last]


def test_register_loader_with_two_constraints():
    manager = PluginManager()

    @manager.register_loader()
    def loader(data, config):
        return ""

    with pytest.raises(NotImplementedError):
        manager.register_loader(before=loader, after=loader)


def test_web_loader_with_configured_client(httpx_mock):
    httpx_mock.add_response(content=b"<p>configured</p>")

    with httpx.Client(headers={"X-Reader": "sprig"}) as client:
        with pytest.warns(UserWarning):
            document = load("http://sprig.example/p.xml", http_client=client)

    assert document.root.children == ("configured",)
    assert httpx_mock.get_request().headers["X-Reader"] == "sprig"
