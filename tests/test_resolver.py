# tests/test_resolver.py

import pytest

from urlshort.core.resolver import DefaultHandler, MapResolver, PathMapping, chain
from urlshort.models.mappings import PathToUrl, Redirect, StaticResponse

GODOC = "https://godoc.org/github.com/gophercises/urlshort"


class TestPathMapping:
    def test_from_pairs(self):
        m = PathMapping([("/a", "https://a.example"), ("/b", "https://b.example")])
        assert len(m) == 2
        assert m["/a"] == "https://a.example"
        assert "/b" in m

    def test_from_records_and_dict(self):
        records = [PathToUrl(path="/a", url="https://a.example")]
        assert PathMapping(records) == PathMapping({"/a": "https://a.example"})

    def test_last_duplicate_wins(self):
        m = PathMapping([("/a", "first"), ("/a", "second")])
        assert len(m) == 1
        assert m["/a"] == "second"

    def test_read_only(self):
        m = PathMapping([("/a", "x")])
        with pytest.raises(TypeError):
            m["/b"] = "y"

    def test_source_dict_changes_do_not_leak(self):
        source = {"/a": "x"}
        m = PathMapping(source)
        source["/b"] = "y"
        assert "/b" not in m


class TestMapResolver:
    def test_match_redirects(self):
        r = MapResolver(PathMapping({"/urlshort-godoc": GODOC}), DefaultHandler())
        outcome = r.resolve("/urlshort-godoc")
        assert outcome == Redirect(url=GODOC)
        assert outcome.status_code == 302

    def test_miss_reaches_default(self):
        r = MapResolver(PathMapping({"/urlshort-godoc": GODOC}), DefaultHandler())
        outcome = r.resolve("/not-a-path")
        assert isinstance(outcome, StaticResponse)
        assert outcome.body == "Hello, world!\n"
        assert outcome.status_code == 200

    @pytest.mark.parametrize("path", ["/urlshort-godoc/", "/URLSHORT-GODOC", "urlshort-godoc", "/urlshort"])
    def test_exact_match_only(self, path):
        r = MapResolver(PathMapping({"/urlshort-godoc": GODOC}), DefaultHandler())
        assert isinstance(r.resolve(path), StaticResponse)

    def test_accepts_plain_dict(self):
        r = MapResolver({"/a": "X"}, DefaultHandler())
        assert r.lookup("/a") == "X"
        assert r.lookup("/b") is None

    def test_logs_match(self, caplog):
        r = MapResolver(PathMapping({"/a": "X"}), DefaultHandler())
        with caplog.at_level("INFO", logger="urlshort.core.resolver"):
            r.resolve("/a")
        assert "Matched: X" in caplog.text

    def test_every_path_resolves_to_its_url(self):
        pairs = [(f"/p{i}", f"https://example.com/{i}") for i in range(20)]
        forward = MapResolver(PathMapping(pairs), DefaultHandler())
        backward = MapResolver(PathMapping(reversed(pairs)), DefaultHandler())
        for path, url in pairs:
            assert forward.resolve(path).url == url
            assert backward.resolve(path).url == url


class TestChain:
    def test_first_mapping_wins(self):
        r = chain(PathMapping({"/a": "X"}), PathMapping({"/a": "Y"}))
        assert r.resolve("/a").url == "X"

    def test_falls_through_levels(self):
        r = chain(PathMapping({"/a": "X"}), PathMapping({"/b": "Y"}))
        assert r.resolve("/b").url == "Y"
        assert isinstance(r.resolve("/c"), StaticResponse)

    def test_custom_default(self):
        r = chain(PathMapping({"/a": "X"}), default=DefaultHandler("nope"))
        assert r.resolve("/z").body == "nope"

    def test_no_mappings_is_default(self):
        default = DefaultHandler()
        assert chain(default=default) is default

    def test_empty_mapping_always_defaults(self):
        r = chain(PathMapping([]))
        for path in ["/", "/a", "/urlshort-godoc"]:
            assert isinstance(r.resolve(path), StaticResponse)
