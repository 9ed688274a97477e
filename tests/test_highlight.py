"""Unit tests for Highlighter: contrast boost, overlay marker and restoration."""

from bs4 import BeautifulSoup

from elementsnatch.highlight import CONTRAST_FILTER, OVERLAY_ATTRIBUTE, Highlighter


def _soup(html: str = '<div><p id="a">a</p><p id="b" style="color: red">b</p></div>'):
    return BeautifulSoup(html, "html.parser")


class TestHighlightOn:
    def test_adds_contrast_filter(self):
        soup = _soup()
        el = soup.select_one("#a")
        Highlighter().highlight(el, True)
        assert el["style"] == f"filter: {CONTRAST_FILTER}"

    def test_keeps_other_declarations(self):
        soup = _soup()
        el = soup.select_one("#b")
        Highlighter().highlight(el, True)
        assert el["style"] == f"color: red; filter: {CONTRAST_FILTER}"

    def test_appends_to_existing_filter(self):
        soup = _soup('<p style="filter: blur(1px)">x</p>')
        Highlighter().highlight(soup.p, True)
        assert soup.p["style"] == "filter: blur(1px) contrast(1.25)"

    def test_existing_contrast_left_alone(self):
        soup = _soup('<p style="filter: contrast(2)">x</p>')
        Highlighter().highlight(soup.p, True)
        assert soup.p["style"] == "filter: contrast(2)"

    def test_overlay_follows_latest_element(self):
        soup = _soup()
        hi = Highlighter()
        a, b = soup.select_one("#a"), soup.select_one("#b")
        hi.highlight(a, True)
        hi.highlight(b, True)
        assert hi.target is b
        assert OVERLAY_ATTRIBUTE not in a.attrs
        assert b[OVERLAY_ATTRIBUTE] == "true"

    def test_state_not_stored_on_element(self):
        soup = _soup()
        el = soup.select_one("#a")
        Highlighter().highlight(el, True)
        assert set(el.attrs) == {"id", "style", OVERLAY_ATTRIBUTE}

    def test_non_element_ignored(self):
        Highlighter().highlight(None, True)


class TestHighlightOff:
    def test_restores_missing_style(self):
        soup = _soup()
        el = soup.select_one("#a")
        hi = Highlighter()
        hi.highlight(el, True)
        hi.highlight(el, False)
        assert "style" not in el.attrs
        assert OVERLAY_ATTRIBUTE not in el.attrs

    def test_restores_previous_style(self):
        soup = _soup()
        el = soup.select_one("#b")
        hi = Highlighter()
        hi.highlight(el, True)
        hi.highlight(el, True)
        hi.highlight(el, False)
        assert el["style"] == "color: red"

    def test_off_for_other_element_keeps_overlay(self):
        soup = _soup()
        hi = Highlighter()
        a, b = soup.select_one("#a"), soup.select_one("#b")
        hi.highlight(a, True)
        hi.highlight(b, False)
        assert hi.target is a

    def test_clear_restores_everything(self):
        html = '<div><p id="a">a</p><p id="b" style="color: red">b</p></div>'
        soup = _soup(html)
        hi = Highlighter()
        for el in soup.select("p"):
            hi.highlight(el, True)
        hi.clear()
        assert str(soup) == html
        assert hi.target is None
