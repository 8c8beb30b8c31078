import threading

from folio.services import highlighter


def test_get_highlighter_is_a_singleton():
    highlighter.reset_highlighter()
    first = highlighter.get_highlighter()
    assert highlighter.get_highlighter() is first


def test_concurrent_first_use_builds_one_instance(monkeypatch):
    highlighter.reset_highlighter()
    built = []
    real = highlighter.Highlighter

    def counting(themes):
        built.append(themes)
        return real(themes)

    monkeypatch.setattr(highlighter, "Highlighter", counting)
    results = []
    threads = [
        threading.Thread(target=lambda: results.append(highlighter.get_highlighter()))
        for _ in range(8)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(built) == 1
    assert all(r is results[0] for r in results)
    highlighter.reset_highlighter()


def test_code_to_html_uses_theme_class():
    html = highlighter.highlight_code("print('hi')", "python", theme="light")
    assert 'class="highlight highlight-light"' in html
    assert "print" in html


def test_unknown_language_falls_back_to_plain_text():
    html = highlighter.highlight_code("<b>x</b>", "not-a-language")
    assert "highlight-dark" in html
    assert "&lt;b&gt;" in html


def test_stylesheet_covers_both_themes():
    css = highlighter.get_highlighter().stylesheet()
    assert ".highlight-light" in css
    assert ".highlight-dark" in css
