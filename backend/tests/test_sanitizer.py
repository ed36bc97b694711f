from services.sanitizer import sanitize


def test_strips_tags():
    assert sanitize("<b>Python</b> developer<br/>") == "Python developer"


def test_removes_javascript_scheme_keeps_text():
    assert sanitize("see javascript:alert(1) here") == "see alert(1) here"


def test_javascript_scheme_case_insensitive():
    assert sanitize("JavaScript:void(0) done") == "void(0) done"


def test_removes_event_handlers():
    assert sanitize('img onerror="x" and ONCLICK=run') == 'img "x" and run'


def test_collapses_three_blank_lines_to_one():
    assert sanitize("Experience\n\n\n\nEducation") == "Experience\n\nEducation"


def test_two_newlines_untouched():
    assert sanitize("a\n\nb") == "a\n\nb"


def test_crlf_blank_runs_collapse():
    assert sanitize("a\r\n\r\n\r\nb") == "a\n\nb"


def test_trims():
    assert sanitize("   padded text \n") == "padded text"


def test_empty():
    assert sanitize("") == ""
