from forge.sanitize import sanitize_for_html, sanitize_for_html_attr, sanitize_for_js


def test_js_escapes_backslash_backtick_and_interpolation():
    assert sanitize_for_js("a\\b") == "a\\\\b"
    assert sanitize_for_js("say `hi`") == "say \\`hi\\`"
    assert sanitize_for_js("${alert(1)}") == "\\${alert(1)}"


def test_js_escapes_backslash_before_other_sequences():
    # An existing backslash must not end up neutralising the added escape.
    assert sanitize_for_js("\\`") == "\\\\\\`"
    assert sanitize_for_js("\\${x}") == "\\\\\\${x}"


def test_js_trims_and_handles_none():
    assert sanitize_for_js("  padded \n") == "padded"
    assert sanitize_for_js(None) == ""


def test_js_leaves_lone_dollar_and_braces():
    assert sanitize_for_js("$5 {ok}") == "$5 {ok}"


def test_html_escapes_markup():
    assert sanitize_for_html("<b>Tom & Jerry</b>") == "&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;"
    assert sanitize_for_html("&lt;") == "&amp;lt;"
    assert sanitize_for_html(None) == ""


def test_html_attr_also_escapes_quotes():
    assert sanitize_for_html_attr('say "<hi>"') == "say &quot;&lt;hi&gt;&quot;"
