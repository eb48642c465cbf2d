import pytest

from forge.main import describe_result, request_tool


def test_request_tool_derives_slug(forge_paths):
    result = request_tool("  Line Tidy  ", "", "clean up lines", forge_paths)

    assert result.slug == "line-tidy"
    view = describe_result(result)
    assert view["source"] == "fallback"
    assert view["modes"][0] == {"value": "normalize", "label": "Normalize whitespace"}
    assert view["files"][-1].endswith("generated-line-tidy.test.mjs")
    assert view["registry_added"] is True


def test_request_tool_uses_given_slug(forge_paths):
    assert request_tool("Base64 pal", "pal", "", forge_paths).slug == "pal"


@pytest.mark.parametrize("name, slug", [("   ", ""), ("Tool", "Not OK")])
def test_request_tool_rejects_bad_input(forge_paths, name, slug):
    with pytest.raises(ValueError):
        request_tool(name, slug, "", forge_paths)
