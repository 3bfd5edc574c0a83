"""Tests for the documentation comment detector."""

from __future__ import annotations

from convscout.detectors import CommentingDetector

_DOCSTRING = '''
def greet(name):
    """Greet someone.

    Args:
        name: Who to greet.
    """
    return name
'''


def test_detects_google_docstrings_after_five_files(repo_builder, make_context) -> None:
    repo_builder.write({f"pkg/mod{i}.py": _DOCSTRING for i in range(5)})

    conventions = CommentingDetector().detect(make_context())

    assert [c.description for c in conventions] == ["Google-style Python docstrings"]
    assert conventions[0].category == "documentation"


def test_four_documented_files_are_not_enough(repo_builder, make_context) -> None:
    repo_builder.write({f"pkg/mod{i}.py": _DOCSTRING for i in range(4)})

    assert CommentingDetector().detect(make_context()) == []


def test_jsdoc_is_only_matched_in_javascript_family(repo_builder, make_context) -> None:
    jsdoc = "/**\n * @param {string} name\n */\nexport function f(name) {}\n"
    files = {f"src/f{i}.ts": jsdoc for i in range(5)}
    files.update({f"docs/f{i}.py": jsdoc for i in range(5)})
    repo_builder.write(files)

    descriptions = [c.description for c in CommentingDetector().detect(make_context())]

    assert descriptions == ["JSDoc comments for function documentation"]


def test_reports_work_item_markers_at_ten(repo_builder, make_context) -> None:
    markers = "\n".join(
        ["// TODO: one", "// FIXME: two", "// HACK: three", "// XXX four", "// todo: five"] * 2
    )
    repo_builder.write({"src/legacy.go": "package legacy\n" + markers + "\n"})

    conventions = CommentingDetector().detect(make_context())

    assert [c.description for c in conventions] == [
        "TODO/FIXME comments used for tracking work items"
    ]


def test_nine_markers_are_not_reported(repo_builder, make_context) -> None:
    repo_builder.write({"src/legacy.rb": "\n".join(["# TODO: later"] * 9) + "\n"})

    assert CommentingDetector().detect(make_context()) == []
