import pytest

from filemaster.backend.app.application.processing.validator import clamp_compress_level, validate_request
from filemaster.backend.app.domain.processing import Tool, ToolParams
from filemaster.backend.app.domain.processing.errors import (
    CardinalityError,
    InvalidTool,
    MissingParameter,
    TypeMismatch,
    UnsupportedFormat,
)
from tests.unit.fakes.samples import meta_upload

PDF = "application/pdf"


def pdf(name: str = "a.pdf"):
    return meta_upload(name, PDF)


@pytest.mark.parametrize("tool_name", ["explode", "", None, "COMPRESS", " merge2"])
def test_unknown_tool_is_rejected(tool_name):
    with pytest.raises(InvalidTool):
        validate_request(tool_name, [pdf()], ToolParams())


def test_invalid_tool_wins_over_empty_file_list():
    with pytest.raises(InvalidTool):
        validate_request("explode", [], ToolParams())


@pytest.mark.parametrize("tool_name", ["compress", "merge", "convert", "enhance", "preview"])
def test_empty_file_list_is_rejected_for_every_tool(tool_name):
    with pytest.raises(CardinalityError, match="No files uploaded"):
        validate_request(tool_name, [], ToolParams(format="png"))


def test_merge_needs_two_files():
    with pytest.raises(CardinalityError, match="at least 2"):
        validate_request("merge", [pdf()], ToolParams())


def test_merge_count_checked_before_type():
    with pytest.raises(CardinalityError):
        validate_request("merge", [meta_upload("a.png", "image/png")], ToolParams())


def test_merge_rejects_non_pdf():
    with pytest.raises(TypeMismatch, match="PDFs"):
        validate_request("merge", [pdf(), meta_upload("b.png", "image/png")], ToolParams())


def test_merge_keeps_order():
    result = validate_request("merge", [pdf("a.pdf"), pdf("b.pdf")], ToolParams(order=("b.pdf", "a.pdf")))

    assert result.tool is Tool.MERGE
    assert result.params.order == ("b.pdf", "a.pdf")


@pytest.mark.parametrize("count", [2, 3])
@pytest.mark.parametrize("tool_name", ["convert", "enhance"])
def test_single_file_tools_reject_many(tool_name, count):
    files = [meta_upload(f"{i}.png", "image/png") for i in range(count)]
    with pytest.raises(CardinalityError, match="exactly 1"):
        validate_request(tool_name, files, ToolParams(format="png"))


def test_convert_requires_format():
    with pytest.raises(MissingParameter) as exc_info:
        validate_request("convert", [meta_upload("a.png", "image/png")], ToolParams(format="  "))
    assert exc_info.value.parameter == "format"


def test_convert_rejects_unknown_format():
    with pytest.raises(UnsupportedFormat):
        validate_request("convert", [meta_upload("a.png", "image/png")], ToolParams(format="gif"))


def test_convert_lowercases_format():
    result = validate_request("convert", [meta_upload("a.png", "image/png")], ToolParams(format="WEBP"))
    assert result.params.target_format == "webp"


def test_enhance_rejects_non_image():
    with pytest.raises(TypeMismatch, match="images"):
        validate_request("enhance", [pdf()], ToolParams())


def test_enhance_accepts_any_image_type():
    result = validate_request("enhance", [meta_upload("x.heic", "image/heic")], ToolParams())
    assert result.tool is Tool.ENHANCE


def test_preview_skips_type_and_count_rules():
    files = [pdf(), meta_upload("b.bin", "application/octet-stream"), meta_upload("c.png", "image/png")]
    result = validate_request("preview", files, ToolParams())
    assert result.tool is Tool.PREVIEW


def test_compress_accepts_any_type_and_clamps_level():
    files = [pdf(), meta_upload("b.bin", "application/octet-stream")]
    result = validate_request("compress", files, ToolParams(compress_level="42"))
    assert result.params.compress_level == 9


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 6),
        ("", 6),
        ("abc", 6),
        ("0", 1),
        (-3, 1),
        ("1", 1),
        (5, 5),
        (" 7 ", 7),
        ("10", 9),
        ("7.5", 7),
        ("12abc", 9),
        ("-2x", 1),
        ("x7", 6),
    ],
)
def test_clamp_compress_level(raw, expected):
    assert clamp_compress_level(raw) == expected


def test_clamp_uses_configured_default():
    assert clamp_compress_level(None, default=3) == 3
    result = validate_request("compress", [pdf()], ToolParams(), default_compress_level=2)
    assert result.params.compress_level == 2
