from pypdf import PdfReader

from filemaster.backend.app.domain.processing import ExecutionParams
from filemaster.backend.app.infrastructure.executors import PdfMerger
from filemaster.backend.app.infrastructure.executors.merger import resolve_merge_order
from tests.unit.fakes.samples import make_pdf_bytes, meta_upload

PDF = "application/pdf"


def page_widths(path) -> list[float]:
    return [float(page.mediabox.width) for page in PdfReader(path).pages]


def test_explicit_order_puts_b_before_a(output_storage, on_disk):
    a = on_disk("A.pdf", make_pdf_bytes(3, width=100), PDF)
    b = on_disk("B.pdf", make_pdf_bytes(2, width=500), PDF)

    out = PdfMerger(output_storage).execute([a, b], ExecutionParams(order=("B.pdf", "A.pdf")))

    assert out.display_name == "merged.pdf"
    assert out.content_type == PDF
    assert page_widths(out.location) == [500, 501, 100, 101, 102]


def test_default_order_is_upload_order(output_storage, on_disk):
    a = on_disk("A.pdf", make_pdf_bytes(1, width=100), PDF)
    b = on_disk("B.pdf", make_pdf_bytes(2, width=500), PDF)

    out = PdfMerger(output_storage).execute([a, b], ExecutionParams())

    assert page_widths(out.location) == [100, 500, 501]


def test_resolve_order_skips_unknown_names_and_prefers_first_duplicate():
    first = meta_upload("x.pdf", PDF, size=1)
    second = meta_upload("x.pdf", PDF, size=2)
    other = meta_upload("y.pdf", PDF, size=3)

    resolved = resolve_merge_order([first, second, other], ("missing.pdf", "y.pdf", "x.pdf"))

    assert resolved == [other, first]


def test_resolve_without_order_keeps_uploads():
    files = [meta_upload("x.pdf", PDF), meta_upload("y.pdf", PDF)]
    assert resolve_merge_order(files, None) == files
    assert resolve_merge_order(files, ()) == files
