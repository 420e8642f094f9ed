"""Tests for PDF compiler."""

import pytest

from layout2pdf.engine.geometry import PageGeometry
from layout2pdf.engine.pdfcompiler import CompilerOptions, PDFCompiler
from layout2pdf.exceptions import EmptyDocumentError, OutputWriteError
from layout2pdf.models.document import Document
from layout2pdf.parser import parse_text


def stream_of(data: bytes, obj_num: int) -> bytes:
    """Raw bytes of a stream object's body."""
    start = data.index(b"%d 0 obj\n" % obj_num)
    body_start = data.index(b"stream\n", start) + len(b"stream\n")
    return data[body_start:data.index(b"\nendstream\n", body_start)]


class TestCompilerOptions:
    """Test suite for CompilerOptions."""

    def test_default_options(self):
        options = CompilerOptions()
        assert options.pdf_version == "1.4"
        assert options.font_name == "Helvetica"
        assert options.compress_streams is False
        assert options.info is None

    def test_dict_options(self):
        compiler = PDFCompiler({"compress_streams": True})
        assert compiler.options.compress_streams is True

    def test_unknown_dict_option(self):
        with pytest.raises(ValueError):
            PDFCompiler({"dpi": 300})


class TestPdfCompiler:
    """Test suite for PDFCompiler."""

    def test_hello_document(self):
        data = PDFCompiler().compile(parse_text("[page1]\nHello\n[/page1]\n"))
        assert stream_of(data, 5) == b"BT\n/F1 12 Tf\n0 0 0 rg\n1 0 0 1 72 750 Tm\n(Hello) Tj\nET\n"
        assert b"/Kids [4 0 R] /Count 1" in data
        assert b"trailer\n<< /Size 6 /Root 1 0 R >>" in data

    def test_red_centered_line(self):
        data = PDFCompiler().compile(parse_text("[page1] 20, red, center\nHi\n[/page1]\n"))
        assert stream_of(data, 5) == b"BT\n/F1 20 Tf\n1 0 0 rg\n1 0 0 1 296 750 Tm\n(Hi) Tj\nET\n"

    def test_escaped_text(self):
        data = PDFCompiler().compile(parse_text("[p]\n(a\\b)\n"))
        assert b"(\\(a\\\\b\\)) Tj" in stream_of(data, 5)

    def test_object_order_for_several_pages(self):
        text = "[p1]\nOne\n[/p1]\n[p2]\nTwo\n[/p2]\n[p3]\nThree\n"
        data = PDFCompiler().compile(parse_text(text))
        assert b"/Kids [4 0 R 5 0 R 6 0 R] /Count 3" in data
        for page_num, content_num in ((4, 7), (5, 8), (6, 9)):
            assert b"%d 0 obj\n<< /Type /Page " % page_num in data
            assert b"/Contents %d 0 R >>" % content_num in data
        assert b"(Two) Tj" in stream_of(data, 8)
        assert b"trailer\n<< /Size 10 /Root 1 0 R >>" in data

    def test_objects_written_in_identity_order(self, object_offsets):
        data = PDFCompiler().compile(parse_text("[p1]\nA\n[/p1]\n[p2]\nB\n"))
        offsets = object_offsets(data)
        ordered = [offsets[n] for n in sorted(offsets)]
        assert ordered == sorted(ordered)
        assert sorted(offsets) == list(range(1, 8))

    def test_xref_offsets_match_object_positions(self, sample_layout, object_offsets, xref_offsets):
        data = PDFCompiler().compile(parse_text(sample_layout))
        scanned = object_offsets(data)
        listed = xref_offsets(data)
        assert len(listed) == len(scanned) == 7
        for obj_num, offset in enumerate(listed, start=1):
            assert offset == scanned[obj_num]
            assert data[offset:].startswith(b"%d 0 obj\n" % obj_num)

    def test_startxref_points_to_xref(self):
        data = PDFCompiler().compile(parse_text("[p]\nA\n"))
        xref_start = int(data.rsplit(b"startxref\n", 1)[1].split(b"\n", 1)[0])
        assert data[xref_start:].startswith(b"xref\n0 6\n")

    def test_stream_length_is_exact(self):
        data = PDFCompiler().compile(parse_text("[p] 14, blue\nLine one\n\nLine (two)\n"))
        start = data.index(b"5 0 obj\n<< /Length ") + len(b"5 0 obj\n<< /Length ")
        length = int(data[start:data.index(b" ", start)])
        assert length == len(stream_of(data, 5))

    def test_bottom_lines_drawn_after_top_lines(self, sample_layout):
        data = PDFCompiler().compile(parse_text(sample_layout))
        content = stream_of(data, 6)
        assert content.index(b"(Quarterly Report)") < content.index(b"(First paragraph line.)")
        assert content.index(b"(First paragraph line.)") < content.index(b"(Page 1)")
        assert content.index(b"(Page 1)") < content.index(b"(Confidential)")
        assert b"1 0 0 1 510 72 Tm\n(Page 1) Tj" in content
        assert b"1 0 0 1 480 86 Tm\n(Confidential) Tj" in content
        assert b"0.5 0.5 0.5 rg" in content

    def test_empty_lines_are_drawn(self):
        data = PDFCompiler().compile(parse_text("[p]\nA\n\nB\n"))
        content = stream_of(data, 5)
        assert b"1 0 0 1 72 734 Tm\n() Tj" in content
        assert b"1 0 0 1 72 718 Tm\n(B) Tj" in content

    def test_info_dictionary(self):
        options = CompilerOptions(info={"Title": "Report (v2)", "Producer": "layout2pdf"})
        data = PDFCompiler(options).compile(parse_text("[p]\nA\n"))
        assert b"6 0 obj\n<< /Title (Report \\(v2\\)) /Producer (layout2pdf) >>\nendobj\n" in data
        assert b"<< /Size 7 /Root 1 0 R /Info 6 0 R >>" in data

    def test_info_value_with_leading_slash_is_a_string(self):
        options = CompilerOptions(info={"Title": "/etc/report"})
        data = PDFCompiler(options).compile(parse_text("[p]\nA\n"))
        assert b"6 0 obj\n<< /Title (/etc/report) >>\nendobj\n" in data

    def test_media_box_follows_geometry(self):
        geometry = PageGeometry(width=300.0, height=400.0)
        data = PDFCompiler(geometry=geometry).compile(parse_text("[p]\nA\n"))
        assert b"/MediaBox [0 0 300 400]" in data

    def test_compressed_output(self):
        data = PDFCompiler(CompilerOptions(compress_streams=True)).compile(parse_text("[p]\n" + "row\n" * 40))
        assert b"/Filter /FlateDecode" in data

    def test_empty_document(self):
        with pytest.raises(EmptyDocumentError):
            PDFCompiler().compile(Document())

    def test_opened_but_empty_layout_fails(self):
        with pytest.raises(EmptyDocumentError):
            PDFCompiler().compile(parse_text("[page1] 20\n"))

    def test_none_document(self):
        with pytest.raises(EmptyDocumentError):
            PDFCompiler().compile(None)


@pytest.mark.integration
class TestCompileToFile:
    """Test suite for writing compiled output."""

    def test_writes_file(self, temp_dir):
        output = temp_dir / "out.pdf"
        document = parse_text("[p]\nA\n")
        result = PDFCompiler().compile_to_file(document, output)
        assert result == output
        assert output.read_bytes() == PDFCompiler().compile(document)

    def test_unwritable_path(self, temp_dir):
        output = temp_dir / "missing" / "out.pdf"
        with pytest.raises(OutputWriteError) as exc_info:
            PDFCompiler().compile_to_file(parse_text("[p]\nA\n"), output)
        assert exc_info.value.path == output
        assert not output.exists()

    def test_empty_document_writes_nothing(self, temp_dir):
        output = temp_dir / "out.pdf"
        with pytest.raises(EmptyDocumentError):
            PDFCompiler().compile_to_file(Document(), output)
        assert not output.exists()
