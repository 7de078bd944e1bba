import io

from folderbench.report import Reporter


def test_log_writes_lines():
    out = io.StringIO()
    reporter = Reporter(out)
    reporter.log("one")
    reporter.log("two")
    assert out.getvalue() == "one\ntwo\n"
    assert reporter.lines == ["one", "two"]


def test_to_file_appends_and_closes(tmp_path):
    path = tmp_path / "report.txt"
    path.write_text("earlier\n")
    reporter = Reporter.to_file(str(path))
    reporter.log("Created 50 files")
    reporter.close()
    assert reporter.stream.closed
    assert path.read_text() == "earlier\nCreated 50 files\n"


def test_close_leaves_borrowed_stream_open():
    out = io.StringIO()
    reporter = Reporter(out)
    reporter.close()
    assert not out.closed
