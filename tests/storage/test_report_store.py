# tests/storage/test_report_store.py
from trend_monitor.storage.report_store import ReportStore


class TestReportStore:
    def test_write_creates_directory(self, tmp_path):
        store = ReportStore(tmp_path / "reports")

        path = store.write("m1", "report body")

        assert path == tmp_path / "reports" / "m1.txt"
        assert path.read_text() == "report body\n"

    def test_write_replaces_previous_report(self, tmp_path):
        store = ReportStore(tmp_path)
        store.write("m1", "first")
        store.write("m1", "second")

        assert store.path_for("m1").read_text() == "second\n"
