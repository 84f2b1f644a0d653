import io
import unittest
from pathlib import Path

from rich.console import Console

from cli.ui_components import build_report_table, build_summary_text
from core.domain.models import (
    BatchReport,
    CopyStage,
    DestinationLayout,
    PackageEntry,
    PackageOutcome,
)


def _outcome(name: str, *, stage: CopyStage, error: str | None = None, root: str = "/drop") -> PackageOutcome:
    return PackageOutcome(
        package=PackageEntry(package_name=name, source_dir=Path("/repo/packages") / name),
        layout=DestinationLayout(destination_root=Path(root), package_name=name, version="2.3.1"),
        stage=stage,
        error=error,
    )


def _render(renderable) -> str:
    console = Console(file=io.StringIO(), width=300, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


class ReportTableTests(unittest.TestCase):
    def test_bracketed_text_is_rendered_literally(self):
        report = BatchReport(
            version="2.3.1",
            outcomes=[
                _outcome(
                    "button",
                    stage=CopyStage.ABORTED,
                    error="could not copy [/tmp/x] to [bold]: [Errno 2]",
                    root="/drop[staging]",
                ),
            ],
        )

        output = _render(build_report_table(report))

        self.assertIn("[/tmp/x]", output)
        self.assertIn("[bold]", output)
        self.assertIn("[Errno 2]", output)
        self.assertIn("/drop[staging]", output)

    def test_summary_counts(self):
        report = BatchReport(
            version="2.3.1",
            outcomes=[
                _outcome("button", stage=CopyStage.REPORTED),
                _outcome("card", stage=CopyStage.ABORTED, error="missing"),
            ],
        )

        self.assertEqual(build_summary_text(report).plain, "1 copied, 1 failed")

    def test_summary_without_packages(self):
        text = build_summary_text(BatchReport(version="2.3.1"))
        self.assertEqual(text.plain, "No package bundles were found.")


if __name__ == "__main__":
    unittest.main()
