import json
from pathlib import Path

from ..domain.clinical_thresholds import category_label
from ..scoring.assessment import Assessment

_FLAG_MARKERS = {"bad": "✗", "warn": "!", "info": "·"}


def save_assessment_report(assessment: Assessment, output_path: str | Path):
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(assessment.to_dict(), f, indent=2, ensure_ascii=False)


def render_markdown_report(assessment: Assessment) -> str:
    ptp, cac = assessment.ptp, assessment.cac

    report = "# Pretest Probability Report\n\n"
    report += "## Age, sex and primary symptom\n\n"
    if ptp.ok:
        report += f"- **PTP**: {ptp.display}\n"
        report += f"- **Category**: {category_label(ptp.category)}\n"
        report += f"- **Age band**: {ptp.age_band.value}\n"
    else:
        report += "Fix the flagged inputs to calculate.\n"

    if cac is not None:
        report += "\n## CAC score\n\n"
        if cac.ok:
            report += f"- **PTP range**: {cac.ptp_range}\n"
            report += f"- **Bucket**: {cac.label}\n"
            report += f"- **Category**: {category_label(cac.category)}\n"
        else:
            report += f"- **{cac.label}**: {cac.detail}\n"

    report += "\n## Flags\n\n"
    if not assessment.flags:
        report += "No flags.\n"
    for flag in assessment.flags:
        report += f"- {_FLAG_MARKERS[flag.level.value]} {flag.message}\n"

    return report


def write_report(assessment: Assessment, output_path: str | Path):
    """Write a JSON report for .json paths and Markdown otherwise."""
    output_path = Path(output_path)
    if output_path.suffix.lower() == ".json":
        save_assessment_report(assessment, output_path)
    else:
        output_path.write_text(render_markdown_report(assessment), encoding="utf-8")
