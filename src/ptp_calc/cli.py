import json
from pathlib import Path

import click
import yaml

from ptp_calc import __version__
from ptp_calc.common.config import load_config
from ptp_calc.common.logging import setup_logger
from ptp_calc.domain.clinical_thresholds import category_label
from ptp_calc.domain.ptp_table import table_frame
from ptp_calc.reporting.reports import write_report
from ptp_calc.scoring import assess, classify_cac, resolve_ptp

SEX_HELP = "Patient sex: men or women"
SYMPTOM_HELP = "Primary symptom: chestPain or dyspnea"


def _echo_json(data):
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _echo_flags(flags):
    if not flags:
        click.echo("Flags: none")
        return
    click.echo("Flags:")
    for flag in flags:
        click.echo(f"  [{flag.level.value}] {flag.message}")


def _echo_ptp(result):
    if result.ok:
        click.echo(f"Pretest probability: {result.display} ({category_label(result.category)})")
        click.echo(f"Age band: {result.age_band.value}")
    else:
        click.echo("Pretest probability: not available, fix the flagged inputs")


def _echo_cac(result):
    if result is None:
        return
    if result.ok:
        click.echo(f"CAC pretest probability: {result.ptp_range} ({category_label(result.category)})")
        click.echo(f"CAC bucket: {result.label}")
    else:
        click.echo(f"{result.label}: {result.detail}")


@click.group()
@click.version_option(version=__version__)
@click.option("--config", type=click.Path(exists=True, dir_okay=False), help="Config YAML path")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False), help="Override the configured log level")
@click.pass_context
def main(ctx, config, log_level):
    """Coronary artery disease pretest probability calculator"""
    try:
        cfg = load_config(config)
    except (ValueError, yaml.YAMLError) as e:
        raise click.BadParameter(str(e), param_hint="--config")
    if log_level:
        cfg["logging"]["level"] = log_level
    setup_logger("ptp_calc", cfg["logging"]["level"])
    ctx.obj = cfg


@main.command()
@click.option("--age", type=float, help="Age in years")
@click.option("--sex", help=SEX_HELP)
@click.option("--symptom", help=SYMPTOM_HELP)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def ptp(ctx, age, sex, symptom, as_json):
    """Look up the pretest probability from age, sex and symptom"""
    result = resolve_ptp(age, sex, symptom)
    if as_json:
        _echo_json(result.to_dict())
    else:
        _echo_ptp(result)
        _echo_flags(result.flags)
    if not result.ok:
        ctx.exit(1)


@main.command()
@click.argument("score")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def cac(ctx, score, as_json):
    """Bucket a coronary artery calcium SCORE"""
    result = classify_cac(score)
    if as_json:
        _echo_json(result.to_dict() if result else None)
    elif result is None:
        click.echo("No CAC score supplied")
    else:
        _echo_cac(result)
    if result is not None and not result.ok:
        ctx.exit(1)


@main.command("assess")
@click.option("--age", type=float, help="Age in years")
@click.option("--sex", help=SEX_HELP)
@click.option("--symptom", help=SYMPTOM_HELP)
@click.option("--cac", "cac_score", help="Coronary artery calcium score (optional)")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--report", type=click.Path(dir_okay=False), help="Write a report (.json or .md)")
@click.pass_context
def assess_patient(ctx, age, sex, symptom, cac_score, as_json, report):
    """Assess PTP and, when given, the CAC bucket for one patient"""
    ceiling = ctx.obj["assessment"]["advisory_age_ceiling"]
    result = assess(age, sex, symptom, cac_score, advisory_age_ceiling=ceiling)
    if as_json:
        _echo_json(result.to_dict())
    else:
        _echo_ptp(result.ptp)
        _echo_cac(result.cac)
        _echo_flags(result.flags)
    if report:
        write_report(result, report)
        click.echo(f"Report written to: {report}", err=True)
    if not result.ok:
        ctx.exit(1)


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--output-path", type=click.Path(dir_okay=False), help="Results CSV path (prints to stdout when omitted)")
@click.pass_context
def batch(ctx, input_path, output_path):
    """Assess every patient in a CSV with age, sex, symptom and optional cac columns"""
    from ptp_calc.dataio import DataValidationError, assess_frame, read_patients

    try:
        df = read_patients(input_path)
        results = assess_frame(df, advisory_age_ceiling=ctx.obj["assessment"]["advisory_age_ceiling"])
    except (DataValidationError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="INPUT_PATH")

    if output_path:
        results.to_csv(Path(output_path), index=False)
        click.echo(f"Assessed {len(results)} patients, saved to: {output_path}")
    else:
        click.echo(results.to_csv(index=False), nl=False)


@main.command()
def table():
    """Print the reference pretest probability table (percent)"""
    click.echo(table_frame().to_string())


if __name__ == "__main__":
    main()
