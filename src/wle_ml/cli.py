import click
import yaml

from wle_ml.common.config import load_config
from wle_ml.common.logging import setup_logger
from wle_ml.dataio.datasets import fetch_datasets
from wle_ml.dataio.download import DataDownloadError
from wle_ml.evaluation.reports import format_report, save_evaluation_report, save_markdown_report
from wle_ml.pipeline import run_pipeline
from wle_ml.validation.schema import DataValidationError


def _settings(config, **overrides):
    try:
        settings = load_config(config, **overrides)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    setup_logger("wle_ml", settings.log_level)
    return settings


@click.group()
@click.version_option(version="0.1.0")
def main():
    """Weight Lifting Exercise classification pipeline CLI"""
    pass


@main.command()
@click.option("--config", type=click.Path(exists=True), help="Config YAML path")
@click.option("--data-dir", type=click.Path(), help="Directory for the downloaded CSV files")
def fetch(config, data_dir):
    """Download the training and evaluation datasets"""
    settings = _settings(config, data_dir=data_dir)
    try:
        paths = fetch_datasets(settings)
    except DataDownloadError as e:
        raise click.ClickException(str(e)) from e
    for path in paths:
        click.echo(f"✓ {path}")


@main.command()
@click.option("--config", type=click.Path(exists=True), help="Config YAML path")
@click.option("--data-dir", type=click.Path(), help="Directory for the downloaded CSV files")
@click.option("--seed", type=int, help="Random seed for partitioning and the forest")
@click.option("--workers", type=int, help="Cross-validation workers (default: CPU count - 1)")
@click.option("--trees", type=int, help="Number of trees in the forest")
@click.option("--metrics-out", type=click.Path(), help="Write metrics and predictions as JSON")
@click.option("--markdown-out", type=click.Path(), help="Write a Markdown summary")
def run(config, data_dir, seed, workers, trees, metrics_out, markdown_out):
    """Clean, split, train, evaluate and print the report"""
    settings = _settings(config, data_dir=data_dir, seed=seed, n_jobs=workers, n_estimators=trees)
    try:
        result = run_pipeline(settings)
    except (DataDownloadError, DataValidationError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(format_report(result))

    if metrics_out or markdown_out:
        metrics = result.to_dict()
        if metrics_out:
            save_evaluation_report(metrics, metrics_out)
            click.echo(f"✓ Metrics written to {metrics_out}")
        if markdown_out:
            save_markdown_report(metrics, markdown_out)
            click.echo(f"✓ Report written to {markdown_out}")


@main.command("show-config")
@click.option("--config", type=click.Path(exists=True), help="Config YAML path")
def show_config(config):
    """Print the effective settings"""
    settings = _settings(config)
    click.echo(yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=False))


if __name__ == "__main__":
    main()
