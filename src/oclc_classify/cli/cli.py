"""Command-line interface for oclc-classify."""

import json
import logging

import click
from pydantic import ValidationError

from oclc_classify.config import get_settings
from oclc_classify.data_sources.base_client import ClassifyError
from oclc_classify.data_sources.classify import lookup_sync
from oclc_classify.models.model_classify import (
    ClassificationRecommendation,
    MultiWork,
    SingleWorkSummary,
)
from oclc_classify.models.model_classify_raw import IdentifierType, Work


@click.group()
@click.version_option(package_name="oclc-classify")
def main():
    """oclc-classify: Look up Dewey and LC classifications for a standard number."""
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e}")

    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("identifier")
@click.option(
    "-t",
    "--type",
    "identifier_type",
    type=click.Choice([t.value for t in IdentifierType]),
    default=IdentifierType.STDNBR.value,
    show_default=True,
    help="Query parameter the identifier is sent as",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def lookup(identifier: str, identifier_type: str, as_json: bool):
    """Classify a standard number (ISBN, ISSN, UPC, OCLC number, ...)."""
    try:
        outcome = lookup_sync(identifier, identifier_type)
    except ClassifyError as e:
        raise click.ClickException(str(e))

    if as_json:
        payload = outcome.model_dump(mode="json") if outcome is not None else None
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if outcome is None:
        click.echo(f"No classification found for: {identifier}")
    elif isinstance(outcome, SingleWorkSummary):
        _echo_work(outcome.work)
        _echo_scheme("Dewey Decimal", outcome.recommendations.dewey_decimal)
        _echo_scheme("Library of Congress", outcome.recommendations.library_of_congress)
    elif isinstance(outcome, MultiWork):
        click.echo(f"{len(outcome.works)} candidate works:")
        for i, work in enumerate(outcome.works, 1):
            click.echo(f"  {i}. {work.title} / {work.author} (owi: {work.owi})")


def _echo_work(work: Work) -> None:
    click.echo(f"{work.title} / {work.author}")
    click.echo(f"  format: {work.format}  editions: {work.editions}  holdings: {work.holdings}")
    click.echo(f"  owi: {work.owi}")


def _echo_scheme(label: str, recommendation: ClassificationRecommendation) -> None:
    click.echo(f"{label}:")
    click.echo(f"  most popular:   {', '.join(recommendation.most_popular) or '-'}")
    click.echo(f"  most recent:    {', '.join(recommendation.most_recent) or '-'}")
    click.echo(f"  latest edition: {', '.join(recommendation.latest_edition) or '-'}")


if __name__ == "__main__":
    main()
