import logging

import click
import polars as pl
from dotenv import load_dotenv

from constants import CHARTS, SERIES_KEYS
from services.comparison import ComparisonRecordBuilder, SharedAxisRecord
from services.config import ComparisonConfig, setup_logging
from services.influencer_errors import InfluencerDataError
from services.influencer_source import find_influencer, load_influencers_file
from services.influencer_table import build_influencer_frame, summarize_influencers
from services.selection import Selection
from services.tooltips import TooltipValueResolver
from utils import format_number, format_percentage, parse_number

load_dotenv()
logger = logging.getLogger("iiq_cli")

TABLE_COLUMNS = [
    "Rank",
    "Handle",
    "Followers Formatted",
    "Avg Likes Formatted",
    "Engagement Rate (%)",
    "InfluenceIQ",
]


def _load(data_path):
    try:
        return load_influencers_file(data_path)
    except InfluencerDataError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--log-level", default=None, help="Override IIQ_LOG_LEVEL")
def cli(log_level):
    """InfluenceIQ comparison CLI over a local users JSON file."""
    setup_logging(log_level)


@cli.command()
@click.argument("first", required=False)
@click.argument("second", required=False)
@click.option(
    "--data",
    "data_path",
    default=lambda: ComparisonConfig().data_path,
    show_default="IIQ_DATA_PATH or users.json",
    help="Users payload ({\"users\": [...]})",
)
@click.option("--chart", type=click.Choice(CHARTS), multiple=True)
def compare(first, second, data_path, chart):
    """Compare two influencers chart by chart, using true tooltip values."""
    influencers = _load(data_path)
    slots = []
    for handle in (first, second):
        influencer = find_influencer(influencers, handle)
        if handle and influencer is None:
            logger.warning(f"Influencer '{handle}' not found in {data_path}")
        slots.append(influencer)

    builder = ComparisonRecordBuilder()
    resolver = TooltipValueResolver()
    selection = Selection(*slots)
    # Radar rows name their series "A"/"B"; print handles instead
    series_labels = dict(zip(SERIES_KEYS, builder.slot_labels(selection)))
    for name in chart or CHARTS:
        click.echo(f"== {name}")
        records = builder.build(selection, name)
        if not records:
            click.echo("  (needs two influencers)")
            continue
        for record in records:
            lines = resolver.tooltip_lines(record)
            if isinstance(record, SharedAxisRecord):
                lines = [(series_labels[key], value) for key, value in lines]
            values = ", ".join(f"{label}: {value}" for label, value in lines)
            click.echo(f"  {record.name}: {values}")


@cli.command()
@click.option(
    "--data",
    "data_path",
    default=lambda: ComparisonConfig().data_path,
    show_default="IIQ_DATA_PATH or users.json",
)
@click.option("--limit", default=20, show_default=True, help="Rows to print")
def table(data_path, limit):
    """Print the ranked profile table and aggregate stats."""
    df = build_influencer_frame(_load(data_path))
    if df.is_empty():
        click.echo("No influencers found.")
        return

    with pl.Config(tbl_rows=limit, tbl_cols=len(TABLE_COLUMNS)):
        click.echo(df.select(TABLE_COLUMNS).head(limit))

    stats = summarize_influencers(df)
    click.echo(
        f"{stats['influencer_count']} influencers, "
        f"{format_number(stats['total_followers'])} followers, "
        f"avg engagement {format_percentage(stats['avg_engagement_rate'])}, "
        f"top: {stats['top_influencer']}"
    )


@cli.command(name="format")
@click.argument("values", nargs=-1, required=True)
def format_cmd(values):
    """Normalize magnitude strings, e.g. 34.7M 367.8k."""
    for raw in values:
        parsed = parse_number(raw)
        shown = int(parsed) if parsed.is_integer() else parsed
        click.echo(f"{raw}\t{shown}\t{format_number(parsed)}")


if __name__ == "__main__":
    cli()
