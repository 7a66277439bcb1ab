"""Click CLI commands for fincharts."""

from __future__ import annotations

import csv
import io
import json
import math
from datetime import date, datetime
from typing import Any

import click

from fincharts.config import AppConfig
from fincharts.data.csv_loader import load_csv_file, load_symbol
from fincharts.data.errors import DataSourceError
from fincharts.data.symbols import available_symbols, symbol_name
from fincharts.data.synthetic import generate_random_price_series
from fincharts.data.types import AggregationPeriod, PricePoint
from fincharts.engine.aggregation import aggregate_price_series, filter_by_date_range
from fincharts.engine.indicators import (
    calculate_bollinger_bands,
    calculate_ema,
    calculate_macd,
    calculate_rsi,
    calculate_sma,
)
from fincharts.engine.statistics import calculate_change, price_range, volume_range
from fincharts.utils.logging import (
    bind_symbol,
    clear_context,
    get_logger,
    setup_logging,
)

INDICATOR_KINDS = ("sma", "ema", "rsi", "macd", "bollinger")

log = get_logger(__name__)


def _json_value(value: float | None) -> float | None:
    """NaN has no JSON representation; emit null instead."""
    if value is None or math.isnan(value):
        return None
    return value


def _echo_json(rows: list[dict[str, Any]]) -> None:
    click.echo(json.dumps(rows, indent=2))


def _point_row(p: PricePoint) -> dict[str, Any]:
    return {
        "date": p.date.isoformat(),
        "open": p.open,
        "high": p.high,
        "low": p.low,
        "close": p.close,
        "volume": p.volume,
    }


def _load_series(
    config: AppConfig,
    symbol: str,
    csv_path: str | None,
) -> list[PricePoint]:
    clear_context()
    bind_symbol(symbol.upper())
    try:
        if csv_path is not None:
            return load_csv_file(csv_path)
        return load_symbol(symbol, config.data_dir)
    except DataSourceError as e:
        raise click.ClickException(str(e)) from e


def _date_option(name: str, help_text: str) -> Any:
    return click.option(
        name,
        type=click.DateTime(formats=["%Y-%m-%d"]),
        default=None,
        help=help_text,
    )


_csv_option = click.option(
    "--csv",
    "csv_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read this CSV instead of <data_dir>/<SYMBOL>_daily_data.csv.",
)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """fincharts: technical indicators and calendar aggregation for OHLCV data."""
    config = AppConfig()
    setup_logging(level=config.log_level, log_format=config.log_format)
    ctx.obj = config


@cli.command()
@click.argument("symbol")
@click.option(
    "--kind",
    type=click.Choice(INDICATOR_KINDS, case_sensitive=False),
    default="sma",
    show_default=True,
    help="Indicator to compute.",
)
@click.option("--period", type=int, default=None, help="Indicator period.")
@click.option("--fast", type=int, default=None, help="MACD fast EMA period.")
@click.option("--slow", type=int, default=None, help="MACD slow EMA period.")
@click.option("--signal", type=int, default=None, help="MACD signal EMA period.")
@click.option("--std-dev", type=float, default=None, help="Bollinger multiplier.")
@_csv_option
@click.pass_obj
def indicator(
    config: AppConfig,
    symbol: str,
    kind: str,
    period: int | None,
    fast: int | None,
    slow: int | None,
    signal: int | None,
    std_dev: float | None,
    csv_path: str | None,
) -> None:
    """Compute an indicator series for SYMBOL and print it as JSON."""
    series = _load_series(config, symbol, csv_path)
    defaults = config.indicators
    dates = [p.date.isoformat() for p in series]
    kind = kind.lower()

    try:
        if kind == "macd":
            macd = calculate_macd(
                series,
                fast_period=fast if fast is not None else defaults.macd_fast,
                slow_period=slow if slow is not None else defaults.macd_slow,
                signal_period=signal if signal is not None else defaults.macd_signal,
            )
            rows = [
                {
                    "date": d,
                    "macd": _json_value(m),
                    "signal": _json_value(s),
                    "histogram": _json_value(h),
                }
                for d, m, s, h in zip(dates, macd.macd, macd.signal, macd.histogram)
            ]
        elif kind == "bollinger":
            bands = calculate_bollinger_bands(
                series,
                period=period if period is not None else defaults.bollinger_period,
                std_dev=std_dev if std_dev is not None else defaults.bollinger_std_dev,
            )
            rows = [
                {
                    "date": d,
                    "upper": _json_value(u),
                    "middle": _json_value(m),
                    "lower": _json_value(lo),
                }
                for d, u, m, lo in zip(dates, bands.upper, bands.middle, bands.lower)
            ]
        else:
            calculate, default_period = {
                "sma": (calculate_sma, defaults.sma_period),
                "ema": (calculate_ema, defaults.ema_period),
                "rsi": (calculate_rsi, defaults.rsi_period),
            }[kind]
            values = calculate(series, period if period is not None else default_period)
            rows = [
                {"date": d, "close": p.close, "value": _json_value(v)}
                for d, p, v in zip(dates, series, values)
            ]
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    log.info("indicator_computed", kind=kind, point_count=len(rows))
    _echo_json(rows)


@cli.command()
@click.argument("symbol")
@click.option(
    "--period",
    type=click.Choice([p.value for p in AggregationPeriod], case_sensitive=False),
    default=None,
    help="Bucket size (default from config).",
)
@_date_option("--start", "Keep sessions on or after this date (YYYY-MM-DD).")
@_date_option("--end", "Keep sessions on or before this date (YYYY-MM-DD).")
@_csv_option
@click.pass_obj
def aggregate(
    config: AppConfig,
    symbol: str,
    period: str | None,
    start: datetime | None,
    end: datetime | None,
    csv_path: str | None,
) -> None:
    """Roll SYMBOL's daily sessions up into week or month candles."""
    series = _load_series(config, symbol, csv_path)
    if start is not None or end is not None:
        series = filter_by_date_range(
            series,
            start.date() if start is not None else date.min,
            end.date() if end is not None else date.max,
        )

    bucket = config.aggregation.default_period
    if period is not None:
        bucket = AggregationPeriod(period.lower())
    result = aggregate_price_series(series, bucket)
    log.info(
        "series_aggregated",
        period=bucket.value,
        input_count=len(series),
        output_count=len(result),
    )
    _echo_json([_point_row(p) for p in result])


@cli.command()
@click.argument("symbol")
@_csv_option
@click.pass_obj
def summary(config: AppConfig, symbol: str, csv_path: str | None) -> None:
    """Show change and price/volume ranges for SYMBOL."""
    series = _load_series(config, symbol, csv_path)
    prices = price_range(series)
    volumes = volume_range(series)

    click.echo(f"{symbol.upper()} ({symbol_name(symbol)})")
    click.echo(f"Sessions:      {len(series)}")
    if series:
        click.echo(f"First:         {series[0].date}")
        click.echo(f"Last:          {series[-1].date}")
    click.echo(f"Change:        {calculate_change(series):.2f}%")
    click.echo(f"Price Range:   {prices.min:,.2f} - {prices.max:,.2f}")
    click.echo(f"Volume Range:  {volumes.min:,.0f} - {volumes.max:,.0f}")


@cli.command()
@click.option("--days", type=click.IntRange(min=0), default=90, show_default=True)
@click.option(
    "--start-date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default="2024-01-01",
    show_default=True,
)
@click.option("--start-price", type=float, default=100.0, show_default=True)
@click.option("--seed", type=int, default=None, help="Seed for a reproducible series.")
def generate(
    days: int,
    start_date: datetime,
    start_price: float,
    seed: int | None,
) -> None:
    """Write a random-walk daily series as CSV to stdout."""
    series = generate_random_price_series(
        start_date.date(),
        days,
        start_price=start_price,
        seed=seed,
    )
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(["date", "open", "high", "low", "close", "volume"])
    for p in series:
        volume = "" if p.volume is None else int(p.volume)
        writer.writerow([p.date.isoformat(), p.open, p.high, p.low, p.close, volume])
    click.echo(buf.getvalue(), nl=False)


@cli.command()
def symbols() -> None:
    """List symbols in the bundled data set."""
    for s in available_symbols():
        click.echo(f"{s:<6} {symbol_name(s)}")


@cli.command()
@click.pass_obj
def config(cfg: AppConfig) -> None:
    """Show current configuration."""
    click.echo("=== fincharts Configuration ===\n")

    click.echo(f"Log Level:    {cfg.log_level}")
    click.echo(f"Log Format:   {cfg.log_format}")
    click.echo(f"Data Dir:     {cfg.data_dir}")
    click.echo("")

    ind = cfg.indicators
    click.echo("[Indicators]")
    click.echo(f"  SMA Period:        {ind.sma_period}")
    click.echo(f"  EMA Period:        {ind.ema_period}")
    click.echo(f"  RSI Period:        {ind.rsi_period}")
    macd = f"{ind.macd_fast}/{ind.macd_slow}/{ind.macd_signal}"
    click.echo(f"  MACD:              {macd}")
    click.echo(f"  Bollinger:         {ind.bollinger_period} x {ind.bollinger_std_dev}")
    click.echo("")

    click.echo("[Aggregation]")
    click.echo(f"  Default Period:    {cfg.aggregation.default_period.value}")
