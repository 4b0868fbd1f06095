"""Domain services resolving a raw price feed into a price catalog."""

from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone
from logging import Logger

from wallet_dashboard.domain.models import PriceCatalog, PriceObservation
from wallet_dashboard.domain.services.normalization import (
    coerce_finite_float,
    normalize_symbol,
)


def parse_timestamp(value) -> datetime | None:
    """Parse an ISO-8601 timestamp into an aware datetime.

    Accepts every form ``datetime.fromisoformat`` takes on Python 3.11,
    including a trailing ``Z`` and the basic ``YYYYMMDD`` form. Naive values
    are treated as UTC so that every parsed timestamp is comparable with
    every other.

    Args:
        value: ISO-8601 string, datetime or date.

    Returns:
        datetime | None: Parsed timestamp, or None when unparsable.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_price(value) -> float | None:
    """Return a usable price or None when absent or invalid."""
    price = coerce_finite_float(value)
    if price is None or price < 0:
        return None
    return price


def observation_from_record(record: Mapping) -> PriceObservation | None:
    """Decode one price feed record.

    Args:
        record: Mapping with ``currency``, ``date`` and ``price`` keys.

    Returns:
        PriceObservation | None: Observation, or None without a usable symbol.
    """
    if not isinstance(record, Mapping):
        return None
    symbol = normalize_symbol(record.get("currency"))
    if symbol is None:
        return None
    return PriceObservation(
        symbol=symbol,
        observed_at=parse_timestamp(record.get("date")),
        price=parse_price(record.get("price")),
    )


def build_price_catalog(
    observations: Iterable[PriceObservation],
    logger: Logger | None = None,
) -> PriceCatalog:
    """Resolve observations into one current price per symbol.

    The latest observation wins per symbol. Among equal timestamps the
    observation appearing later in the input wins, since the sort is stable
    and later writes overwrite earlier ones. Observations without a price or
    without a parsable timestamp do not participate.

    Args:
        observations: Observations in feed order.
        logger: Optional logger used for diagnostics.

    Returns:
        PriceCatalog: Resolved prices with the count of skipped observations.
    """
    valid: list[PriceObservation] = []
    skipped = 0
    for observation in observations:
        if observation.price is None or observation.observed_at is None:
            skipped += 1
            continue
        valid.append(observation)

    prices: dict[str, float] = {}
    for observation in sorted(valid, key=lambda item: item.observed_at):
        prices[observation.symbol] = observation.price

    if logger is not None:
        if skipped:
            logger.warning(
                f"Skipped {skipped} price observations "
                "with a missing price or timestamp"
            )
        logger.debug(
            f"Price catalog built: symbols={len(prices)}, "
            f"observations={len(valid)}"
        )
    return PriceCatalog(prices, skipped_count=skipped)


def build_price_catalog_from_records(
    records: Iterable[Mapping],
    logger: Logger | None = None,
) -> PriceCatalog:
    """Decode raw feed records and build the catalog.

    Records that cannot be decoded at all are counted as skipped.

    Args:
        records: Decoded feed records.
        logger: Optional logger used for diagnostics.

    Returns:
        PriceCatalog: Resolved prices.
    """
    observations: list[PriceObservation] = []
    undecodable = 0
    for record in records:
        observation = observation_from_record(record)
        if observation is None:
            undecodable += 1
            continue
        observations.append(observation)
    if undecodable and logger is not None:
        logger.warning(f"Skipped {undecodable} price records without a symbol")
    catalog = build_price_catalog(observations, logger)
    if not undecodable:
        return catalog
    return PriceCatalog(
        catalog,
        skipped_count=catalog.skipped_count + undecodable,
    )


__all__ = [
    "parse_timestamp",
    "parse_price",
    "observation_from_record",
    "build_price_catalog",
    "build_price_catalog_from_records",
]
