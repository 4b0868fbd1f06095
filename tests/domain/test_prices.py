"""Tests for price catalog resolution."""

from datetime import datetime, timezone
import logging
import random
from unittest.mock import MagicMock

from wallet_dashboard.domain.models import PriceCatalog, PriceObservation
from wallet_dashboard.domain.services.prices import (
    build_price_catalog,
    build_price_catalog_from_records,
    observation_from_record,
    parse_price,
    parse_timestamp,
)


def _obs(symbol: str, day: int | None, price: float | None) -> PriceObservation:
    observed_at = (
        datetime(2024, 1, day, tzinfo=timezone.utc) if day is not None else None
    )
    return PriceObservation(symbol=symbol, observed_at=observed_at, price=price)


def test_latest_observation_wins() -> None:
    """The maximum timestamp decides the price regardless of feed order."""
    records = [
        {"currency": "ETH", "date": "2024-01-01", "price": 100},
        {"currency": "ETH", "date": "2024-01-03", "price": 110},
        {"currency": "ETH", "date": "2024-01-02", "price": 105},
    ]

    catalog = build_price_catalog_from_records(records)

    assert catalog["ETH"] == 110


def test_null_price_yields_no_entry() -> None:
    """A symbol with only absent prices is not cataloged."""
    catalog = build_price_catalog_from_records(
        [{"currency": "USDC", "date": "2024-01-01", "price": None}]
    )

    assert "USDC" not in catalog
    assert catalog.lookup("USDC") is None
    assert catalog.skipped_count == 1


def test_equal_timestamps_resolve_to_later_feed_entry() -> None:
    """Ties keep the observation appearing last in the feed."""
    observations = [
        _obs("ATOM", 2, 7.0),
        _obs("ATOM", 2, 8.0),
        _obs("ATOM", 1, 9.0),
    ]

    catalog = build_price_catalog(observations)

    assert catalog["ATOM"] == 8.0


def test_absent_price_does_not_overwrite_existing_entry() -> None:
    """A later observation without a price leaves the earlier price intact."""
    observations = [_obs("OSMO", 1, 0.5), _obs("OSMO", 5, None)]

    catalog = build_price_catalog(observations)

    assert catalog["OSMO"] == 0.5


def test_unparsable_timestamp_is_excluded_from_winner() -> None:
    """An observation without a timestamp never wins or counts as earliest."""
    observations = [
        _obs("BUSD", None, 2.0),
        _obs("BUSD", 1, 1.0),
        _obs("LUNA", None, 3.0),
    ]

    catalog = build_price_catalog(observations)

    assert catalog["BUSD"] == 1.0
    assert "LUNA" not in catalog
    assert catalog.skipped_count == 2


def test_empty_input_yields_empty_catalog() -> None:
    catalog = build_price_catalog([])

    assert len(catalog) == 0
    assert catalog.symbols() == []


def test_zero_price_is_a_valid_price() -> None:
    catalog = build_price_catalog([_obs("DUST", 1, 0.0)])

    assert catalog["DUST"] == 0.0


def test_catalog_is_read_only_and_lists_sorted_symbols() -> None:
    catalog = build_price_catalog(
        [_obs("USDC", 1, 1.0), _obs("ATOM", 1, 7.0), _obs("ETH", 1, 1600.0)]
    )

    assert catalog.symbols() == ["ATOM", "ETH", "USDC"]
    assert not hasattr(catalog, "__setitem__")


def test_build_logs_skipped_observations() -> None:
    logger = MagicMock()

    build_price_catalog([_obs("ETH", 1, None), _obs("ETH", 2, 10.0)], logger)

    logger.warning.assert_called_once()
    assert "1" in logger.warning.call_args.args[0]


def test_build_is_silent_without_logger(caplog) -> None:
    with caplog.at_level(logging.DEBUG):
        build_price_catalog([_obs("ETH", 1, None)])

    assert caplog.records == []


def test_records_without_symbol_are_counted_as_skipped() -> None:
    records = [
        {"currency": "", "date": "2024-01-01", "price": 1},
        {"date": "2024-01-01", "price": 1},
        "not-a-record",
        {"currency": "ETH", "date": "2024-01-01", "price": 1},
    ]

    catalog = build_price_catalog_from_records(records)

    assert dict(catalog) == {"ETH": 1.0}
    assert catalog.skipped_count == 3


def test_parse_timestamp_handles_iso_variants() -> None:
    """Zulu suffix, offsets and date-only forms compare on one timeline."""
    zulu = parse_timestamp("2023-08-29T07:10:40.000Z")
    offset = parse_timestamp("2023-08-29T09:10:40+02:00")
    naive = parse_timestamp("2023-08-29T07:10:40")
    date_only = parse_timestamp("2023-08-29")

    assert zulu == offset == naive
    assert date_only < zulu


def test_parse_timestamp_accepts_extended_iso_forms() -> None:
    """Basic dates and short fractions resolve on the same timeline."""
    basic = parse_timestamp("20240101")
    short_fraction = parse_timestamp("2024-01-01T00:00:00.5000+00:00")

    assert basic == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert short_fraction == datetime(2024, 1, 1, 0, 0, 0, 500000, tzinfo=timezone.utc)


def test_parse_timestamp_rejects_garbage() -> None:
    assert parse_timestamp("yesterday") is None
    assert parse_timestamp("") is None
    assert parse_timestamp(None) is None
    assert parse_timestamp(1693292440) is None


def test_parse_price_rejects_invalid_values() -> None:
    assert parse_price(None) is None
    assert parse_price(True) is None
    assert parse_price(float("nan")) is None
    assert parse_price(float("inf")) is None
    assert parse_price(-1) is None
    assert parse_price("abc") is None
    assert parse_price("1.5") == 1.5
    assert parse_price(3) == 3.0


def test_observation_from_record_keeps_invalid_fields_as_none() -> None:
    observation = observation_from_record(
        {"currency": " ETH ", "date": "nope", "price": "x"}
    )

    assert observation == PriceObservation("ETH", None, None)


def _reference_winner(
    observations: list[PriceObservation],
) -> dict[str, float]:
    """Pick the winner per symbol by scanning for the maximum timestamp."""
    winners: dict[str, tuple[datetime, int, float]] = {}
    for index, observation in enumerate(observations):
        if observation.price is None or observation.observed_at is None:
            continue
        candidate = (observation.observed_at, index, observation.price)
        current = winners.get(observation.symbol)
        if current is None or candidate[:2] > current[:2]:
            winners[observation.symbol] = candidate
    return {symbol: entry[2] for symbol, entry in winners.items()}


def test_catalog_matches_maximum_timestamp_rule_for_random_feeds() -> None:
    """One entry per priced symbol, equal to its latest observation."""
    rng = random.Random(20240101)
    symbols = ["ETH", "ATOM", "OSMO", "USDC", "NEO"]
    for _ in range(200):
        observations = [
            _obs(
                rng.choice(symbols),
                rng.choice([None, 1, 2, 3, 4]),
                rng.choice([None, round(rng.uniform(0, 100), 2)]),
            )
            for _ in range(rng.randint(0, 12))
        ]

        catalog = build_price_catalog(observations)

        assert isinstance(catalog, PriceCatalog)
        assert dict(catalog) == _reference_winner(observations)


def test_parse_price_accepts_decimal() -> None:
    from decimal import Decimal

    assert parse_price(Decimal("1.25")) == 1.25
