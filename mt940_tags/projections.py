"""
Projections: turn the groups of a matched tag grammar into a field record.

A grammar rule names its projection in tags.yaml; the same projection is
shared by every tag of a family (60/62/64/65 all use ``balance``,
90C/90D use ``entries``). Each projection declares the named groups it
reads so that the registry can reject a grammar that does not provide
them at load time instead of failing on the first tag.

All projections have the signature ``(match, config) -> dict``. For
scanning rules (the message block) the projection is called once per
match and the resulting dicts are merged in order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable

from mt940_tags.codecs import parse_amount, parse_date, parse_offset_datetime
from mt940_tags.config import ParserConfig

FieldRecord = dict[str, Any]


@dataclass(frozen=True)
class Projection:
    """A projection function plus the named groups it requires."""
    func: Callable[[re.Match, ParserConfig], FieldRecord]
    groups: frozenset[str] = frozenset()


def _date(config: ParserConfig, year: str, month: str, day: str):
    return parse_date(
        year, month, day, year_base=config.year_base, strict=config.strict_dates
    )


def project_fields(match: re.Match, config: ParserConfig) -> FieldRecord:
    """Every named group becomes a field; unmatched optional groups are ""."""
    return {name: value or "" for name, value in match.groupdict().items()}


def project_floor_limit(match: re.Match, config: ParserConfig) -> FieldRecord:
    return {
        "currency": match["currency"],
        "dcMark": match["dcMark"] or "",
        "amount": Decimal(match["amount"]),
    }


def project_date_time(match: re.Match, config: ParserConfig) -> FieldRecord:
    groups = match.groupdict()
    return {
        "dateTimestamp": parse_offset_datetime(
            groups["date"],
            groups["time"],
            groups.get("offset") or "+0000",
            year_base=config.year_base,
        )
    }


def project_balance(match: re.Match, config: ParserConfig) -> FieldRecord:
    return {
        "date": _date(config, match["year"], match["month"], match["day"]),
        "currency": match["currency"],
        "amount": parse_amount(match["mark"], match["amount"]),
    }


def project_entries(match: re.Match, config: ParserConfig) -> FieldRecord:
    return {
        "number": match["number"],
        "currency": match["currency"],
        "amount": Decimal(match["amount"]),
    }


def project_statement_line(match: re.Match, config: ParserConfig) -> FieldRecord:
    """Statement line (tag 61).

    The entry date has no year of its own; it borrows the value date's.
    """
    mark = match["mark"]
    entry_date = ""
    if match["entryMonth"] is not None:
        entry_date = _date(config, match["year"], match["entryMonth"], match["entryDay"])
    return {
        "date": _date(config, match["year"], match["month"], match["day"]),
        "entryDate": entry_date,
        "fundsCode": match["fundsCode"] or "",
        "amount": parse_amount(mark, match["amount"]),
        "isReversal": mark.startswith("R"),
        "transactionType": match["transactionType"],
        "reference": match["reference"],
        "bankReference": match["bankReference"] or "",
        "extraDetails": match["extraDetails"] or "",
        "creditDebitIndicator": mark,
    }


def project_message_block(match: re.Match, config: ParserConfig) -> FieldRecord:
    """One ``{n:content}`` block -> ``{n: content}``; the terminator -> EOB."""
    if match["eob"] is not None:
        return {"EOB": ""}
    return {match["block"]: match["content"]}


PROJECTIONS: dict[str, Projection] = {
    "fields": Projection(project_fields),
    "floor_limit": Projection(
        project_floor_limit, frozenset({"currency", "dcMark", "amount"})
    ),
    "date_time": Projection(project_date_time, frozenset({"date", "time"})),
    "balance": Projection(
        project_balance,
        frozenset({"mark", "year", "month", "day", "currency", "amount"}),
    ),
    "entries": Projection(project_entries, frozenset({"number", "currency", "amount"})),
    "statement_line": Projection(
        project_statement_line,
        frozenset({
            "year", "month", "day", "entryMonth", "entryDay", "mark",
            "fundsCode", "amount", "transactionType", "reference",
            "bankReference", "extraDetails",
        }),
    ),
    "message_block": Projection(
        project_message_block, frozenset({"eob", "block", "content"})
    ),
}
