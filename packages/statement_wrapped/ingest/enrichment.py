"""Turn a :class:`RawRecord` into an :class:`EnrichedTransaction`.

Shared by both dialect adapters so that identifiers, classification, category
splitting and merchant cleanup behave identically regardless of the source.
"""

from __future__ import annotations

import datetime as dt

from ..categories import split_category
from ..classification import classify_transaction
from ..merchants import extract_merchant_name
from ..models import EnrichedTransaction, ForeignCurrencyDetail, RawRecord


def transaction_id(raw: RawRecord, row_index: int) -> str:
    """Use the statement reference when present, else ``"<date>-<row_index>"``.

    ``row_index`` is the row's position in the source file, so synthesized ids
    never collide within one parse even when earlier rows were dropped.
    """

    reference = raw.reference.replace("'", "").strip()
    if reference:
        return reference
    return f"{raw.date}-{row_index}"


def enrich(
    raw: RawRecord,
    row_index: int,
    parsed_date: dt.date,
    *,
    foreign_currency: ForeignCurrencyDetail | None = None,
) -> EnrichedTransaction:
    main_category, sub_category = split_category(raw.category)
    return EnrichedTransaction(
        id=transaction_id(raw, row_index),
        date=raw.date,
        description=raw.description,
        amount=raw.amount,
        parsed_date=parsed_date,
        absolute_amount=abs(raw.amount),
        kind=classify_transaction(raw.description, raw.amount),
        main_category=main_category,
        sub_category=sub_category,
        merchant_name=extract_merchant_name(raw.description),
        foreign_currency=foreign_currency,
        extended_details=raw.extended_details,
        appears_on_statement=raw.appears_on_statement,
        address=raw.address,
        town_city=raw.town_city,
        postcode=raw.postcode,
        country=raw.country,
        reference=raw.reference,
        category=raw.category,
    )


__all__ = ["enrich", "transaction_id"]
