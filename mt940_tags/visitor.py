"""
Visitor interface for parsed tags.

``Tag.accept(visitor)`` looks up ``visit_<kind>`` on the visitor, so any
object with the right method names works; subclassing is not required.
TagVisitor spells the full set out for type checkers. A visitor that only
cares about a few kinds can implement just those, as long as it is never
handed the others.

Alternatively, switch on ``tag.kind`` directly::

    if tag.kind is TagKind.STATEMENT_LINE:
        ...
"""

from __future__ import annotations

from typing import Any, Protocol

from mt940_tags.tags import Tag


class TagVisitor(Protocol):
    def visit_transaction_reference_number(self, tag: Tag) -> Any: ...
    def visit_related_reference(self, tag: Tag) -> Any: ...
    def visit_account_identification(self, tag: Tag) -> Any: ...
    def visit_statement_number(self, tag: Tag) -> Any: ...
    def visit_debit_and_credit_floor_limit(self, tag: Tag) -> Any: ...
    def visit_date_time_indication(self, tag: Tag) -> Any: ...
    def visit_non_swift(self, tag: Tag) -> Any: ...
    def visit_opening_balance(self, tag: Tag) -> Any: ...
    def visit_closing_balance(self, tag: Tag) -> Any: ...
    def visit_number_and_sum_of_entries(self, tag: Tag) -> Any: ...
    def visit_statement_line(self, tag: Tag) -> Any: ...
    def visit_transaction_details(self, tag: Tag) -> Any: ...
    def visit_closing_available_balance(self, tag: Tag) -> Any: ...
    def visit_forward_available_balance(self, tag: Tag) -> Any: ...
    def visit_message_block(self, tag: Tag) -> Any: ...
