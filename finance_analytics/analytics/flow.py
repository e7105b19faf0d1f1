"""
Flow Graph Builder

Builds a directed weighted graph of money moved between accounts from
transfer transactions whose descriptions follow the convention

    <label> - <source> - <target>

The convention is parsed by a small standalone function so it can be
replaced without touching the graph building. Records that do not follow
it are skipped and counted; they never abort the batch.
"""

from decimal import Decimal
from typing import Callable, Iterable, Optional

from finance_analytics.analytics.filters import in_category
from finance_analytics.models.records import Category, Transaction, category_name_map
from finance_analytics.models.results import FlowGraph, FlowLink


DEFAULT_DELIMITER = " - "
DEFAULT_TRANSFER_CATEGORY = "Transferências"

TransferParser = Callable[[str], Optional[tuple[str, str]]]


def parse_transfer_description(
    description: str,
    delimiter: str = DEFAULT_DELIMITER,
) -> Optional[tuple[str, str]]:
    """
    Extract (source, target) from a transfer description.

    Returns None when the second or third token is missing or blank.
    Tokens beyond the third are ignored.
    """
    if not description:
        return None

    parts = description.split(delimiter)
    if len(parts) < 3:
        return None

    source, target = parts[1].strip(), parts[2].strip()
    if not source or not target:
        return None
    return source, target


def build_flow_graph(
    transactions: Iterable[Transaction],
    categories: Optional[Iterable[Category]] = None,
    transfer_category: str = DEFAULT_TRANSFER_CATEGORY,
    parser: Optional[TransferParser] = None,
) -> FlowGraph:
    """
    Build the transfer flow graph.

    Args:
        transactions: Snapshot transactions.
        categories: Known categories; the transfer category may be given
            by id or by display name.
        transfer_category: Category that holds transfers.
        parser: Description parser; defaults to the ' - ' convention.
    """
    parse = parser or parse_transfer_description
    names = category_name_map(categories)

    nodes: dict[str, None] = {}
    links: list[FlowLink] = []
    skipped = 0

    for t in transactions:
        if not in_category(t, transfer_category, names) or t.amount == Decimal("0"):
            continue

        endpoints = parse(t.description)
        if endpoints is None:
            skipped += 1
            continue

        source, target = endpoints
        nodes.setdefault(source)
        nodes.setdefault(target)
        links.append(FlowLink(source=source, target=target, amount=t.amount))

    return FlowGraph(nodes=list(nodes), links=links, skipped=skipped)
