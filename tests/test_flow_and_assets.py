"""Tests for the transfer flow graph and asset class analysis."""

import pytest
from decimal import Decimal

from finance_analytics.analytics.assets import analyze_asset_class
from finance_analytics.analytics.flow import build_flow_graph, parse_transfer_description


class TestParseTransferDescription:
    """Tests for the transfer description convention."""

    def test_parses_source_and_target(self):
        assert parse_transfer_description("Transfer - Checking - Savings") == ("Checking", "Savings")

    def test_extra_tokens_ignored(self):
        assert parse_transfer_description("PIX - A - B - note") == ("A", "B")

    @pytest.mark.parametrize("description", [
        "",
        "Transfer",
        "Transfer - Checking",
        "Transfer - Checking - ",
        "Transfer -  - Savings",
        "Transfer-Checking-Savings",
    ])
    def test_malformed_returns_none(self, description):
        assert parse_transfer_description(description) is None

    def test_custom_delimiter(self):
        assert parse_transfer_description("T|A|B", delimiter="|") == ("A", "B")


class TestBuildFlowGraph:
    """Tests for the flow graph builder."""

    def test_builds_nodes_and_links(self, tx, categories):
        transactions = [
            tx("100", category="transfers", description="T - Checking - Savings"),
            tx("50", category="transfers", description="T - Savings - Broker"),
            tx("999", category="food", description="T - Food - Market"),
        ]
        graph = build_flow_graph(transactions, categories, "Transferências")
        assert graph.nodes == ["Checking", "Savings", "Broker"]
        assert [(l.source, l.target, l.amount) for l in graph.links] == [
            ("Checking", "Savings", Decimal("100")),
            ("Savings", "Broker", Decimal("50")),
        ]
        assert graph.skipped == 0

    def test_matches_raw_category_id(self, tx):
        transactions = [tx("10", category="Transferências", description="T - A - B")]
        graph = build_flow_graph(transactions, [], "Transferências")
        assert len(graph.links) == 1

    def test_malformed_records_skipped(self, tx, categories):
        transactions = [
            tx("10", category="transfers", description="Broken"),
            tx("20", category="transfers", description="T - A - B"),
            tx("30", category="transfers", description="T - OnlySource"),
        ]
        graph = build_flow_graph(transactions, categories, "Transferências")
        assert graph.nodes == ["A", "B"]
        assert len(graph.links) == 1
        assert graph.skipped == 2

    def test_zero_amount_ignored(self, tx, categories):
        transactions = [tx("0", category="transfers", description="T - A - B")]
        graph = build_flow_graph(transactions, categories, "Transferências")
        assert graph.is_empty
        assert graph.skipped == 0

    def test_custom_parser(self, tx, categories):
        transactions = [tx("10", category="transfers", description="A>B")]

        def arrow(description):
            source, _, target = description.partition(">")
            return (source, target) if source and target else None

        graph = build_flow_graph(transactions, categories, "Transferências", parser=arrow)
        assert graph.nodes == ["A", "B"]

    def test_empty(self):
        graph = build_flow_graph([])
        assert graph.nodes == []
        assert graph.links == []


class TestAnalyzeAssetClass:
    """Tests for asset class performance."""

    def test_performance(self, tx, categories):
        transactions = [
            tx("1000", "expense", "invest", description="Compra criptomoedas BTC"),
            tx("500", "expense", "invest", description="Compra criptomoedas ETH"),
            tx("1800", "income", "invest", description="Valor atual criptomoedas"),
            tx("700", "expense", "invest", description="Tesouro Direto"),
            tx("50", "expense", "food", description="criptomoedas sticker"),
        ]
        result = analyze_asset_class(transactions, categories)
        assert result.invested == Decimal("1500")
        assert result.value == Decimal("1800")
        assert result.performance == Decimal("300")
        assert result.transaction_count == 3
        assert result.average_cost == Decimal("500")

    def test_empty_subset_average_not_available(self, tx, categories):
        result = analyze_asset_class([tx("10", description="Groceries")], categories)
        assert result.invested == 0
        assert result.value == 0
        assert result.performance == 0
        assert result.average_cost is None
        assert result.transaction_count == 0

    def test_custom_category_and_marker(self, tx):
        transactions = [tx("300", "expense", "Stocks", description="buy ACME shares")]
        result = analyze_asset_class(transactions, [], "Stocks", "shares")
        assert result.invested == Decimal("300")
        assert result.average_cost == Decimal("300")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
