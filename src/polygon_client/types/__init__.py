#!/usr/bin/env python
"""Typed response models for the polygon.io REST API.

Models are grouped by API area:
- reference data (tickers, news, markets, splits, dividends, market status)
- stock equities (exchanges, trades, quotes, aggregates, snapshots)
- forex and crypto aggregates
- financial statements and their concept keys
"""

from polygon_client.types.base import PolygonModel, decode_response
from polygon_client.types.crypto import (
    CryptoAggregates,
    CryptoAggregatesResponse,
    CryptoDailyOpenCloseResponse,
    CryptoExchange,
    CryptoExchangesResponse,
    CryptoGroupedDailyResponse,
    CryptoOpenTrades,
    CryptoPreviousCloseResponse,
)
from polygon_client.types.enums import DividendType, SnapshotDirection, TickType, Timespan
from polygon_client.types.financials import (
    FAC_REVENUES,
    FUNDAMENTAL_ACCOUNTING_CONCEPTS,
    FinancialDimensions,
    FundamentalAccountingConcept,
    ReferenceStockFinancialsResponse,
    ReferenceStockFinancialsResult,
    ReferenceStockFinancialsVXResponse,
    ReferenceStockFinancialsVXResult,
)
from polygon_client.types.forex import (
    ForexCurrenciesAggregates,
    ForexCurrenciesAggregatesResponse,
    ForexCurrenciesGroupedDailyResponse,
    ForexCurrenciesPreviousCloseResponse,
)
from polygon_client.types.reference import (
    Address,
    Locale,
    Market,
    MarketStatusUpcoming,
    Publisher,
    ReferenceLocalesResponse,
    ReferenceMarketHolidaysResponse,
    ReferenceMarketStatusNowResponse,
    ReferenceMarketsResponse,
    ReferenceStockDividendsResponse,
    ReferenceStockDividendsResult,
    ReferenceStockSplitsResponse,
    ReferenceStockSplitsResult,
    ReferenceTicker,
    ReferenceTickerDetailsResponse,
    ReferenceTickerDetailsResponseVX,
    ReferenceTickerDetailsResultsVX,
    ReferenceTickerNewsResponse,
    ReferenceTickerNewsResult,
    ReferenceTickersResponse,
    ReferenceTickerTypesResponse,
    ReferenceTickerTypesResults,
)
from polygon_client.types.stocks import (
    StockEquitiesAggregates,
    StockEquitiesAggregatesResponse,
    StockEquitiesConditionMappingsResponse,
    StockEquitiesDailyOpenCloseResponse,
    StockEquitiesExchange,
    StockEquitiesExchangesResponse,
    StockEquitiesGroupedDailyResponse,
    StockEquitiesHistoricTradesResponse,
    StockEquitiesLastQuoteForASymbolResponse,
    StockEquitiesPreviousCloseResponse,
    StockEquitiesQuote,
    StockEquitiesSnapshotAllTickersResponse,
    StockEquitiesSnapshotGainersLosersResponse,
    StockEquitiesSnapshotSingleTickerResponse,
    StockEquitiesTickerSnapshot,
    StockEquitiesTrade,
)

__all__ = [
    "FAC_REVENUES",
    "FUNDAMENTAL_ACCOUNTING_CONCEPTS",
    # Reference
    "Address",
    # Crypto
    "CryptoAggregates",
    "CryptoAggregatesResponse",
    "CryptoDailyOpenCloseResponse",
    "CryptoExchange",
    "CryptoExchangesResponse",
    "CryptoGroupedDailyResponse",
    "CryptoOpenTrades",
    "CryptoPreviousCloseResponse",
    # Enums
    "DividendType",
    # Financials
    "FinancialDimensions",
    # Forex
    "ForexCurrenciesAggregates",
    "ForexCurrenciesAggregatesResponse",
    "ForexCurrenciesGroupedDailyResponse",
    "ForexCurrenciesPreviousCloseResponse",
    "FundamentalAccountingConcept",
    "Locale",
    "Market",
    "MarketStatusUpcoming",
    # Base
    "PolygonModel",
    "Publisher",
    "ReferenceLocalesResponse",
    "ReferenceMarketHolidaysResponse",
    "ReferenceMarketStatusNowResponse",
    "ReferenceMarketsResponse",
    "ReferenceStockDividendsResponse",
    "ReferenceStockDividendsResult",
    "ReferenceStockFinancialsResponse",
    "ReferenceStockFinancialsResult",
    "ReferenceStockFinancialsVXResponse",
    "ReferenceStockFinancialsVXResult",
    "ReferenceStockSplitsResponse",
    "ReferenceStockSplitsResult",
    "ReferenceTicker",
    "ReferenceTickerDetailsResponse",
    "ReferenceTickerDetailsResponseVX",
    "ReferenceTickerDetailsResultsVX",
    "ReferenceTickerNewsResponse",
    "ReferenceTickerNewsResult",
    "ReferenceTickerTypesResponse",
    "ReferenceTickerTypesResults",
    "ReferenceTickersResponse",
    "SnapshotDirection",
    # Stocks
    "StockEquitiesAggregates",
    "StockEquitiesAggregatesResponse",
    "StockEquitiesConditionMappingsResponse",
    "StockEquitiesDailyOpenCloseResponse",
    "StockEquitiesExchange",
    "StockEquitiesExchangesResponse",
    "StockEquitiesGroupedDailyResponse",
    "StockEquitiesHistoricTradesResponse",
    "StockEquitiesLastQuoteForASymbolResponse",
    "StockEquitiesPreviousCloseResponse",
    "StockEquitiesQuote",
    "StockEquitiesSnapshotAllTickersResponse",
    "StockEquitiesSnapshotGainersLosersResponse",
    "StockEquitiesSnapshotSingleTickerResponse",
    "StockEquitiesTickerSnapshot",
    "StockEquitiesTrade",
    "TickType",
    "Timespan",
    "decode_response",
]
